from itch.chain import create
from itch.expression import subject, contains, expression, satisfies

def test_identity():
    expr = subject
    assert(expr(1) == 1)

def test_subject_equal():
    pred = (subject == 1)
    assert(pred(1))
    assert(not pred(2))

def test_name_match():
    pred = (subject['id'] == 1)
    assert(pred({'id': 1}))
    assert(not pred({'id': 2}))
    assert(not pred(1))

def test_nested_name_match():
    pred = (subject['a']['b'] == 1)
    assert(pred({'a': {'b': 1}}))
    assert(not pred({'a': {}}))
    assert(not pred({}))

def test_both():
    pred = (subject == 1) | (subject['id'] == 1)
    assert(pred(1))
    assert(not pred(2))
    assert(pred({'id': 1}))
    assert(not pred({'id': 2}))

def test_and_not():
    pred = (subject > 1) & ~(subject == 3)
    assert(pred(2))
    assert(not pred(3))
    assert(not pred(1))

def test_ordering_failed_lookup():
    pred = (subject['n'] >= 0)
    assert(pred({'n': 0}))
    assert(not pred({'n': -1}))
    assert(not pred(5))

def test_contains_failed_lookup():
    pred = contains(subject['tags'], 'x')
    assert(pred({'tags': ['x']}))
    assert(not pred({'id': 1}))
    assert(not satisfies({'id': 1}, pred))
    assert(not contains([1, 2], subject['n'])({}))

def test_or_failed_lookups():
    pred = subject['a'] | subject['b']
    assert(not pred({}))
    assert(pred({'b': True}))
    assert(pred({'a': True}))
    assert(not satisfies({}, pred))

def test_and_failed_lookup():
    pred = (subject == {}) & subject['a']
    assert(not pred({}))

def test_not_equal_failed_lookup():
    pred = (subject['id'] != 1)
    assert(pred({'id': 2}))
    assert(not pred({'id': 1}))
    assert(not pred(1))
    assert(not satisfies(1, pred))
    assert(not create(1).match(pred, satisfies).then('hit').scratch()(False))

def test_decorator():
    # We must test with an asymmetric operation
    # to be sure the argument order is correct.
    @expression()
    def subscript(subject, key):
        return subject[key]
    pred = subscript('id') == 1
    assert(pred({'id': 1}))
    assert(not pred({'id': 2}))
    assert(not pred(1))

def test_contains():
    pred = contains([3, 2, 1], subject)
    assert(pred(2))
    assert(not pred(4))

def test_satisfies():
    assert(satisfies(4, subject > 3))
    assert(not satisfies(2, subject > 3))
    assert(satisfies(4, lambda x: x % 2 == 0))
    assert(satisfies(4, True))

def test_satisfies_failed_lookup():
    assert(not satisfies(1, subject['id']))

def test_guard_in_chain():
    def size(n):
        return create(n) \
            .match(subject < 0, satisfies).then('negative') \
            .match(0).then('zero') \
            .match(subject > 100, satisfies).then('big') \
            .scratch()('small')
    assert(size(-5) == 'negative')
    assert(size(0) == 'zero')
    assert(size(101) == 'big')
    assert(size(7) == 'small')
