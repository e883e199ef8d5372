"""Subject expressions: predicates over a seed, written as Python operators.

`subject` stands for the value being matched.
`subject['kind'] == 'circle'` builds a function of one argument
that a chain can use as a candidate with the `satisfies` comparator:

    create(shape).match(subject['kind'] == 'circle', satisfies).then(...)
"""

import functools
import operator

class AbstractExpression:
    def __call__(self, subject):
        return subject
    def __eq__(self, rhs):
        return BinaryExpression(operator.eq, self, rhs)
    def __ne__(self, rhs):
        return BinaryExpression(operator.ne, self, rhs)
    def __lt__(self, rhs):
        return BinaryExpression(operator.lt, self, rhs)
    def __le__(self, rhs):
        return BinaryExpression(operator.le, self, rhs)
    def __gt__(self, rhs):
        return BinaryExpression(operator.gt, self, rhs)
    def __ge__(self, rhs):
        return BinaryExpression(operator.ge, self, rhs)
    def __getitem__(self, key):
        return Expression(lambda subject: evaluate(self, subject)[key])
    def __or__(self, rhs):
        return BinaryExpression(operator.or_, self, rhs)
    def __and__(self, rhs):
        return BinaryExpression(operator.and_, self, rhs)
    def __invert__(self):
        return Expression(lambda subject: not evaluate(self, subject))

class Expression(AbstractExpression):
    def __init__(self, function):
        self.function = function
    def __call__(self, subject):
        # A lookup that fails is just a value that matches nothing.
        try:
            return self.function(subject)
        except (LookupError, TypeError) as error:
            return error

_CONNECTIVES = {operator.or_, operator.and_}

def _failed(value):
    return isinstance(value, BaseException)

class BinaryExpression(AbstractExpression):
    def __init__(self, op, lhs, rhs):
        self.op = op
        self.lhs = lhs
        self.rhs = rhs
    def __call__(self, subject):
        lhs = evaluate(self.lhs, subject)
        rhs = evaluate(self.rhs, subject)
        if not (_failed(lhs) or _failed(rhs)):
            return self.op(lhs, rhs)
        # A failed lookup is false under `|` and `&`,
        # and compares with nothing.
        if self.op in _CONNECTIVES:
            return self.op(
                False if _failed(lhs) else lhs,
                False if _failed(rhs) else rhs,
            )
        return False

class Subject(AbstractExpression):
    def __repr__(self):
        return 'subject'

def contains(container, item):
    return BinaryExpression(operator.contains, container, item)

def evaluate(expr, subject):
    return expr(subject) if callable(expr) else expr

def satisfies(seed, predicate) -> bool:
    """Comparator that treats the candidate as a predicate over the seed."""
    value = evaluate(predicate, seed)
    if isinstance(value, BaseException):
        return False
    return bool(value)

def expression():
    def decorator(fn):
        @functools.wraps(fn)
        def decorated(*args, **kwargs):
            return Expression(lambda subject: fn(subject, *args, **kwargs))
        return decorated
    return decorator

subject = Subject()
