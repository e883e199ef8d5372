"""A match chain: a switch expression built from immutable values.

    create(value) \
        .match(1).then('one') \
        .match_one_of([2, 3]).then('a few') \
        .scratch()('many')

A chain starts unresolved, holding the seed and the comparator used to test
candidates against it. The first candidate that matches resolves the chain
to a result. A resolved chain forgets its seed and comparator, and ignores
every later operation.

`match` returns an attempt. The attempt remembers whether that one
comparison succeeded, and its finalizers, `then` and `evaluate`, turn it
back into a chain.
"""

import dataclasses
import logging
import typing as t

from itch import functional as fn
from itch.comparators import Comparator, one_of, strict_equals

class AttemptSpent(RuntimeError):
    """An attempt was finalized more than once."""

@dataclasses.dataclass(frozen=True)
class Literal:
    """A result to store as-is, even if it is callable."""
    value: t.Any

@dataclasses.dataclass(frozen=True)
class Deferred:
    """A result computed by calling `thunk` only if the attempt matched."""
    thunk: t.Callable[[], t.Any]

lazy = Deferred

def force(result):
    if isinstance(result, Literal):
        return result.value
    if isinstance(result, Deferred):
        return result.thunk()
    # A bare function is a thunk too.
    if callable(result):
        return result()
    return result

class Attempt:

    def __init__(self, chain, matched: bool):
        # The chain to return when the comparison failed.
        self._chain = chain
        self._matched = matched
        self._spent = False

    def _finalize(self, compute):
        if self._spent:
            raise AttemptSpent('an attempt can be finalized only once')
        self._spent = True
        if not self._matched:
            return self._chain
        result = compute()
        logging.debug(f'resolved to {result!r}')
        return Resolved(result)

    def then(self, result) -> 'Chain':
        """Resolve to `result`, unevaluated, if the comparison succeeded."""
        return self._finalize(lambda: result)

    def evaluate(self, result) -> 'Chain':
        """Resolve to `result`, computing it first if it is deferred."""
        return self._finalize(lambda: force(result))

@dataclasses.dataclass(frozen=True)
class Unresolved:
    seed: t.Any
    comparator: Comparator = strict_equals

    def using(self, comparator: Comparator) -> 'Unresolved':
        return Unresolved(self.seed, comparator)

    def match(
        self, candidate, comparator: t.Optional[Comparator] = None
    ) -> Attempt:
        # An override applies to this attempt alone.
        # A failed attempt returns this chain with its own comparator.
        if comparator is None:
            comparator = self.comparator
        return Attempt(self, comparator(self.seed, candidate))

    def match_one_of(
        self, candidates, comparator: t.Optional[Comparator] = None
    ) -> Attempt:
        if comparator is None:
            comparator = self.comparator
        return self.match(candidates, one_of(comparator))

    matchOneOf = match_one_of

    def scratch(self):
        return fn.identity

@dataclasses.dataclass(frozen=True)
class Resolved:
    result: t.Any

    def using(self, comparator: Comparator) -> 'Resolved':
        return self

    def match(
        self, candidate, comparator: t.Optional[Comparator] = None
    ) -> Attempt:
        return Attempt(self, False)

    def match_one_of(
        self, candidates, comparator: t.Optional[Comparator] = None
    ) -> Attempt:
        return Attempt(self, False)

    matchOneOf = match_one_of

    def scratch(self):
        return fn.constant(self.result)

Chain = t.Union[Unresolved, Resolved]

def create(seed) -> Unresolved:
    return Unresolved(seed)
