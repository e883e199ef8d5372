"""Comparators decide whether a seed matches a candidate.

A comparator is any function of two arguments, `(seed, candidate)`,
that returns a boolean. It must not have side effects.
"""

import math
import operator
import typing as t

Comparator = t.Callable[[t.Any, t.Any], bool]

def strict_equals(seed, candidate) -> bool:
    """Equality without coercion between types.

    `1` does not strictly equal `1.0` or `True`.
    Identity wins over `==`: a NaN strictly equals itself.
    """
    if seed is candidate:
        return True
    return type(seed) is type(candidate) and seed == candidate

equals = operator.eq
identical = operator.is_

def casefold_equals(seed, candidate) -> bool:
    if not isinstance(seed, str) or not isinstance(candidate, str):
        return strict_equals(seed, candidate)
    return seed.casefold() == candidate.casefold()

def close_to(abs_tol=0.0, rel_tol=1e-09) -> Comparator:
    def compare(seed, candidate):
        return math.isclose(seed, candidate, rel_tol=rel_tol, abs_tol=abs_tol)
    return compare

def one_of(comparator: Comparator) -> Comparator:
    """Adapt `comparator` to test a seed against a collection of candidates.

    The adapted comparator succeeds if any candidate matches.
    """
    def compare(seed, candidates):
        return any(comparator(seed, c) for c in candidates)
    return compare
