"""
Named-function forms of the predicate algebra.

The operators on [typical.predicate.Predicate][] (``&``, ``|``, ``~``) and these functions
share their semantics; the functions additionally accept explicit iterables and reject
non-predicate operands eagerly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from typical.predicate.errs import NotAPredicateError
from typical.predicate.nodes import AllOf, AnyOf
from typical.predicate.predicate import Matching, Predicate, collect, is_predicate

P = TypeVar("P", bound=Predicate)


def _kind_of(members: tuple[Predicate, ...], kind: type[P] | None) -> type[P]:
    if kind is not None:
        return kind
    if members:
        return type(members[0])
    return Matching


def and_(p: P, q: Predicate) -> P:
    """
    ``p AND q``; ``q`` is not evaluated when ``p`` fails.

    Raises:
        NotAPredicateError: If either operand is not a predicate.
    """
    p, q = collect((p, q), "and_")
    return p & q


def or_(p: P, q: Predicate) -> P:
    """
    ``p OR q``; ``q`` is not evaluated when ``p`` passes.

    Raises:
        NotAPredicateError: If either operand is not a predicate.
    """
    p, q = collect((p, q), "or_")
    return p | q


def not_(p: P) -> P:
    if not is_predicate(p):
        raise NotAPredicateError(p, "not_")
    return ~p


def with_all(tests: Iterable[P], *, kind: type[P] | None = None) -> P:
    """
    Passes iff every predicate in ``tests`` passes, checked in iteration order.

    ``tests`` is consumed once, when the predicate is built. An empty iterable yields a
    predicate that always passes.

    Args:
        tests: Predicates to aggregate.
        kind: Predicate class of the result. Defaults to the class of the first element,
            or [typical.predicate.Matching][] when ``tests`` is empty.

    Raises:
        NotAPredicateError: If an element is not a predicate.
    """
    members = collect(tests, "with_all")
    return _kind_of(members, kind).from_function(AllOf(members))


def with_any(tests: Iterable[P], *, kind: type[P] | None = None) -> P:
    """
    Passes iff any predicate in ``tests`` passes, checked in iteration order.

    ``tests`` is consumed once, when the predicate is built. An empty iterable yields a
    predicate that never passes.

    Args:
        tests: Predicates to aggregate.
        kind: Predicate class of the result. Defaults to the class of the first element,
            or [typical.predicate.Matching][] when ``tests`` is empty.

    Raises:
        NotAPredicateError: If an element is not a predicate.
    """
    members = collect(tests, "with_any")
    return _kind_of(members, kind).from_function(AnyOf(members))


def all_of(*tests: P, kind: type[P] | None = None) -> P:
    """
    Variadic form of [with_all][typical.predicate.with_all].
    """
    return with_all(tests, kind=kind)


def any_of(*tests: P, kind: type[P] | None = None) -> P:
    """
    Variadic form of [with_any][typical.predicate.with_any].
    """
    return with_any(tests, kind=kind)


def pick(when: P, then: Predicate, *otherwise: Predicate, kind: type[P] | None = None) -> P:
    """
    Test ``then`` when ``when`` passes, otherwise test any of ``otherwise``.

    The else branch is always an ANY-of: a single candidate behaves like itself, no
    candidates never pass. The result class defaults to the class of ``when``.

    Examples:
        ```python
        secure_host = pick(is_http, is_example, has_path)
        ```
    """
    operands = collect((when, then), "pick")
    return _kind_of(operands, kind).pick(*operands, *otherwise)
