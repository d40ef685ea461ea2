from __future__ import annotations

import inspect
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeGuard, final, overload

from typical.predicate.errs import NotAPredicateError
from typical.predicate.nodes import AllOf, AnyOf, CompositeNode, Conjunction, Disjunction, Negation, Pick
from typical.trace.trace import Trace
from typical.types import PredicateFn, T_contra

if TYPE_CHECKING:
    from typing import Self


class Predicate(ABC, Generic[T_contra]):
    """
    Capability contract for anything that tests a subject and can be built from a raw test function.

    Every combinator is written once against this contract: results are produced through
    [from_function][typical.predicate.Predicate.from_function] of the left-hand (or first)
    operand's class, so a conforming subclass composes into instances of itself.

    Predicates define no equality; two predicates are only ever the same object.
    """

    __slots__ = ()

    @abstractmethod
    def test(self, subject: T_contra, /) -> bool:
        """
        Evaluate the wrapped condition against ``subject``.

        Errors raised by the wrapped condition propagate to the caller untouched.
        """

    @classmethod
    @abstractmethod
    def from_function(cls, fn: PredicateFn[T_contra], /) -> Self:
        """
        Build a new instance directly from a raw test function.
        """

    @overload
    def __call__(self, subject: T_contra, /, *, trace: Literal[False] = False) -> bool: ...

    @overload
    def __call__(self, subject: T_contra, /, *, trace: Literal[True]) -> Trace[T_contra]: ...

    def __call__(self, subject: T_contra, /, *, trace: bool = False) -> bool | Trace[T_contra]:
        """
        Evaluate the predicate, optionally recording a [typical.trace.Trace][].
        """
        if trace:
            return self.explain(subject)
        return self.test(subject)

    def explain(self, subject: T_contra, /) -> Trace[T_contra]:
        """
        Evaluate the predicate and record the evaluation.

        The base implementation treats the predicate as opaque and records a single leaf.
        """
        start = time.perf_counter()
        success = self.test(subject)
        return Trace(
            success=success,
            operator="leaf",
            node=self,
            desc=getattr(self, "desc", None),
            value=subject,
            elapsed=time.perf_counter() - start,
        )

    def __and__(self, other: Predicate[T_contra]) -> Self:
        """
        Combine this predicate with another using logical AND.
        """
        if not is_predicate(other):
            return NotImplemented
        return type(self).from_function(Conjunction(self, other))

    def __or__(self, other: Predicate[T_contra]) -> Self:
        """
        Combine this predicate with another using logical OR.
        """
        if not is_predicate(other):
            return NotImplemented
        return type(self).from_function(Disjunction(self, other))

    def __invert__(self) -> Self:
        return type(self).from_function(Negation(self))

    @classmethod
    def all_of(cls, *tests: Predicate[T_contra]) -> Self:
        """
        Passes iff every one of ``tests`` passes; an empty call always passes.

        Examples:
            ```python
            valid = Matching.all_of(has_host, is_https, has_path)
            ```
        """
        return cls.from_function(AllOf(collect(tests, "all_of")))

    @classmethod
    def any_of(cls, *tests: Predicate[T_contra]) -> Self:
        """
        Passes iff at least one of ``tests`` passes; an empty call never passes.
        """
        return cls.from_function(AnyOf(collect(tests, "any_of")))

    @classmethod
    def pick(cls, when: Predicate[T_contra], then: Predicate[T_contra], *otherwise: Predicate[T_contra]) -> Self:
        """
        Test ``then`` when ``when`` passes, otherwise test any of ``otherwise``.

        ``when`` is evaluated once per test and only one branch is ever evaluated.
        """
        when, then = collect((when, then), "pick")
        fallback = cls.from_function(AnyOf(collect(otherwise, "pick")))
        return cls.from_function(Pick(when, then, fallback))


@dataclass(frozen=True, eq=False)
@final
class Matching(Predicate[T_contra]):
    """
    Reference predicate: wraps a single test function and calls it on every test.

    Examples:
        ```python
        is_example = Matching[Url](lambda url: url.host == "example.com")
        is_http = Matching[Url](lambda url: url.scheme == "http")

        assert (is_example & is_http).test(Url(host="example.com", scheme="http", path="go/here"))
        ```
    """

    fn: PredicateFn[T_contra]
    desc: str | None = field(default=None, kw_only=True)

    def test(self, subject: T_contra, /) -> bool:
        return bool(self.fn(subject))

    @classmethod
    def from_function(cls, fn: PredicateFn[T_contra], /) -> Matching[T_contra]:
        return cls(fn)

    def explain(self, subject: T_contra, /) -> Trace[T_contra]:
        if isinstance(self.fn, CompositeNode):
            return replace(self.fn.trace(subject), node=self, desc=self.desc)
        return Predicate.explain(self, subject)

    def named(self, desc: str) -> Matching[T_contra]:
        """
        Copy of this predicate carrying ``desc`` as its description.
        """
        return replace(self, desc=desc)

    def __repr__(self) -> str:
        if self.desc:
            return f"{type(self).__name__}({self.desc!r})"
        return f"{type(self).__name__}({self.fn!r})"


def predicate(fn: PredicateFn[T_contra], *, desc: str | None = None) -> Matching[T_contra]:
    """
    Create a Predicate from the function; usable as a decorator.

    The description defaults to the docstring of a plain function; classes and builtins get none.

    Examples:
        ```python
        @predicate
        def is_secure(url: Url) -> bool:
            \"\"\"scheme is https\"\"\"
            return url.scheme == "https"
        ```
    """

    if desc is None and inspect.isfunction(fn):
        desc = fn.__doc__
    return Matching(fn, desc=desc)


def is_predicate(p: Any) -> TypeGuard[Predicate]:  # noqa: ANN401
    """
    Check if the given object is a valid predicate.
    """

    return isinstance(p, Predicate)


def collect(tests: Iterable[Any], combinator: str) -> tuple[Predicate, ...]:
    """
    Snapshot ``tests`` in iteration order, rejecting anything that is not a predicate.

    Raises:
        NotAPredicateError: If an element does not implement the Predicate contract.
    """
    members = tuple(tests)
    for member in members:
        if not is_predicate(member):
            raise NotAPredicateError(member, combinator)
    return members
