"""
Composite test functions produced by the combinators.

Each node is the ``fn`` a combinator hands to ``Predicate.from_function``. Nodes close over
their operands, evaluate them lazily in declaration order and can replay the same
evaluation as a [typical.trace.Trace][] tree.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, final

from typical.trace.trace import Trace
from typical.types import T_contra

if TYPE_CHECKING:
    from typical.predicate.predicate import Predicate
    from typical.types import LogicOp


class CompositeNode(ABC, Generic[T_contra]):
    """
    Base class for test functions built out of other predicates.
    """

    __slots__ = ()

    operator: ClassVar[LogicOp]

    @abstractmethod
    def __call__(self, subject: T_contra, /) -> bool: ...

    @abstractmethod
    def trace(self, subject: T_contra, /) -> Trace[T_contra]:
        """
        Evaluate the node like ``__call__`` does, recording every evaluated operand.
        """


def _summed(children: tuple[Trace, ...]) -> float:
    return sum(child.elapsed for child in children)


@dataclass(frozen=True, slots=True, eq=False)
@final
class Conjunction(CompositeNode[T_contra]):
    """left AND right, right untouched when left fails."""

    operator: ClassVar[LogicOp] = "and"
    left: Predicate[T_contra]
    right: Predicate[T_contra]

    def __call__(self, subject: T_contra, /) -> bool:
        return self.left.test(subject) and self.right.test(subject)

    def trace(self, subject: T_contra, /) -> Trace[T_contra]:
        left = self.left.explain(subject)
        if not left.success:
            return Trace(success=False, operator="and", children=(left,), elapsed=left.elapsed)
        return left & self.right.explain(subject)


@dataclass(frozen=True, slots=True, eq=False)
@final
class Disjunction(CompositeNode[T_contra]):
    """left OR right, right untouched when left passes."""

    operator: ClassVar[LogicOp] = "or"
    left: Predicate[T_contra]
    right: Predicate[T_contra]

    def __call__(self, subject: T_contra, /) -> bool:
        return self.left.test(subject) or self.right.test(subject)

    def trace(self, subject: T_contra, /) -> Trace[T_contra]:
        left = self.left.explain(subject)
        if left.success:
            return Trace(success=True, operator="or", children=(left,), elapsed=left.elapsed)
        return left | self.right.explain(subject)


@dataclass(frozen=True, slots=True, eq=False)
@final
class Negation(CompositeNode[T_contra]):
    operator: ClassVar[LogicOp] = "not"
    op: Predicate[T_contra]

    def __call__(self, subject: T_contra, /) -> bool:
        return not self.op.test(subject)

    def trace(self, subject: T_contra, /) -> Trace[T_contra]:
        return ~self.op.explain(subject)


@dataclass(frozen=True, slots=True, eq=False)
@final
class AllOf(CompositeNode[T_contra]):
    """
    True iff every member passes. Stops at the first failing member; vacuously true when empty.
    """

    operator: ClassVar[LogicOp] = "all"
    members: tuple[Predicate[T_contra], ...]

    def __call__(self, subject: T_contra, /) -> bool:
        for member in self.members:
            if not member.test(subject):
                return False
        return True

    def trace(self, subject: T_contra, /) -> Trace[T_contra]:
        children: list[Trace[T_contra]] = []
        success = True
        for member in self.members:
            child = member.explain(subject)
            children.append(child)
            if not child.success:
                success = False
                break
        evaluated = tuple(children)
        return Trace(success=success, operator="all", children=evaluated, elapsed=_summed(evaluated))


@dataclass(frozen=True, slots=True, eq=False)
@final
class AnyOf(CompositeNode[T_contra]):
    """
    True iff at least one member passes. Stops at the first passing member; false when empty.
    """

    operator: ClassVar[LogicOp] = "any"
    members: tuple[Predicate[T_contra], ...]

    def __call__(self, subject: T_contra, /) -> bool:
        for member in self.members:
            if member.test(subject):
                return True
        return False

    def trace(self, subject: T_contra, /) -> Trace[T_contra]:
        children: list[Trace[T_contra]] = []
        success = False
        for member in self.members:
            child = member.explain(subject)
            children.append(child)
            if child.success:
                success = True
                break
        evaluated = tuple(children)
        return Trace(success=success, operator="any", children=evaluated, elapsed=_summed(evaluated))


@dataclass(frozen=True, slots=True, eq=False)
@final
class Pick(CompositeNode[T_contra]):
    """
    Ternary selector: ``then`` decides when ``when`` passes, ``otherwise`` decides when it fails.
    """

    operator: ClassVar[LogicOp] = "pick"
    when: Predicate[T_contra]
    then: Predicate[T_contra]
    otherwise: Predicate[T_contra]

    def __call__(self, subject: T_contra, /) -> bool:
        if self.when.test(subject):
            return self.then.test(subject)
        return self.otherwise.test(subject)

    def trace(self, subject: T_contra, /) -> Trace[T_contra]:
        when = self.when.explain(subject)
        branch = (self.then if when.success else self.otherwise).explain(subject)
        return Trace(
            success=branch.success,
            operator="pick",
            children=(when, branch),
            elapsed=when.elapsed + branch.elapsed,
        )
