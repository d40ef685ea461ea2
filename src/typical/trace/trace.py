from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Literal, Protocol, overload

from typical.types import T_contra

if TYPE_CHECKING:
    from typical.predicate import Predicate
    from typical.types import LogicBinOp, LogicOp, TraceOp


class TraceStyle(Protocol):
    """
    Protocol for trace style rendering.
    """

    def render(self, trace: Trace, level: int = 0) -> str:
        """
        Render the trace object into a string representation with a specified indentation level.

        Returns:
            A string representation of the trace object with the specified indentation level.
        """
        ...


class DefaultTraceStyle:
    """
    Plain text tree, one node per line, children indented under their operator.

    Examples:
        ```
        ✗ and
          ✓ host is example.com
          ✗ scheme is https
        ```
    """

    def __init__(self, indent: str = "  ", passed: str = "✓", failed: str = "✗"):
        self.indent = indent
        self.passed = passed
        self.failed = failed

    def label(self, trace: Trace) -> str:
        if trace.operator == "leaf":
            return trace.desc or repr(trace.node)
        if trace.desc:
            return f"{trace.operator}: {trace.desc}"
        return trace.operator

    def render(self, trace: Trace, level: int = 0) -> str:
        mark = self.passed if trace.success else self.failed
        lines = [f"{self.indent * level}{mark} {self.label(trace)}"]
        lines.extend(self.render(child, level + 1) for child in trace.children)
        return "\n".join(lines)


@dataclass(kw_only=True, slots=True, frozen=True)
class Trace(Generic[T_contra]):
    """
    Record the evaluation of a predicate tree.

    Only evaluated operands appear in ``children``: a short-circuited AND, OR or aggregate stops
    recording where evaluation stopped.
    """

    success: bool
    operator: TraceOp
    children: tuple[Trace[T_contra], ...] = field(default=())

    node: Predicate[T_contra] | None = field(default=None, repr=False, compare=False)
    desc: str | None = field(default=None)
    value: T_contra | None = field(default=None, repr=False)
    elapsed: float = field(default=0.0, compare=False)

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        return self.render()

    def render(self, style: TraceStyle | None = None) -> str:
        """
        Render the trace with ``style``, [typical.trace.DefaultTraceStyle][] when omitted.
        """
        return (style or DefaultTraceStyle()).render(self)

    def walk(self) -> Iterator[Trace[T_contra]]:
        """
        Yield this trace and every descendant, depth first.
        """
        stack: list[Trace[T_contra]] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    @overload
    def __logic_help(
        self,
        op: LogicBinOp,
        other: Trace | bool,  # noqa: FBT001
    ) -> Trace: ...

    @overload
    def __logic_help(
        self,
        op: Literal["not"],
        other: None,
    ) -> Trace: ...

    def __logic_help(self, op: LogicOp, other: Trace | bool | None) -> Trace:  # noqa: FBT001
        if op != "not":
            if isinstance(other, bool):
                other_trace = Trace(success=other, operator="PURE_BOOL")
            elif isinstance(other, Trace):
                other_trace = other
            else:
                return NotImplemented
            children = (self, other_trace)
            elapsed = self.elapsed + other_trace.elapsed
            if op == "and":
                success = self.success and other_trace.success
            elif op == "or":
                success = self.success or other_trace.success
            else:
                msg = f"Invalid logic operation: {op}"
                raise ValueError(msg)
        else:
            children = (self,)
            elapsed = self.elapsed
            success = not self.success

        return self.__class__(
            children=children,
            elapsed=elapsed,
            success=success,
            operator=op,
        )

    def __and__(self, other: Trace | bool) -> Trace:
        return self.__logic_help("and", other)

    def __or__(self, other: Trace | bool) -> Trace:
        return self.__logic_help("or", other)

    def __invert__(self) -> Trace:
        return self.__logic_help("not", None)
