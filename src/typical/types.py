from collections.abc import Callable
from typing import Literal, TypeAlias, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)

PredicateFn: TypeAlias = Callable[[T_contra], bool]

LogicBinOp: TypeAlias = Literal["and", "or"]
LogicAggOp: TypeAlias = Literal["all", "any", "pick"]
LogicOp: TypeAlias = Literal[LogicBinOp, LogicAggOp, "not"]
TraceOp: TypeAlias = Literal[LogicOp, "leaf", "PURE_BOOL"]
