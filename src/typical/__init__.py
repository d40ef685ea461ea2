from .predicate import (
    Matching,
    NotAPredicateError,
    Predicate,
    PredicateError,
    all_of,
    and_,
    any_of,
    is_predicate,
    not_,
    or_,
    pick,
    predicate,
    with_all,
    with_any,
)
from .trace import DefaultTraceStyle, Trace, TraceStyle

__all__ = [
    "DefaultTraceStyle",
    "Matching",
    "NotAPredicateError",
    "Predicate",
    "PredicateError",
    "Trace",
    "TraceStyle",
    "all_of",
    "and_",
    "any_of",
    "is_predicate",
    "not_",
    "or_",
    "pick",
    "predicate",
    "with_all",
    "with_any",
]
