from typical.types import PredicateFn

from .combinators import all_of, and_, any_of, not_, or_, pick, with_all, with_any
from .errs import NotAPredicateError, PredicateError
from .predicate import Matching, Predicate, is_predicate, predicate

__all__ = [
    "Matching",
    "NotAPredicateError",
    "Predicate",
    "PredicateError",
    "PredicateFn",
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
