from typing import Any


class PredicateError(Exception):
    """Base Predicate exception."""

    ...


class NotAPredicateError(PredicateError, TypeError):
    """
    Raised when a combinator receives an operand that does not implement the Predicate contract.
    """

    def __init__(self, operand: Any, combinator: str):  # noqa: ANN401
        """
        Args:
            operand: the offending value.
            combinator: name of the combinator that rejected it.
        """
        self.operand = operand
        self.combinator = combinator

        super().__init__(f"{combinator} expects Predicate operands, got {type(operand).__name__}: {operand!r}")
