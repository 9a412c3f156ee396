"""
Base constraint interface.

A Constraint is an immutable predicate plus the wording needed to explain
why a value does not satisfy it. Constraints are evaluated through
evaluate(), which either returns silently, returns a bool (silent form), or
raises ExpectationFailedError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NoReturn

from ..exceptions import ExpectationFailedError
from ..exporter import export

if TYPE_CHECKING:
    from ..comparator import ComparisonFailure


class Constraint(ABC):
    """
    Abstract base class for constraints.

    Subclasses implement matches() and to_string(). Constraints whose
    failure needs a structured diff (the equality family, for example)
    override evaluate() and pass a ComparisonFailure to fail().

    Two constraints are equal when they have the same type and the same
    construction parameters.

    Example:
        constraint = IsEqual(5)

        constraint.evaluate(5)                       # returns None
        constraint.evaluate(6, return_result=True)   # returns False
        constraint.evaluate(6, "checking total")     # raises ExpectationFailedError
    """

    def evaluate(self, other: Any, description: str = "", return_result: bool = False) -> bool | None:
        """
        Evaluate the constraint for a value.

        Args:
            other: Value to evaluate
            description: Message prefix shown before the failure explanation
            return_result: Return the outcome instead of raising on failure

        Returns:
            The outcome when return_result is True, otherwise None

        Raises:
            ExpectationFailedError: If the value does not match and
                return_result is False
        """
        success = self.matches(other)

        if return_result:
            return success

        if not success:
            self.fail(other, description)

        return None

    @abstractmethod
    def matches(self, other: Any) -> bool:
        """Pure predicate: True if the value satisfies the constraint."""
        pass

    @abstractmethod
    def to_string(self) -> str:
        """Describe the constraint, e.g. "is equal to 5"."""
        pass

    def count(self) -> int:
        """Number of leaf predicates this constraint represents."""
        return 1

    def fail(
        self,
        other: Any,
        description: str,
        comparison_failure: ComparisonFailure | None = None,
    ) -> NoReturn:
        """Raise ExpectationFailedError explaining why other failed."""
        failure_description = f"Failed asserting that {self.failure_description(other)}."

        additional = self.additional_failure_description(other)
        if additional:
            failure_description = f"{failure_description}\n{additional}"

        if description:
            failure_description = f"{description}\n{failure_description}"

        raise ExpectationFailedError(failure_description, comparison_failure)

    def failure_description(self, other: Any) -> str:
        """
        Describe the failing value and constraint as a sentence fragment.

        The result is used after "Failed asserting that ...".
        """
        return f"{export(other)} {self.to_string()}"

    def additional_failure_description(self, other: Any) -> str:
        """Extra lines appended to the failure message."""
        return ""

    def to_string_in_context(self, operator: Constraint) -> str:
        """
        Describe this constraint as a child of operator.

        Returns an empty string to let the operator render the child itself.
        """
        return ""

    def failure_description_in_context(self, operator: Constraint, other: Any) -> str:
        return ""

    def _parameters(self) -> dict[str, Any]:
        return vars(self)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._parameters() == other._parameters()

    __hash__ = None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.to_string()!r}>"
