"""Interface for violation reporting."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from async_closure_linter.domain.entities import Violation


class ViolationReporter(Protocol):
    """Protocol for reporting lint results."""

    def report(self, violations: list["Violation"]) -> None:
        """Report violations to the user."""
        ...
