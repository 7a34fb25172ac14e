"""Errors for the IAM group membership module."""

from typing import Optional

from infrastructure.operations.result import OperationResult


class GroupMembershipError(Exception):
    """Base class for every error raised by the group membership resource."""


class IntegrationError(GroupMembershipError):
    """Raised when an IAM call fails and the failure is not tolerated.

    Attributes:
        message: human-friendly message
        response: the OperationResult returned by the IAM client
    """

    def __init__(self, message: str, response: Optional[OperationResult] = None):
        super().__init__(message)
        self.response = response

    @property
    def error_code(self) -> Optional[str]:
        return self.response.error_code if self.response else None

    @property
    def status(self):
        return self.response.status if self.response else None


class ImportIdFormatError(GroupMembershipError, ValueError):
    """Raised when an import identifier cannot be interpreted as a group name."""

    def __init__(self, raw_id: str):
        super().__init__(
            f"unexpected format of ID ({raw_id!r}), expected <group-name>"
        )
        self.raw_id = raw_id


class ConfigurationError(GroupMembershipError, ValueError):
    """Raised when a resource configuration does not match the schema."""
