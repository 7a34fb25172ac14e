"""Outcome codes for AWS operations.

Every IAM call made by the clients package resolves to one of these codes so
the reconciler can branch on "not found" without inspecting botocore errors.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Call completed
        TRANSIENT_ERROR: Throttling or connection failure
        PERMANENT_ERROR: Validation, conflict or any unclassified AWS error
        UNAUTHORIZED: Credentials rejected or action denied
        NOT_FOUND: Group, user or membership does not exist (NoSuchEntity)
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
