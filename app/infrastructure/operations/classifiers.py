"""Error classifier for AWS SDK exceptions.

Converts botocore exceptions into standardized OperationResult objects so the
IAM client never leaks provider exceptions to its callers.

Usage:
    from infrastructure.operations.classifiers import classify_aws_error

    try:
        response = client.get_group(GroupName="developers")
    except ClientError as e:
        return classify_aws_error(e)
"""

from botocore.exceptions import ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

NOT_FOUND_CODES = ("NoSuchEntity", "ResourceNotFoundException")
THROTTLING_CODES = ("Throttling", "ThrottlingException", "RequestLimitExceeded")
UNAUTHORIZED_CODES = (
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedOperation",
    "InvalidClientTokenId",
    "ExpiredToken",
)


def _retry_after(exc: ClientError):
    value = exc.response.get("RetryAfter")
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Error Code Mapping:
    - NoSuchEntity, ResourceNotFoundException → NOT_FOUND
    - Throttling, ThrottlingException, RequestLimitExceeded → TRANSIENT_ERROR
    - AccessDenied*, UnauthorizedOperation, token errors → UNAUTHORIZED
    - Other ClientError codes (LimitExceeded, EntityAlreadyExists,
      ValidationError, ServiceFailure...) → PERMANENT_ERROR
    - Non-ClientError (BotoCoreError, connection failures) → TRANSIENT_ERROR

    The AWS error code is preserved in ``error_code`` so callers can report it
    unchanged.

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if not isinstance(exc, ClientError):
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_info = exc.response.get("Error", {}) if exc.response else {}
    error_code = error_info.get("Code", "Unknown")
    message = error_info.get("Message") or str(exc)

    if error_code in NOT_FOUND_CODES:
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message, error_code=error_code
        )

    if error_code in THROTTLING_CODES:
        return OperationResult.transient_error(
            message, error_code=error_code, retry_after=_retry_after(exc)
        )

    if error_code in UNAUTHORIZED_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message, error_code=error_code
        )

    return OperationResult.permanent_error(message, error_code=error_code)
