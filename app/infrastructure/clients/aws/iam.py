"""IAM client for group membership operations.

Provides access to the three IAM calls the membership reconciler needs
(GetGroup, AddUserToGroup, RemoveUserFromGroup) with consistent error
handling and OperationResult return types.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class IamClient:
    """Client for AWS IAM group membership operations.

    All methods return OperationResult. A missing group, user or membership
    is reported with status NOT_FOUND and error_code ``NoSuchEntity``.

    Args:
        session_provider: SessionProvider instance for credential/config management
        default_role_arn: Role assumed for every call unless overridden
        page_size: Optional MaxItems sent with GetGroup
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_role_arn: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> None:
        self._session_provider = session_provider
        self._service_name = "iam"
        self._default_role_arn = default_role_arn
        self._page_size = page_size
        self._logger = logger.bind(component="iam_client")

    def _client_kwargs(self, role_arn: Optional[str]) -> Dict[str, Any]:
        return self._session_provider.build_client_kwargs(
            service_name=self._service_name,
            role_arn=role_arn or self._default_role_arn,
        )

    def get_group(
        self,
        group_name: str,
        marker: Optional[str] = None,
        role_arn: Optional[str] = None,
    ) -> OperationResult:
        """Fetch one page of a group's members.

        Args:
            group_name: IAM group name
            marker: Continuation marker returned by the previous page
            role_arn: Optional cross-account role ARN

        Returns:
            OperationResult whose data is a dict with ``users`` (list of
            user names), ``marker`` (next continuation marker or None) and
            ``is_truncated`` (True when more pages remain).
        """
        params: Dict[str, Any] = {"GroupName": group_name}
        if marker:
            params["Marker"] = marker
        if self._page_size:
            params["MaxItems"] = self._page_size

        result = execute_aws_api_call(
            self._service_name,
            "get_group",
            **self._client_kwargs(role_arn),
            **params,
        )
        if not result.is_success:
            return result

        response = result.data or {}
        is_truncated = bool(response.get("IsTruncated", False))
        page = {
            "users": [u["UserName"] for u in response.get("Users", [])],
            "marker": response.get("Marker") if is_truncated else None,
            "is_truncated": is_truncated,
        }
        return OperationResult.success(data=page, message=result.message)

    def add_user_to_group(
        self,
        user_name: str,
        group_name: str,
        role_arn: Optional[str] = None,
    ) -> OperationResult:
        """Add a user to an IAM group.

        Args:
            user_name: IAM user name
            group_name: IAM group name
            role_arn: Optional cross-account role ARN

        Returns:
            OperationResult with status
        """
        return execute_aws_api_call(
            self._service_name,
            "add_user_to_group",
            **self._client_kwargs(role_arn),
            UserName=user_name,
            GroupName=group_name,
        )

    def remove_user_from_group(
        self,
        user_name: str,
        group_name: str,
        role_arn: Optional[str] = None,
    ) -> OperationResult:
        """Remove a user from an IAM group.

        Args:
            user_name: IAM user name
            group_name: IAM group name
            role_arn: Optional cross-account role ARN

        Returns:
            OperationResult with status; NOT_FOUND when the user, group or
            membership no longer exists
        """
        return execute_aws_api_call(
            self._service_name,
            "remove_user_from_group",
            **self._client_kwargs(role_arn),
            UserName=user_name,
            GroupName=group_name,
        )
