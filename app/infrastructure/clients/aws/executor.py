"""Base AWS client utilities for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. This module does not read settings at import time;
configuration is passed in by the SessionProvider.
"""

from typing import Any, Dict, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
import structlog

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    role_arn: Optional[str] = None,
    session_name: str = "GroupMembershipSession",
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'iam')
        session_config: Optional boto3 session kwargs (e.g., region_name)
        client_config: Optional client kwargs (e.g., endpoint_url)
        role_arn: Optional role to assume for cross-account access
        session_name: Name for assumed role session

    Returns:
        botocore client instance
    """
    session_config = session_config or {}
    client_config = client_config or {}

    if role_arn:
        sts = boto3.client("sts")
        assumed = sts.assume_role(RoleArn=role_arn, RoleSessionName=session_name)
        creds = assumed["Credentials"]
        session = boto3.Session(
            aws_access_key_id=creds["AccessKeyId"],
            aws_secret_access_key=creds["SecretAccessKey"],
            aws_session_token=creds["SessionToken"],
            **session_config,
        )
    else:
        session = boto3.Session(**session_config)

    return session.client(service_name, **client_config)


def execute_aws_api_call(
    service_name: str,
    method: str,
    role_arn: Optional[str] = None,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    **kwargs,
) -> OperationResult:
    """Execute a single AWS API call and wrap the outcome.

    The call is attempted once. Retries and backoff are left to botocore's
    own client configuration.

    Args mirror `boto3` call parameters; the function returns an
    `OperationResult` object for consistent downstream handling.
    """
    try:
        client = get_boto3_client(
            service_name,
            session_config=session_config,
            client_config=client_config,
            role_arn=role_arn,
        )
        response = getattr(client, method)(**kwargs)
    except (ClientError, BotoCoreError) as e:
        result = classify_aws_error(e)
        log = logger.info if result.is_not_found else logger.error
        log(
            "aws_api_error",
            service=service_name,
            method=method,
            status=result.status.value,
            code=result.error_code,
            error=str(e),
        )
        return result

    return OperationResult.success(
        data=response, message=f"{service_name}.{method} succeeded"
    )
