"""Fixtures for AWS client tests.

Provides a factory-as-fixture for fake boto3 clients. Tests patch
`infrastructure.clients.aws.executor.get_boto3_client` to return them.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.configuration.integrations.aws import AwsSettings


class FakeClient:
    """Configurable fake boto3 client for unit tests.

    ``api_responses`` maps method names to either a static response, an
    exception instance to raise, or a callable receiving the call kwargs.
    Every call is recorded in ``calls`` as ``(method, kwargs)``.
    """

    def __init__(self, api_responses: Optional[Dict[str, Any]] = None):
        self._api_responses = api_responses or {}
        self.calls: List[tuple] = []

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)
        resp = self._api_responses[name]

        def _call(*_args, **kwargs):
            self.calls.append((name, kwargs))
            if isinstance(resp, Exception):
                raise resp
            if callable(resp):
                return resp(**kwargs)
            return resp

        return _call


@pytest.fixture
def make_fake_client():
    """Factory fixture for FakeClient instances."""

    def _factory(api_responses: Optional[Dict[str, Any]] = None) -> FakeClient:
        return FakeClient(api_responses=api_responses)

    return _factory


@pytest.fixture
def patch_boto3_client(monkeypatch):
    """Patch get_boto3_client to return the given client.

    Returns a list collecting the kwargs each get_boto3_client call received.
    """
    seen: List[Dict[str, Any]] = []

    def _patch(client):
        def _get_boto3_client(
            service_name, session_config=None, client_config=None, role_arn=None
        ):
            seen.append(
                {
                    "service_name": service_name,
                    "session_config": session_config,
                    "client_config": client_config,
                    "role_arn": role_arn,
                }
            )
            return client

        monkeypatch.setattr(executor, "get_boto3_client", _get_boto3_client)
        return seen

    return _patch


@pytest.fixture
def mock_aws_settings():
    """MagicMock AwsSettings with a region, an IAM role and no endpoint."""
    settings = MagicMock(spec=AwsSettings)
    settings.AWS_REGION = "us-east-1"
    settings.SERVICE_ROLE_MAP = {"iam": "arn:aws:iam::123456789012:role/IamRole"}
    settings.ENDPOINT_URL = None
    return settings


@pytest.fixture
def iam_client():
    """IamClient with a region-only SessionProvider."""
    from infrastructure.clients.aws.iam import IamClient

    return IamClient(session_provider=SessionProvider(region="us-east-1"))
