import pytest

from infrastructure.clients.aws import AWSClients
from infrastructure.clients.aws.iam import IamClient


@pytest.mark.unit
class TestAWSClientsFacade:
    def test_builds_iam_client_from_settings(self, mock_aws_settings):
        aws = AWSClients(aws_settings=mock_aws_settings)

        assert isinstance(aws.iam, IamClient)
        assert aws.iam._default_role_arn == "arn:aws:iam::123456789012:role/IamRole"
        assert aws._session_provider.region == "us-east-1"
        assert aws._session_provider.endpoint_url is None

    def test_page_size_is_forwarded(self, mock_aws_settings):
        aws = AWSClients(aws_settings=mock_aws_settings, page_size=50)
        assert aws.iam._page_size == 50

    def test_endpoint_url_is_forwarded(self, mock_aws_settings):
        mock_aws_settings.ENDPOINT_URL = "http://localhost:4566"
        aws = AWSClients(aws_settings=mock_aws_settings)
        assert aws._session_provider.endpoint_url == "http://localhost:4566"
