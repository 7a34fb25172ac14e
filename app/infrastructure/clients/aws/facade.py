"""AWS Clients facade.

Builds the shared SessionProvider from settings and exposes the per-service
clients as attributes.
"""

import structlog

from infrastructure.clients.aws.iam import IamClient
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.configuration.integrations.aws import AwsSettings

logger = structlog.get_logger()


class AWSClients:
    """Facade for AWS service clients.

    Args:
        aws_settings: AWS configuration from settings.aws
        page_size: Optional MaxItems for paginated IAM listings

    Usage:
        aws = AWSClients(settings.aws)
        result = aws.iam.get_group("developers")
    """

    def __init__(self, aws_settings: AwsSettings, page_size=None) -> None:
        self._session_provider = SessionProvider(
            region=aws_settings.AWS_REGION,
            service_role_map=aws_settings.SERVICE_ROLE_MAP,
            endpoint_url=getattr(aws_settings, "ENDPOINT_URL", None),
        )

        self.iam: IamClient = IamClient(
            self._session_provider,
            default_role_arn=self._session_provider.get_role_arn_for_service("iam"),
            page_size=page_size,
        )
        self._logger = logger.bind(component="aws_clients")
