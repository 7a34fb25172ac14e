"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for the IAM client (default: us-east-1)
        AWS_IAM_ROLE_ARN: Role assumed for IAM calls (cross-account); empty
            means the ambient credentials are used directly
        AWS_ENDPOINT_URL: Custom endpoint (LocalStack, moto server)

    Example:
        ```python
        from infrastructure.configuration import settings

        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="us-east-1", alias="AWS_REGION")
    IAM_ROLE_ARN: str = Field(default="", alias="AWS_IAM_ROLE_ARN")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")

    @property
    def SERVICE_ROLE_MAP(self) -> dict[str, str]:
        """Mapping of service names to their associated role ARNs."""
        return {"iam": self.IAM_ROLE_ARN}
