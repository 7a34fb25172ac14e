"""Configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import AwsSettings
from infrastructure.configuration.features import GroupMembershipSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix; empty means production (JSON logs)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.configuration import settings

        aws_region = settings.aws.AWS_REGION
        id_prefix = settings.group_membership.id_prefix
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    aws: AwsSettings
    group_membership: GroupMembershipSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "aws": AwsSettings,
            "group_membership": GroupMembershipSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
