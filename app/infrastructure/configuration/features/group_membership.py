"""Group membership feature settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class GroupMembershipSettings(FeatureSettings):
    """Configuration for the IAM group membership resource.

    Environment Variables:
        GROUP_MEMBERSHIP_ID_PREFIX: Prefix of identifiers generated on import
        GROUP_MEMBERSHIP_PAGE_SIZE: MaxItems sent with each GetGroup page;
            unset lets IAM choose (100)
    """

    id_prefix: str = Field(default="terraform-", alias="GROUP_MEMBERSHIP_ID_PREFIX")
    page_size: Optional[int] = Field(default=None, alias="GROUP_MEMBERSHIP_PAGE_SIZE")

    @field_validator("page_size")
    @classmethod
    def _validate_page_size(cls, value: Optional[int]) -> Optional[int]:
        # IAM accepts MaxItems in [1, 1000]
        if value is not None and not 1 <= value <= 1000:
            raise ValueError("GROUP_MEMBERSHIP_PAGE_SIZE must be between 1 and 1000")
        return value
