"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.group_membership import (
    GroupMembershipSettings,
)

__all__ = [
    "GroupMembershipSettings",
]
