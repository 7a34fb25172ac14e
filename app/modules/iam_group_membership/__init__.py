"""IAM group membership resource.

Reconciles the users of an IAM group against a declared set:

    from modules.iam_group_membership import build_resource, plan

    resource = build_resource()
    result = plan(None, {"name": "devs", "group": "developers", "users": ["alice"]})
    record = resource.create(result.planned)
"""

from modules.iam_group_membership.errors import (
    ConfigurationError,
    GroupMembershipError,
    ImportIdFormatError,
    IntegrationError,
)
from modules.iam_group_membership.models import (
    MembershipChanges,
    MembershipRecord,
    generate_unique_id,
)
from modules.iam_group_membership.reconciler import GroupMembershipReconciler
from modules.iam_group_membership.resource import (
    RESOURCE_TYPE,
    ResourceDefinition,
    ResourcePlan,
    build_resource,
    group_membership_resource,
    plan,
)
from modules.iam_group_membership.schemas import (
    FORCE_NEW_FIELDS,
    GroupMembershipConfig,
    parse_config,
    requires_replacement,
)

__all__ = [
    "ConfigurationError",
    "GroupMembershipError",
    "ImportIdFormatError",
    "IntegrationError",
    "MembershipChanges",
    "MembershipRecord",
    "generate_unique_id",
    "GroupMembershipReconciler",
    "RESOURCE_TYPE",
    "ResourceDefinition",
    "ResourcePlan",
    "build_resource",
    "group_membership_resource",
    "plan",
    "FORCE_NEW_FIELDS",
    "GroupMembershipConfig",
    "parse_config",
    "requires_replacement",
]
