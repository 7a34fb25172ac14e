"""Resource definition exposed to the declarative configuration engine.

Binds the configuration schema to the reconciler's lifecycle entry points and
provides the planning step that decides which entry point a configuration
change needs.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Type

from pydantic import BaseModel

from infrastructure.clients.aws import AWSClients
from infrastructure.configuration import Settings, settings as default_settings
from infrastructure.logging import get_module_logger
from modules.iam_group_membership.models import MembershipChanges, MembershipRecord
from modules.iam_group_membership.reconciler import GroupMembershipReconciler
from modules.iam_group_membership.schemas import (
    GroupMembershipConfig,
    parse_config,
    requires_replacement,
)

logger = get_module_logger()

RESOURCE_TYPE = "aws_iam_group_membership"


@dataclass
class ResourceDefinition:
    """Schema plus lifecycle callables for one resource type."""

    type_name: str
    schema: Type[BaseModel]
    create: Callable[[MembershipRecord], MembershipRecord]
    read: Callable[[MembershipRecord], MembershipRecord]
    update: Callable[[MembershipRecord, MembershipRecord], MembershipRecord]
    delete: Callable[[MembershipRecord], None]
    importer: Callable[[str], MembershipRecord]


@dataclass
class ResourcePlan:
    """Planned action for one resource.

    Attributes:
        action: "create", "update", "replace" or "noop"
        planned: record the action will apply (id unset for create/replace)
        prior: record currently persisted, None when the resource is new
        changes: users to remove and add relative to ``prior``
        replace_fields: ForceNew fields that changed
    """

    action: str
    planned: MembershipRecord
    prior: Optional[MembershipRecord] = None
    changes: MembershipChanges = field(default_factory=MembershipChanges)
    replace_fields: List[str] = field(default_factory=list)


def group_membership_resource(
    reconciler: GroupMembershipReconciler,
) -> ResourceDefinition:
    """Build the aws_iam_group_membership resource definition."""
    return ResourceDefinition(
        type_name=RESOURCE_TYPE,
        schema=GroupMembershipConfig,
        create=reconciler.create,
        read=reconciler.read,
        update=reconciler.update,
        delete=reconciler.delete,
        importer=reconciler.import_state,
    )


def build_resource(app_settings: Optional[Settings] = None) -> ResourceDefinition:
    """Wire the resource definition from settings."""
    app_settings = app_settings or default_settings
    aws = AWSClients(
        app_settings.aws, page_size=app_settings.group_membership.page_size
    )
    reconciler = GroupMembershipReconciler(
        aws.iam, id_prefix=app_settings.group_membership.id_prefix
    )
    return group_membership_resource(reconciler)


def plan(
    prior: Optional[MembershipRecord], config: Mapping[str, Any]
) -> ResourcePlan:
    """Decide which lifecycle entry point a configuration needs.

    Args:
        prior: persisted record, or None (or a cleared record) if the
            resource does not exist
        config: raw configuration mapping with name, group and users

    Raises:
        ConfigurationError: config does not match the schema
    """
    planned = MembershipRecord.from_config(parse_config(config))

    if prior is None or not prior.exists:
        return ResourcePlan(
            action="create",
            planned=planned,
            prior=None,
            changes=MembershipChanges.between(None, planned.users),
        )

    replace_fields = requires_replacement(prior, planned)
    if replace_fields:
        logger.info(
            "group_membership_replacement_planned",
            id=prior.id,
            fields=replace_fields,
        )
        return ResourcePlan(
            action="replace",
            planned=planned,
            prior=prior,
            changes=MembershipChanges.between(None, planned.users),
            replace_fields=replace_fields,
        )

    changes = MembershipChanges.between(prior.users, planned.users)
    planned.id = prior.id
    return ResourcePlan(
        action="update" if changes.has_changes else "noop",
        planned=planned,
        prior=prior,
        changes=changes,
    )
