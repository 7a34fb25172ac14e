"""Configuration schema for the IAM group membership resource.

Three fields, all required:

- ``name``: logical name, becomes the resource id on create (ForceNew)
- ``group``: IAM group whose membership is managed (ForceNew)
- ``users``: set of IAM user names (updated in place)

ForceNew fields cannot change on an existing resource; a new value means the
resource is destroyed and created again.
"""

from typing import Annotated, Any, List, Mapping, Set, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modules.iam_group_membership.errors import ConfigurationError


class GroupMembershipConfig(BaseModel):
    """Schema for an aws_iam_group_membership configuration block."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Logical name of the membership resource",
            json_schema_extra={"example": "developers-membership", "force_new": True},
        ),
    ]
    group: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="IAM group name",
            json_schema_extra={"example": "developers", "force_new": True},
        ),
    ]
    users: Annotated[
        Set[Annotated[str, Field(min_length=1)]],
        Field(
            ...,
            description="IAM user names that must belong to the group",
            json_schema_extra={"example": ["alice", "bob"]},
        ),
    ]


def _force_new_fields(model: Type[BaseModel]) -> List[str]:
    fields = []
    for field_name, info in model.model_fields.items():
        extra = info.json_schema_extra
        if isinstance(extra, dict) and extra.get("force_new"):
            fields.append(field_name)
    return fields


FORCE_NEW_FIELDS = tuple(_force_new_fields(GroupMembershipConfig))


def parse_config(raw: Mapping[str, Any]) -> GroupMembershipConfig:
    """Validate a raw configuration mapping.

    Raises:
        ConfigurationError: when a field is missing, empty or of the wrong type
    """
    try:
        return GroupMembershipConfig.model_validate(dict(raw))
    except ValidationError as e:
        raise ConfigurationError(
            f"invalid aws_iam_group_membership configuration: {e}"
        ) from e


def requires_replacement(prior: Any, planned: Any) -> List[str]:
    """Return the ForceNew fields whose value differs between two states.

    Either argument may be a record or a config; fields unset on ``prior``
    (e.g. ``name`` after an import) are not treated as changes.
    """
    changed = []
    for field_name in FORCE_NEW_FIELDS:
        old = getattr(prior, field_name, None)
        new = getattr(planned, field_name, None)
        if old is not None and old != new:
            changed.append(field_name)
    return changed
