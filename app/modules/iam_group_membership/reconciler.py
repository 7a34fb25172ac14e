"""Reconciler for IAM group memberships.

Converges the users of an IAM group to the set recorded in configuration and
writes the observed membership back into the record.

Lifecycle:
  - create: add every configured user, then read
  - read: list the group's users across all pages; a missing group clears
    the record id instead of failing
  - update: remove users no longer configured, then add new ones, then read
  - delete: remove every recorded user; users already gone are skipped
  - import_state: build a record for an existing group from its name

Calls are sequential and stop at the first error that is not tolerated.
Completed calls are never rolled back: a create that fails halfway leaves
the users added so far in the group and raises IntegrationError.
"""

from typing import Iterable, List, Optional

from infrastructure.clients.aws.iam import IamClient
from infrastructure.logging import bind_request_context, get_module_logger
from modules.iam_group_membership.errors import (
    ImportIdFormatError,
    IntegrationError,
)
from modules.iam_group_membership.models import (
    MembershipChanges,
    MembershipRecord,
    generate_unique_id,
)

logger = get_module_logger()


class GroupMembershipReconciler:
    """Applies membership records to IAM.

    Args:
        iam_client: IamClient used for every AWS call
        id_prefix: Prefix of identifiers generated on import
    """

    def __init__(self, iam_client: IamClient, id_prefix: str = "terraform-") -> None:
        self._iam = iam_client
        self._id_prefix = id_prefix

    # Lifecycle entry points

    def create(self, record: MembershipRecord) -> MembershipRecord:
        """Add every configured user to the group and read back the result."""
        with bind_request_context(operation="create", group=record.group):
            logger.info(
                "group_membership_create_started",
                name=record.name,
                users=len(record.users or ()),
            )
            self.add_users_to_group(record.users or (), record.group)

            created = record.copy(id=record.name)
            return self._read(created)

    def read(self, record: MembershipRecord) -> MembershipRecord:
        """Refresh ``users`` from IAM.

        Returns a record with an empty id when the group no longer exists.
        """
        with bind_request_context(operation="read", group=record.group):
            return self._read(record)

    def update(
        self, prior: MembershipRecord, planned: MembershipRecord
    ) -> MembershipRecord:
        """Apply the difference between the prior and planned user sets.

        Users in ``prior`` but not ``planned`` are removed first, then users in
        ``planned`` but not ``prior`` are added.
        """
        with bind_request_context(operation="update", group=planned.group):
            changes = MembershipChanges.between(prior.users, planned.users)
            if changes.has_changes:
                logger.info(
                    "group_membership_update_planned",
                    to_add=sorted(changes.to_add),
                    to_remove=sorted(changes.to_remove),
                )
                self.remove_users_from_group(changes.to_remove, planned.group)
                self.add_users_to_group(changes.to_add, planned.group)

            updated = planned.copy(id=prior.id or planned.id)
            return self._read(updated)

    def delete(self, record: MembershipRecord) -> None:
        """Remove every recorded user from the group."""
        with bind_request_context(operation="delete", group=record.group):
            self.remove_users_from_group(record.users or (), record.group)
            logger.info("group_membership_deleted", id=record.id)

    def import_state(self, raw_id: str) -> MembershipRecord:
        """Build a record for an existing group.

        Args:
            raw_id: the IAM group name

        Returns:
            Record with the group set, a freshly generated id and users left
            unset until the next read.

        Raises:
            ImportIdFormatError: raw_id is empty
        """
        if not raw_id:
            raise ImportIdFormatError(raw_id)

        record = MembershipRecord(
            id=generate_unique_id(self._id_prefix), group=raw_id, users=None
        )
        logger.info("group_membership_imported", group=raw_id, id=record.id)
        return record

    # IAM helpers

    def list_group_users(self, group: str) -> Optional[List[str]]:
        """List every user of a group, following continuation markers.

        Returns:
            User names in the order IAM returned them, or None when the
            group does not exist.

        Raises:
            IntegrationError: any other IAM failure
        """
        users: List[str] = []
        marker: Optional[str] = None
        while True:
            result = self._iam.get_group(group, marker=marker)
            if result.is_not_found:
                return None
            if not result.is_success:
                raise IntegrationError(
                    f"Error reading IAM Group Membership ({group}): {result.message}",
                    response=result,
                )

            page = result.data
            users.extend(page["users"])
            if not page["is_truncated"]:
                return users
            marker = page["marker"]

    def add_users_to_group(self, users: Iterable[str], group: str) -> None:
        """Add users one at a time; the first failure is raised."""
        for user in sorted(users):
            result = self._iam.add_user_to_group(user, group)
            if not result.is_success:
                raise IntegrationError(
                    f"Error adding user {user} to IAM Group ({group}): {result.message}",
                    response=result,
                )
            logger.info("user_added_to_group", user=user)

    def remove_users_from_group(self, users: Iterable[str], group: str) -> None:
        """Remove users one at a time.

        A user that is already out of the group (NoSuchEntity) is skipped;
        any other failure is raised.
        """
        for user in sorted(users):
            result = self._iam.remove_user_from_group(user, group)
            if result.is_not_found:
                logger.info("user_already_removed_from_group", user=user)
                continue
            if not result.is_success:
                raise IntegrationError(
                    f"Error removing user {user} from IAM Group ({group}): "
                    f"{result.message}",
                    response=result,
                )
            logger.info("user_removed_from_group", user=user)

    def _read(self, record: MembershipRecord) -> MembershipRecord:
        users = self.list_group_users(record.group)
        if users is None:
            logger.warning("group_not_found_clearing_state", id=record.id)
            return record.copy(id="")

        logger.info("group_membership_read", users=len(users))
        return record.copy(users=set(users))
