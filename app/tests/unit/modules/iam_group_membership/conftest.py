"""Fixtures for the IAM group membership module tests.

FakeIamClient keeps groups in memory, pages GetGroup results and records
every call so tests can assert exact call sequences.
"""

from typing import Dict, List, Optional, Set

import pytest

from infrastructure.operations.result import OperationResult
from modules.iam_group_membership.reconciler import GroupMembershipReconciler


class FakeIamClient:
    """In-memory stand-in for IamClient.

    Args:
        groups: group name -> member user names
        page_size: users per GetGroup page
        failures: (method, user) -> OperationResult returned instead of
            performing the call; user is None for get_group
    """

    def __init__(
        self,
        groups: Optional[Dict[str, List[str]]] = None,
        page_size: int = 100,
        failures: Optional[Dict[tuple, OperationResult]] = None,
    ):
        self.groups: Dict[str, List[str]] = {
            name: list(users) for name, users in (groups or {}).items()
        }
        self.page_size = page_size
        self.failures = failures or {}
        self.calls: List[tuple] = []

    def members(self, group: str) -> Set[str]:
        return set(self.groups[group])

    def mutations(self) -> List[tuple]:
        return [c for c in self.calls if c[0] != "get_group"]

    def get_group(self, group_name, marker=None, role_arn=None):
        self.calls.append(("get_group", group_name, marker))
        failure = self.failures.get(("get_group", None))
        if failure is not None:
            return failure
        if group_name not in self.groups:
            return OperationResult.not_found(
                f"The group with name {group_name} cannot be found."
            )
        users = self.groups[group_name]
        start = int(marker) if marker else 0
        end = start + self.page_size
        is_truncated = end < len(users)
        return OperationResult.success(
            data={
                "users": users[start:end],
                "marker": str(end) if is_truncated else None,
                "is_truncated": is_truncated,
            }
        )

    def add_user_to_group(self, user_name, group_name, role_arn=None):
        self.calls.append(("add_user_to_group", user_name, group_name))
        failure = self.failures.get(("add_user_to_group", user_name))
        if failure is not None:
            return failure
        if group_name not in self.groups:
            return OperationResult.not_found("group not found")
        if user_name not in self.groups[group_name]:
            self.groups[group_name].append(user_name)
        return OperationResult.success()

    def remove_user_from_group(self, user_name, group_name, role_arn=None):
        self.calls.append(("remove_user_from_group", user_name, group_name))
        failure = self.failures.get(("remove_user_from_group", user_name))
        if failure is not None:
            return failure
        if user_name not in self.groups.get(group_name, []):
            return OperationResult.not_found(
                f"The user with name {user_name} cannot be found."
            )
        self.groups[group_name].remove(user_name)
        return OperationResult.success()


@pytest.fixture
def make_fake_iam():
    """Factory fixture for FakeIamClient instances."""

    def _factory(groups=None, page_size=100, failures=None) -> FakeIamClient:
        return FakeIamClient(groups=groups, page_size=page_size, failures=failures)

    return _factory


@pytest.fixture
def fake_iam(make_fake_iam):
    """FakeIamClient with an empty ``developers`` group."""
    return make_fake_iam(groups={"developers": []})


@pytest.fixture
def reconciler(fake_iam):
    """GroupMembershipReconciler wired to ``fake_iam``."""
    return GroupMembershipReconciler(fake_iam)
