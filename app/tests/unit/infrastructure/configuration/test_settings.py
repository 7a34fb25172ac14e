"""Unit tests for infrastructure.configuration settings classes."""

import pytest
from pydantic import ValidationError

from infrastructure.configuration.features.group_membership import (
    GroupMembershipSettings,
)
from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.configuration.settings import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "AWS_REGION",
        "AWS_IAM_ROLE_ARN",
        "AWS_ENDPOINT_URL",
        "GROUP_MEMBERSHIP_ID_PREFIX",
        "GROUP_MEMBERSHIP_PAGE_SIZE",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestAwsSettings:
    def test_defaults(self):
        aws = AwsSettings(_env_file=None)

        assert aws.AWS_REGION == "us-east-1"
        assert aws.IAM_ROLE_ARN == ""
        assert aws.ENDPOINT_URL is None
        assert aws.SERVICE_ROLE_MAP == {"iam": ""}

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "ca-central-1")
        monkeypatch.setenv("AWS_IAM_ROLE_ARN", "arn:aws:iam::123456789012:role/IamRole")
        monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")

        aws = AwsSettings(_env_file=None)

        assert aws.AWS_REGION == "ca-central-1"
        assert aws.SERVICE_ROLE_MAP == {
            "iam": "arn:aws:iam::123456789012:role/IamRole"
        }
        assert aws.ENDPOINT_URL == "http://localhost:4566"


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestGroupMembershipSettings:
    def test_defaults(self):
        feature = GroupMembershipSettings(_env_file=None)

        assert feature.id_prefix == "terraform-"
        assert feature.page_size is None

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GROUP_MEMBERSHIP_ID_PREFIX", "membership-")
        monkeypatch.setenv("GROUP_MEMBERSHIP_PAGE_SIZE", "50")

        feature = GroupMembershipSettings(_env_file=None)

        assert feature.id_prefix == "membership-"
        assert feature.page_size == 50

    @pytest.mark.parametrize("value", ["0", "1001"])
    def test_page_size_out_of_range(self, monkeypatch, value):
        monkeypatch.setenv("GROUP_MEMBERSHIP_PAGE_SIZE", value)

        with pytest.raises(ValidationError):
            GroupMembershipSettings(_env_file=None)


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestSettings:
    def test_builds_sub_settings(self):
        settings = Settings(_env_file=None)

        assert isinstance(settings.aws, AwsSettings)
        assert isinstance(settings.group_membership, GroupMembershipSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_is_production_follows_prefix(self, monkeypatch):
        assert Settings(_env_file=None).is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings(_env_file=None).is_production is False

    def test_explicit_sub_settings_are_kept(self):
        aws = AwsSettings(_env_file=None, AWS_REGION="eu-west-1")

        settings = Settings(_env_file=None, aws=aws)

        assert settings.aws.AWS_REGION == "eu-west-1"
