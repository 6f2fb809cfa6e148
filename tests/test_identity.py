"""
Tests for identity and role helpers.
"""

import pytest

from cloudiam.errors import InvalidArgumentError
from cloudiam.iam import Identity, IdentityType, Role


class TestIdentity:
    """Test identity string forms"""

    @pytest.mark.parametrize("identity, expected", [
        (Identity.all_users(), "allUsers"),
        (Identity.all_authenticated_users(), "allAuthenticatedUsers"),
        (Identity.user("alice@example.com"), "user:alice@example.com"),
        (Identity.service_account("sa@p.iam.gserviceaccount.com"),
         "serviceAccount:sa@p.iam.gserviceaccount.com"),
        (Identity.group("admins@example.com"), "group:admins@example.com"),
        (Identity.domain("example.com"), "domain:example.com"),
        (Identity.project_owner("my-project"), "projectOwner:my-project"),
        (Identity.project_editor("my-project"), "projectEditor:my-project"),
        (Identity.project_viewer("my-project"), "projectViewer:my-project"),
    ])
    def test_str_value_and_parse(self, identity, expected):
        """Test each identity renders and parses back"""
        assert identity.str_value() == expected
        assert str(identity) == expected
        assert Identity.value_of(expected) == identity

    def test_value_keeps_colons(self):
        """Test only the first colon separates type from value"""
        identity = Identity.value_of("user:odd:name@example.com")
        assert identity.type == IdentityType.USER
        assert identity.value == "odd:name@example.com"

    @pytest.mark.parametrize("text", [None, "robot:r2d2", "user", "allUsers:x", ""])
    def test_value_of_rejects(self, text):
        """Test malformed identity strings are rejected"""
        with pytest.raises(InvalidArgumentError):
            Identity.value_of(text)


class TestRole:
    """Test role names"""

    def test_predefined_roles(self):
        """Test predefined role factories"""
        assert Role.owner().value == "roles/owner"
        assert Role.editor().value == "roles/editor"
        assert str(Role.viewer()) == "roles/viewer"

    @pytest.mark.parametrize("name, expected", [
        ("storage.objectViewer", "roles/storage.objectViewer"),
        ("roles/viewer", "roles/viewer"),
        ("projects/p/roles/custom", "projects/p/roles/custom"),
        ("organizations/1/roles/custom", "organizations/1/roles/custom"),
    ])
    def test_of(self, name, expected):
        """Test the roles/ prefix is added only where missing"""
        assert Role.of(name).value == expected

    def test_of_rejects_none(self):
        """Test a None role name is rejected"""
        with pytest.raises(InvalidArgumentError):
            Role.of(None)
