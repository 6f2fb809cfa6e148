"""
Tests for conversion to and from the google.iam.v1.Policy message.
"""

import base64

import pytest
from google.iam.v1 import policy_pb2

from cloudiam.errors import InvalidArgumentError
from cloudiam.iam import Binding, Condition, Policy, from_pb, to_pb


ETAG = "BwWWja0YfJA="


@pytest.fixture
def policy():
    return (Policy.new_builder()
            .set_bindings({
                "roles/owner": ["user:alice@example.com"],
                "roles/viewer": ["user:bob@example.com", "allUsers"],
            })
            .set_etag(ETAG)
            .set_version(1)
            .build())


class TestToPb:
    """Test policy -> wire conversion"""

    def test_fields(self, policy):
        """Test roles, members, etag and version are written"""
        policy_pb = to_pb(policy)
        assert isinstance(policy_pb, policy_pb2.Policy)
        assert [b.role for b in policy_pb.bindings] == ["roles/owner", "roles/viewer"]
        assert list(policy_pb.bindings[1].members) == ["user:bob@example.com", "allUsers"]
        assert policy_pb.etag == base64.b64decode(ETAG)
        assert policy_pb.version == 1

    def test_null_etag_is_empty_bytes(self):
        """Test a missing etag leaves the wire etag empty"""
        policy_pb = to_pb(Policy.new_builder().build())
        assert policy_pb.etag == b""
        assert len(policy_pb.bindings) == 0

    def test_conditions_not_written(self):
        """Test binding conditions are left off the wire"""
        condition = Condition.new_builder().set_expression("true").build()
        policy = (Policy.new_builder().set_version(3)
                  .set_bindings_v3([Binding.new_builder().set_role("roles/viewer")
                                    .add_members("allUsers").set_condition(condition).build()])
                  .build())
        policy_pb = to_pb(policy)
        assert not policy_pb.bindings[0].HasField("condition")
        assert policy_pb.version == 3

    def test_fills_given_message(self, policy):
        """Test a supplied message is cleared and filled in place"""
        target = policy_pb2.Policy(version=9, etag=b"stale")
        target.bindings.add(role="roles/stale", members=["user:old@example.com"])
        result = to_pb(policy, target)
        assert result is target
        assert [b.role for b in target.bindings] == ["roles/owner", "roles/viewer"]
        assert target.version == 1
        assert target.etag == base64.b64decode(ETAG)

    def test_invalid_etag(self):
        """Test an etag that is not base64 is rejected"""
        policy = Policy.new_builder().set_etag("not base64!").build()
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_pb(policy)
        assert exc_info.value.field == 'etag'


class TestFromPb:
    """Test wire -> policy conversion"""

    def test_fields(self):
        """Test roles, members, etag and version are read"""
        policy_pb = policy_pb2.Policy(version=1, etag=b"\x07\x05\x96\x8d\xad\x18|\x90")
        policy_pb.bindings.add(role="roles/viewer", members=["user:bob@example.com", "allUsers"])

        policy = from_pb(policy_pb)
        assert policy.get_bindings_v3() == (
            Binding.new_builder().set_role("roles/viewer")
            .set_members(["user:bob@example.com", "allUsers"]).build(),
        )
        assert policy.etag == ETAG
        assert policy.version == 1

    def test_empty_etag_is_none(self):
        """Test an empty wire etag maps to None, not an empty string"""
        policy = from_pb(policy_pb2.Policy())
        assert policy.etag is None
        assert policy.version == 0
        assert policy.get_bindings_v3() == ()

    def test_conditions_unset(self):
        """Test bindings read from the wire carry no condition"""
        policy_pb = policy_pb2.Policy(version=3)
        binding_pb = policy_pb.bindings.add(role="roles/viewer", members=["allUsers"])
        binding_pb.condition.expression = "true"
        policy = from_pb(policy_pb)
        assert policy.get_bindings_v3()[0].condition is None


class TestRoundTrip:
    """Test wire round trips"""

    def test_policy_round_trip(self, policy):
        """Test from_pb(to_pb(policy)) equals a condition-free policy"""
        assert from_pb(to_pb(policy)) == policy

    def test_null_etag_round_trip(self):
        """Test None -> empty bytes -> None"""
        policy = Policy.new_builder().add_identity("roles/viewer", "allUsers").build()
        assert to_pb(policy).etag == b""
        assert from_pb(to_pb(policy)).etag is None

    def test_wire_round_trip(self):
        """Test to_pb(from_pb(message)) reproduces the message"""
        policy_pb = policy_pb2.Policy(version=1, etag=b"\x01\x02\x03")
        policy_pb.bindings.add(role="roles/owner", members=["user:alice@example.com"])
        assert to_pb(from_pb(policy_pb)) == policy_pb

    def test_conditions_lost(self):
        """Test conditions do not survive a round trip"""
        condition = Condition.new_builder().set_title("t").build()
        policy = (Policy.new_builder().set_version(3)
                  .set_bindings_v3([Binding.new_builder().set_role("roles/viewer")
                                    .add_members("allUsers").set_condition(condition).build()])
                  .build())
        restored = from_pb(to_pb(policy))
        assert restored != policy
        assert restored.get_bindings_v3()[0].condition is None
        assert restored.get_bindings_v3()[0].members == ("allUsers",)
