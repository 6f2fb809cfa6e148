"""
Basic cloudiam usage example.

This example demonstrates the fundamental policy operations:
- Building a policy from a role map
- Read-modify-write edits through to_builder()
- Conditional bindings on version 3 policies
- Conversion to the wire message
"""

from cloudiam import Binding, Condition, Identity, InvalidStateError, Policy, Role
from cloudiam.iam import from_pb, to_pb


def basic_example():
    """Demonstrate basic cloudiam usage"""
    print("Basic cloudiam Example")
    print("=" * 30)

    # 1. Build a legacy policy
    policy = (Policy.new_builder()
              .add_identity(Role.owner(), Identity.user("alice@example.com"))
              .add_identity(Role.viewer(), Identity.all_authenticated_users())
              .set_version(1)
              .build())
    print(f"✓ Built policy: {dict(policy.get_bindings())}")

    # 2. Edit a copy; the original is unchanged
    edited = (policy.to_builder()
              .remove_identity(Role.viewer(), Identity.all_authenticated_users())
              .add_identity(Role.viewer(), Identity.domain("example.com"))
              .build())
    print(f"✓ Edited policy: {dict(edited.get_bindings())}")

    # 3. Version 3 policies take conditional bindings
    temporary = (Binding.new_builder()
                 .set_role(Role.editor())
                 .add_members(Identity.user("contractor@example.com"))
                 .set_condition(Condition.new_builder()
                                .set_title("expires")
                                .set_expression("request.time < timestamp('2031-01-01T00:00:00Z')")
                                .build())
                 .build())
    conditional = (edited.to_builder()
                   .set_version(3)
                   .set_bindings_v3(list(edited.get_bindings_v3()) + [temporary])
                   .build())
    print(f"✓ Conditional policy has {len(conditional.get_bindings_v3())} bindings")

    try:
        conditional.get_bindings()
    except InvalidStateError as e:
        print(f"✓ Role map view refused: {e}")

    # 4. Wire conversion
    policy_pb = to_pb(edited)
    print(f"✓ Wire message has {len(policy_pb.bindings)} bindings")
    assert from_pb(policy_pb) == edited


if __name__ == "__main__":
    basic_example()
