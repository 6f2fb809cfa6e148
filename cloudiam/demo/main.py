"""
cloudiam Demo Application

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

This demo walks through the read-modify-write cycle of an IAM policy:
- Loading a policy document (JSON or YAML), or building a sample policy
- Granting a role through the legacy role map API
- Marshalling to the google.iam.v1.Policy wire message and back

Usage: cloudiam-demo [POLICY_FILE]
"""

import json
import logging
import sys
from typing import List, Optional

from google.protobuf import json_format

from cloudiam.core.config import Config
from cloudiam.errors import IamError
from cloudiam.iam import (
    CONDITIONAL_POLICY_VERSION, Binding, Condition, Identity, Policy, Role, from_pb, to_pb
)
from cloudiam.util.config import load_config_file

logger = logging.getLogger(__name__)


def build_sample_policy() -> Policy:
    """Build the policy used when no file is given."""
    return (Policy.new_builder()
            .set_bindings({
                Role.owner(): [Identity.user("owner@example.com")],
                Role.viewer(): [Identity.all_authenticated_users()],
            })
            .set_etag("BwWWja0YfJA=")
            .set_version(1)
            .build())


def render(policy: Policy, output_format: str) -> str:
    """Render a policy as wire JSON or as readable text."""
    if output_format == "json":
        return json.dumps(json_format.MessageToDict(to_pb(policy)), indent=2)

    lines = [f"version: {policy.version}", f"etag: {policy.etag}"]
    for binding in policy.get_bindings_v3():
        lines.append(f"{binding.role}:")
        lines.extend(f"  - {member}" for member in binding.members)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main demo function"""
    argv = sys.argv[1:] if argv is None else argv

    config = Config.from_env()
    try:
        config.validate()
    except ValueError as e:
        print(f"✗ Invalid configuration: {e}")
        return 1
    logging.basicConfig(level=config.log_level.upper())

    print("cloudiam Demo Application")
    print("=" * 50)
    print()

    print("Step 1: Load Policy")
    print("-" * 40)
    try:
        if argv:
            policy = Policy.from_dict(load_config_file(argv[0]),
                                      default_version=config.default_version)
            print(f"✓ Loaded policy from {argv[0]}")
        else:
            policy = build_sample_policy()
            print("✓ Built sample policy")
    except (OSError, ValueError, IamError) as e:
        print(f"✗ Error loading policy: {e}")
        return 1
    print(render(policy, config.output_format))
    print()

    print("Step 2: Modify Policy")
    print("-" * 40)
    try:
        if policy.version == CONDITIONAL_POLICY_VERSION:
            # Conditional policies can only be edited through the binding list
            binding = (Binding.new_builder()
                       .set_role(Role.editor())
                       .add_members(Identity.group("editors@example.com"))
                       .set_condition(Condition.new_builder()
                                      .set_title("business-hours")
                                      .set_expression("request.time.getHours('UTC') < 18")
                                      .build())
                       .build())
            policy = (policy.to_builder()
                      .set_bindings_v3(list(policy.get_bindings_v3()) + [binding])
                      .build())
        else:
            policy = (policy.to_builder()
                      .add_identity(Role.editor(), Identity.group("editors@example.com"))
                      .build())
        print(f"✓ Granted {Role.editor()} to group:editors@example.com")
    except IamError as e:
        print(f"✗ Error modifying policy: {e}")
        return 1
    print()

    print("Step 3: Wire Round Trip")
    print("-" * 40)
    try:
        restored = from_pb(to_pb(policy))
    except IamError as e:
        print(f"✗ Error marshalling policy: {e}")
        return 1
    print(render(restored, config.output_format))
    if any(binding.condition for binding in policy.get_bindings_v3()):
        logger.warning("Binding conditions are not carried by the wire format")
    print()

    print("✓ Demo completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
