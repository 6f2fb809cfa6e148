"""
Conversion between Policy and the ``google.iam.v1.Policy`` protobuf message.

The wire schema has no per-binding conditions in the version handled here:
``to_pb`` does not write them and ``from_pb`` always leaves them unset, so a
round trip drops conditions.
"""

import logging
from typing import Optional

from google.iam.v1 import policy_pb2

from ..errors import InvalidArgumentError
from ..util.encoding import base64_decode, base64_encode
from .binding import Binding
from .policy import Policy

logger = logging.getLogger(__name__)


def to_pb(policy: Policy, policy_pb: Optional[policy_pb2.Policy] = None) -> policy_pb2.Policy:
    """
    Write policy into a wire message and return it.

    Args:
        policy: The policy to convert
        policy_pb: Message to fill; it is cleared first. A new message is
            created when omitted.

    Raises:
        InvalidArgumentError: if the policy etag is not valid base64
    """
    if policy_pb is None:
        policy_pb = policy_pb2.Policy()
    else:
        policy_pb.Clear()

    for binding in policy.get_bindings_v3():
        binding_pb = policy_pb.bindings.add()
        binding_pb.role = binding.role
        binding_pb.members.extend(binding.members)

    if policy.etag is not None:
        try:
            policy_pb.etag = base64_decode(policy.etag)
        except ValueError as e:
            raise InvalidArgumentError(
                f"Policy etag is not valid base64: {policy.etag!r}", field='etag', cause=e
            )

    policy_pb.version = policy.version
    logger.debug(f"Marshalled policy with {len(policy_pb.bindings)} bindings, "
                 f"version {policy_pb.version}")
    return policy_pb


def from_pb(policy_pb: policy_pb2.Policy) -> Policy:
    """
    Read a Policy from a wire message. An empty wire etag becomes None.
    """
    bindings = []
    for binding_pb in policy_pb.bindings:
        bindings.append(
            Binding.new_builder()
            .set_role(binding_pb.role)
            .set_members(binding_pb.members)
            .set_condition(None)
            .build()
        )

    etag = base64_encode(policy_pb.etag) if policy_pb.etag else None
    logger.debug(f"Unmarshalled policy with {len(bindings)} bindings, "
                 f"version {policy_pb.version}")
    return (Policy.new_builder()
            .set_bindings_v3(bindings)
            .set_etag(etag)
            .set_version(policy_pb.version)
            .build())
