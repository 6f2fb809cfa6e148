# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package iam implements the client-side IAM policy model: conditions, role
bindings, policies, and their conversion to and from the
``google.iam.v1.Policy`` wire message.
"""

from .condition import Condition
from .binding import Binding
from .policy import Policy, CONDITIONAL_POLICY_VERSION
from .identity import Identity, IdentityType, Role
from .marshaller import to_pb, from_pb

__all__ = [
    # Types
    'Condition',
    'Binding',
    'Policy',
    'CONDITIONAL_POLICY_VERSION',

    # Identity helpers
    'Identity',
    'IdentityType',
    'Role',

    # Wire conversion
    'to_pb',
    'from_pb',
]
