"""
cloudiam Python Package

Client-side IAM policy model: build, inspect, and marshal policies.
"""

__version__ = "0.1.0"
__author__ = "Mauricio Fernandez"
__email__ = "mauricio.fernandez@siemens.com"

from .core.config import Config
from .errors import IamError, InvalidArgumentError, InvalidStateError
from .iam import (
    Condition,
    Binding,
    Policy,
    Identity,
    Role,
    CONDITIONAL_POLICY_VERSION,
)

__all__ = [
    "Config",
    "IamError",
    "InvalidArgumentError",
    "InvalidStateError",
    "Condition",
    "Binding",
    "Policy",
    "Identity",
    "Role",
    "CONDITIONAL_POLICY_VERSION",
]
