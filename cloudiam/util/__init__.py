# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package providing helper functions for cloudiam.

This package includes:
- Precondition checks raising the cloudiam error types
- Base64 helpers used for policy etags
- Configuration loading from the environment and JSON/YAML files
"""

from .validation import check_instance, check_not_none, check_no_none, check_state
from .encoding import base64_encode, base64_decode
from .config import get_config_value, get_int_config, load_config_file

__all__ = [
    # Validation utilities
    'check_instance', 'check_not_none', 'check_no_none', 'check_state',

    # Encoding utilities
    'base64_encode', 'base64_decode',

    # Configuration utilities
    'get_config_value', 'get_int_config', 'load_config_file',
]
