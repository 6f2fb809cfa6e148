"""
Encoding and decoding utilities for cloudiam.
Etags travel as raw bytes on the wire and as base64 text in memory.
"""

import base64
import binascii
from typing import Union


def base64_encode(data: Union[str, bytes]) -> str:
    """Encode data to base64 string."""
    if isinstance(data, str):
        data = data.encode('utf-8')

    return base64.b64encode(data).decode('ascii')


def base64_decode(encoded: str) -> bytes:
    """Decode base64 string to bytes."""
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 data: {e}")
