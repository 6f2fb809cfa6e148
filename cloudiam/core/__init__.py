"""
Core configuration for cloudiam.
"""

from .config import Config, OUTPUT_FORMATS

__all__ = ['Config', 'OUTPUT_FORMATS']
