"""
Configuration module for cloudiam.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass
import logging

from ..util.config import get_config_value, get_int_config, load_config_file

OUTPUT_FORMATS = ("json", "text")


@dataclass
class Config:
    """Settings for the cloudiam tooling"""
    # Version assigned to policies loaded from documents that omit one
    default_version: int = 0
    log_level: str = "INFO"
    output_format: str = "json"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables"""
        return cls(
            default_version=get_int_config("DEFAULT_VERSION", 0),
            log_level=get_config_value("LOG_LEVEL", "INFO"),
            output_format=get_config_value("OUTPUT_FORMAT", "json"),
        )

    @classmethod
    def from_file(cls, file_path: str) -> "Config":
        """Create configuration from a JSON or YAML file"""
        data = load_config_file(file_path)
        return cls(
            default_version=int(data.get("default_version", 0)),
            log_level=str(data.get("log_level", "INFO")),
            output_format=str(data.get("output_format", "json")),
        )

    def validate(self) -> bool:
        """Validate the configuration"""
        if self.default_version < 0:
            raise ValueError("default_version must not be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}"
            )
        return True
