"""
Configuration module for chargex.
"""

import os
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from chargex.model import ConfigError


class FormattingConfig(BaseModel):
    """
    Configuration for charge formatting.
    """

    strict_title_case: bool = True  # Keep connectors lowercase and acronyms uppercase
    numbered: bool = True  # Number the charge list ("1. ...")


class AllocatorConfig(BaseModel):
    """
    Configuration for citation and booking number allocation.
    """

    citation_length: int = 5  # Digits in a citation number
    booking_length: int = 4  # Digits in an arrest booking number
    charset: str = r"\d"  # Pattern of allowed characters
    max_attempts: int = 10000  # Draws before giving up


class OutputConfig(BaseModel):
    """
    Configuration for output.
    """

    json_path: Optional[str] = None  # JSON output path
    csv_path: Optional[str] = None  # CSV output path
    pretty_json: bool = True  # Whether to pretty-print JSON


class LoggingConfig(BaseModel):
    """
    Configuration for logging.
    """

    level: str = "INFO"  # Logging level (DEBUG/INFO/WARN/ERROR)


class MongoDBConfig(BaseModel):
    """
    Configuration for the MongoDB used-number lookup.
    """

    enabled: bool = False  # Whether MongoDB integration is enabled
    uri: str = "mongodb://localhost:27017"  # MongoDB connection URI
    database: str = "chargex"  # Database name
    citations_collection: str = "citations"  # Traffic citation records
    arrests_collection: str = "arrests"  # Arrest (booking) records


class Config(BaseModel):
    """
    Main configuration.
    """

    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    allocator: AllocatorConfig = Field(default_factory=AllocatorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    mongodb: Optional[MongoDBConfig] = None  # MongoDB config (optional)


def load_config(path: Optional[str] = None) -> Config:
    """
    Load configuration from a file.

    Args:
        path: Path to the configuration file

    Returns:
        Configuration object
    """
    if path:
        try:
            with open(path, "r") as f:
                if path.endswith(".yaml") or path.endswith(".yml"):
                    config_dict = yaml.safe_load(f)
                elif path.endswith(".json"):
                    import json

                    config_dict = json.load(f)
                else:
                    raise ConfigError(f"Unsupported configuration file format: {path}")
        except OSError as e:
            raise ConfigError(f"Error reading configuration file {path}: {e}")

        return Config(**(config_dict or {}))
    else:
        # Try to load from default locations
        default_locations = [
            "./config.yaml",
            "./config.yml",
            "./config.json",
            os.path.expanduser("~/.config/chargex/config.yaml"),
        ]

        for loc in default_locations:
            if os.path.exists(loc):
                return load_config(loc)

        return Config()
