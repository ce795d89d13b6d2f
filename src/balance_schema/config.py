import logging
from pathlib import Path
from typing import Optional

import yaml
from configmanager import Config

from balance_schema.exceptions import InvalidConfigException


def get_defaults():
    return {
        "logging": {
            # Logging level.
            "level": logging.WARNING,
            # Destination file for the logs. The CLI logs to stderr if not set.
            "filename": None,
            # Max log file size, only used when logging to a file.
            "max_log_file_size": 50_000_000,  # 50MB
        },
        "validation": {
            # Name of the schema used when none is specified on the command line.
            "default_schema": "balance_response",
            # Folder where JSON Schema files are exported.
            "schema_dir": "schema",
        },
    }


def load_config(config_file: Optional[str] = None) -> Config:
    """
    Builds the configuration from the defaults, overridden by the values of
    the YAML file if one is specified.

    :raises InvalidConfigException: if the file cannot be read or is not valid YAML.
    """
    config = Config(schema=get_defaults())
    if config_file is None:
        return config

    if not Path(config_file).is_file():
        raise InvalidConfigException(f"'{config_file}' does not exist")

    try:
        config.yaml.load(config_file)
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfigException(f"Could not load {config_file}: {e}") from e

    return config
