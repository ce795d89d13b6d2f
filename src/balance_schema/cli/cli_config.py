"""
Global configuration object for the CLI, stored in the typer context
by the main callback.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from configmanager import Config


@dataclass
class CliConfig:
    config_file_path: Optional[Path]
    config: Config
    verbose: bool
