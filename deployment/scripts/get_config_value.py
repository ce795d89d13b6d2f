"""
Reads a configuration value from a balance-schema config file. This enables
reading configuration values from shell scripts, e.g. to find out where
schemas are exported before publishing them.
"""

import argparse
import sys
from functools import partial

import configmanager.exceptions

from balance_schema.config import load_config


def cli_parse() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reads the specified configuration key, e.g. validation.schema_dir."
    )
    parser.add_argument(
        "--config-file",
        action="store",
        type=str,
        required=True,
        help="Path to the user configuration file.",
    )
    parser.add_argument(
        "config_key",
        action="store",
        type=str,
        help="Dotted configuration key to retrieve.",
    )
    return parser.parse_args()


print_err = partial(print, file=sys.stderr)


def main(args: argparse.Namespace):
    config = load_config(args.config_file)

    current_section = config
    try:
        for section_name in args.config_key.split("."):
            current_section = getattr(current_section, section_name)
        print(current_section.value)
    except (configmanager.exceptions.NotFound, AttributeError):
        print_err(f"Configuration key not found: '{args.config_key}'.")
        sys.exit(-1)


if __name__ == "__main__":
    main(cli_parse())
