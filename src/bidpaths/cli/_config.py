"""Config resolution shared by CLI commands."""

import argparse
import dataclasses
import sys

from bidpaths.config import ClientConfig
from bidpaths.errors import ConfigurationError


def load_config(args: argparse.Namespace) -> ClientConfig:
    """Build a ClientConfig from the environment, then apply CLI overrides.

    Exits with code 1 when the environment holds an invalid value.
    """
    try:
        config = ClientConfig.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    base_url = getattr(args, "base_url", None)
    if base_url:
        config = dataclasses.replace(config, api_base_url=base_url)
    return config
