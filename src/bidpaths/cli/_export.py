"""``bidpaths export`` — print the registry as JSON."""

import argparse

from bidpaths.cli._config import load_config
from bidpaths.registry import to_json


def run_export(args: argparse.Namespace) -> None:
    config = load_config(args)
    indent = config.json_indent if args.indent is None else args.indent
    print(to_json(indent=indent))
