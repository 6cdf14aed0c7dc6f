"""``bidpaths resolve`` — look up one path by namespace, role, and key.

Prints the template on success. Exits with code 1 and a message on
stderr when the name is not registered.
"""

import argparse
import sys

from bidpaths.errors import NotFoundError
from bidpaths.registry import resolve


def run_resolve(args: argparse.Namespace) -> None:
    try:
        path = resolve(args.namespace, args.role, args.key)
    except NotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(path)
