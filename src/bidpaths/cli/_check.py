"""``bidpaths check`` — registry validation command.

Runs ``check_registry`` and prints results to stdout. Exits with code 1
if errors are found.
"""

import argparse

from bidpaths.registry import Severity, check_registry


def run_check(args: argparse.Namespace) -> None:
    """Validate every template in the registry."""
    issues = check_registry()
    errors = [i for i in issues if i.severity is Severity.ERROR]

    for issue in issues:
        print(f"{issue.severity.value}: [{issue.category}] {issue.message}")

    if errors:
        print(f"\n{len(errors)} error(s) found.")
        raise SystemExit(1)

    print("Registry OK.")
