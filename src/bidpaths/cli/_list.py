"""``bidpaths list`` — print the registry as a table."""

import argparse

from bidpaths.cli._config import load_config
from bidpaths.registry import iter_leaves
from bidpaths.urls import api_url, app_url


def run_list(args: argparse.Namespace) -> None:
    """Print NAMESPACE, ROLE, KEY, PATH for every registered template.

    Empty roles are not listed; they have no leaves.
    """
    config = load_config(args)

    rows: list[tuple[str, str, str, str]] = []
    for leaf in iter_leaves():
        if args.namespace and leaf.namespace != args.namespace:
            continue
        path = leaf.path
        if args.absolute:
            to_url = api_url if leaf.namespace == "ENDPOINTS" else app_url
            path = to_url(path, config=config)
        rows.append((leaf.namespace, leaf.role, leaf.key, path))

    if not rows:
        print("No paths registered.")
        return

    headers = ("NAMESPACE", "ROLE", "KEY", "PATH")
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(3)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers))
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
