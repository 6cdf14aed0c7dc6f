"""Turning path templates into request paths and absolute URLs.

The registry stores templates only. Callers follow one rule: a template
ending in ``/`` takes exactly one more segment, anything else is used
verbatim. These helpers apply that rule so call sites don't hand-roll
string concatenation.
"""

from urllib.parse import quote

import httpx

from bidpaths.config import ClientConfig


def is_prefix(template: str) -> bool:
    """Return True if *template* expects a trailing segment."""
    return template.endswith("/")


def with_segment(template: str, segment: str | int) -> str:
    """Append one segment to a prefix template.

    The segment is percent-encoded, ``/`` included, so it can never
    add more than one path level.

    Example::

        with_segment(ENDPOINTS.lister.contract, 42)
        → "/api/contract/lister-contract/42"

    Raises ``ValueError`` for complete templates and empty segments.
    """
    if not is_prefix(template):
        msg = f"{template!r} is a complete path; use it verbatim"
        raise ValueError(msg)
    text = str(segment)
    if not text:
        msg = f"Segment for {template!r} must not be empty"
        raise ValueError(msg)
    return template + quote(text, safe="")


def _join(base_url: str, template: str, segment: str | int | None) -> str:
    path = template if segment is None else with_segment(template, segment)
    return str(httpx.URL(base_url).join(path))


def api_url(
    template: str,
    segment: str | int | None = None,
    *,
    config: ClientConfig | None = None,
) -> str:
    """Absolute backend URL for an ENDPOINTS template.

    Templates are absolute paths, so any path on ``api_base_url`` is
    replaced, not extended.
    """
    cfg = config or ClientConfig()
    return _join(cfg.api_base_url, template, segment)


def app_url(
    template: str,
    segment: str | int | None = None,
    *,
    config: ClientConfig | None = None,
) -> str:
    """Absolute frontend URL for a ROUTES template."""
    cfg = config or ClientConfig()
    return _join(cfg.app_base_url, template, segment)
