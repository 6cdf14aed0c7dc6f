"""Client configuration.

ClientConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bidpaths.errors import ConfigurationError

ENV_PREFIX = "BIDPATHS_"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Client-side settings for turning path templates into URLs.

    All fields have sensible defaults. Override what you need::

        config = ClientConfig(api_base_url="https://api.example.com")
    """

    # Backend API origin (ENDPOINTS are joined onto this)
    api_base_url: str = "http://127.0.0.1:8000"

    # Frontend origin (ROUTES are joined onto this)
    app_base_url: str = "http://127.0.0.1:3000"

    # Export
    json_indent: int = 2

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Build a config from ``BIDPATHS_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        raw_indent = env.get(f"{ENV_PREFIX}JSON_INDENT")
        indent = defaults.json_indent
        if raw_indent is not None:
            try:
                indent = int(raw_indent)
            except ValueError as exc:
                msg = f"{ENV_PREFIX}JSON_INDENT must be an integer, got {raw_indent!r}"
                raise ConfigurationError(msg) from exc
            if indent < 0:
                msg = f"{ENV_PREFIX}JSON_INDENT must not be negative, got {indent}"
                raise ConfigurationError(msg)

        return cls(
            api_base_url=env.get(f"{ENV_PREFIX}API_BASE_URL", defaults.api_base_url),
            app_base_url=env.get(f"{ENV_PREFIX}APP_BASE_URL", defaults.app_base_url),
            json_indent=indent,
        )
