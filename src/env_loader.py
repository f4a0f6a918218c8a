"""Load nozzle settings from environment variables.

The loader is a pure function of the mapping it is given, callers pass
`os.environ` at startup and plain dicts in tests.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from src.errors import EnvironmentParseError
from src.settings import NozzleSettings

logger = logging.getLogger(__name__)

INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_bool(env_name: str, value: str) -> bool:
    """Parse a case-insensitive "true" / "false" token.

    Raises:
        EnvironmentParseError: For any other token
    """
    token = value.lower()
    if token == "true":
        return True
    if token == "false":
        return False
    raise EnvironmentParseError(
        f"{env_name}: invalid boolean value {value!r}, expected 'true' or 'false'"
    )


def parse_int(env_name: str, value: str) -> int:
    # ASCII digits with an optional sign, nothing else
    if not INT_TOKEN.fullmatch(value):
        raise EnvironmentParseError(f"{env_name}: invalid integer value {value!r}")
    return int(value, 10)


def load_settings(environ: Mapping[str, str]) -> NozzleSettings:
    """Build `NozzleSettings` from environment variables.

    Args:
        environ: Environment variable lookup, usually `os.environ`.

    Returns:
        Settings populated from `environ` with defaults for absent variables.

    Raises:
        EnvironmentParseError: If a required variable is absent or a value
            cannot be parsed
    """
    values: dict[str, Any] = {}
    env_names: dict[str, str] = {}

    for name, field in NozzleSettings.model_fields.items():
        env_name = field.alias
        if env_name is None:
            # not read from the environment
            continue
        env_names[name] = env_names[env_name] = env_name

        if env_name not in environ:
            if field.is_required():
                logger.error("Required environment variable %s is not set", env_name)
                raise EnvironmentParseError(f"required key {env_name} missing value")
            continue

        raw = environ[env_name]
        if field.annotation is bool:
            values[name] = parse_bool(env_name, raw)
        elif field.annotation is int:
            values[name] = parse_int(env_name, raw)
        else:
            values[name] = raw

    try:
        return NozzleSettings(**values)
    except ValidationError as e:
        err = e.errors()[0]
        field_name = str(err["loc"][0]) if err["loc"] else ""
        env_name = env_names.get(field_name, field_name)
        raise EnvironmentParseError(
            f"{env_name}: {err['msg']} (got {err['input']!r})"
        ) from e
