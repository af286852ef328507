"""Resource limits and name aliases, overridable through the environment."""

import logging
import os
import re
from collections import namedtuple

logger = logging.getLogger(__name__)

ParserLimits = namedtuple(
    "ParserLimits",
    [
        "max_file_size",
        "max_lines",
        "max_config_lines",
        "max_key_length",
        "max_value_length",
    ],
)

DEFAULT_LIMITS = ParserLimits(
    max_file_size=1024 * 1024,  # 1MB
    max_lines=10000,
    max_config_lines=1000,
    max_key_length=100,
    max_value_length=200,
)

# Environment variable -> ParserLimits field
LIMIT_ENV_VARS = {
    "THEME_MAX_FILE_SIZE": "max_file_size",
    "THEME_MAX_LINES": "max_lines",
    "THEME_MAX_CONFIG_LINES": "max_config_lines",
    "THEME_MAX_KEY_LENGTH": "max_key_length",
    "THEME_MAX_VALUE_LENGTH": "max_value_length",
}

# Filename-derived theme names that should be published under another name
DEFAULT_NAME_ALIASES = {"root": "eidolon-root"}

_SIZE_RE = re.compile(r"^\s*(\d+)\s*([kmg]?)b?\s*$", re.IGNORECASE)
_SIZE_UNITS = {"": 1, "k": 1024, "m": 1024**2, "g": 1024**3}


def parse_size(value):
    """Parse a byte count such as "512", "64K" or "2M".

    Returns:
        int byte count, or None if the value is not understood
    """
    match = _SIZE_RE.match(value)
    if not match:
        return None
    number, unit = match.groups()
    return int(number) * _SIZE_UNITS[unit.lower()]


def load_limits(environ=None):
    """Build ParserLimits from defaults plus any THEME_MAX_* overrides.

    Invalid or non-positive values are ignored with a warning so a typo in the
    environment can never disable the limits.
    """
    environ = os.environ if environ is None else environ
    overrides = {}

    for env_name, field in LIMIT_ENV_VARS.items():
        raw = environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        if field == "max_file_size":
            value = parse_size(raw)
        else:
            value = int(raw) if raw.strip().isdecimal() else None
        if not value:
            logger.warning("Ignoring invalid %s=%r; using default", env_name, raw)
            continue
        overrides[field] = value

    return DEFAULT_LIMITS._replace(**overrides)


def load_name_aliases(environ=None):
    """Return the theme name alias table.

    THEME_NAME_ALIASES="root=eidolon-root,dark=my-dark" adds or replaces
    entries of DEFAULT_NAME_ALIASES.
    """
    environ = os.environ if environ is None else environ
    aliases = dict(DEFAULT_NAME_ALIASES)

    raw = environ.get("THEME_NAME_ALIASES", "")
    for pair in raw.split(","):
        if not pair.strip():
            continue
        source, sep, target = pair.partition("=")
        if not sep or not source.strip() or not target.strip():
            logger.warning("Ignoring malformed name alias %r", pair)
            continue
        aliases[source.strip().lower()] = target.strip()

    return aliases
