"""Configuration loading for logproxy.

Applications that keep settings in JSON can carry a logging section and
hand it to the manager:

    {
      "logging": {
        "root_level": "warn",
        "threshold_overrides": ["svc:.*=debug", ["db", "info"], ["re:^http", "trace"]]
      }
    }

Override entries are either "pattern=level" strings (always regular
expressions) or [match, level] pairs, where a match starting with "re:"
is a regular expression and anything else is an exact category.

Everything is validated when loaded, so a bad level fails at startup
rather than on the first log call.
"""

import json
import re
from pathlib import Path

from .levels import LEVEL_NAMES, to_level
from .overrides import ThresholdOverride, parse_threshold_overrides

REGEX_PREFIX = "re:"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def _get(mapping, *keys):
    for key in keys:
        if key in mapping:
            return mapping[key]
    return None


def parse_override_entry(entry):
    """Turn one config entry into a list of ThresholdOverride."""
    if isinstance(entry, str):
        return parse_threshold_overrides(entry)
    if (isinstance(entry, (list, tuple)) and len(entry) == 2
            and isinstance(entry[0], str) and entry[0].startswith(REGEX_PREFIX)):
        entry = (re.compile(entry[0][len(REGEX_PREFIX):]), entry[1])
    return [ThresholdOverride.coerce(entry)]


def parse_config(mapping):
    """Validate a logging config mapping.

    Accepts snake_case or camelCase keys.

    Returns:
        dict of keyword arguments for LoggingManager.configure()

    Raises:
        ValueError: for an unrecognized level
        re.error: for an invalid regular expression
    """
    options = {}

    root_level = _get(mapping, "root_level", "rootLevel")
    if root_level is not None:
        level = to_level(root_level)
        if level is None:
            raise ValueError(
                f"Invalid root_level {root_level!r}, must be one of: "
                f"{', '.join(LEVEL_NAMES)}"
            )
        options["root_level"] = level

    entries = _get(mapping, "threshold_overrides", "thresholdOverrides")
    if entries is not None:
        if isinstance(entries, str):
            entries = [entries]
        overrides = []
        for entry in entries:
            overrides.extend(parse_override_entry(entry))
        options["threshold_overrides"] = overrides

    return options


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------
def load_config(path):
    """Load configure() options from a JSON file.

    Uses the document's "logging" section when present, otherwise the
    whole document. A missing file yields {}.
    """
    try:
        with open(path, encoding="utf-8") as f:
            doc = json.load(f)
    except FileNotFoundError:
        return {}
    if not isinstance(doc, dict):
        raise ValueError(f"{Path(path)}: expected a JSON object")
    section = doc.get("logging", doc)
    return parse_config(section)


def configure_from_file(path, manager=None):
    """Load a JSON config file and apply it to a manager.

    Defaults to the process-wide manager.
    """
    from .manager import get_logging_manager

    target = manager if manager is not None else get_logging_manager()
    return target.configure(**load_config(path))
