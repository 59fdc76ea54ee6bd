"""JSON-based settings persistence and locale lookup for the range picker."""

import json
import locale as _locale
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-range-picker-settings.json")

_DEFAULTS = {
    "dark_mode": False,
    "locale": None,
    "weekday_labels": None,
    "prev_label": "Prev",
    "next_label": "Next",
}

# Checked in order when neither the caller nor the settings file names a locale
_LOCALE_ENV_VARS = ("LC_ALL", "LC_TIME", "LANG")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file: %s", e)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file without a JSON object")
        return settings
    if "dark_mode" in stored and isinstance(stored["dark_mode"], bool):
        settings["dark_mode"] = stored["dark_mode"]
    for key in ("locale", "prev_label", "next_label"):
        if key in stored and isinstance(stored[key], str):
            settings[key] = stored[key]
    labels = stored.get("weekday_labels")
    if isinstance(labels, list) and len(labels) == 7 and all(isinstance(x, str) for x in labels):
        settings["weekday_labels"] = labels
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


# ------------------------------------------------------------------
# Locale lookup
# ------------------------------------------------------------------
def normalize_locale(name: str) -> str:
    """Turn a POSIX locale name into a BCP-47-like tag.

    ``"de_CH.UTF-8@euro"`` becomes ``"de-CH"``; ``"C"`` and ``"POSIX"``
    carry no locale information and become ``""``.
    """
    tag = name.split(".", 1)[0].split("@", 1)[0].replace("_", "-").strip()
    if tag.upper() in ("C", "POSIX"):
        return ""
    return tag


def ambient_locale(environ: dict | None = None) -> str:
    """Return the process locale as a tag, or ``""`` when none is set."""
    env = os.environ if environ is None else environ
    for var in _LOCALE_ENV_VARS:
        value = env.get(var)
        if value:
            return normalize_locale(value)
    if environ is None:
        try:
            name = _locale.getlocale(_locale.LC_TIME)[0]
        except ValueError:
            name = None
        if name:
            return normalize_locale(name)
    return ""


def resolve_locale(override: str | None = None, settings: dict | None = None,
                   environ: dict | None = None) -> str:
    """Pick the locale tag for a picker.

    Order: explicit *override*, the ``"locale"`` settings key, the
    LC_ALL / LC_TIME / LANG environment variables, the C library locale.
    An empty result means no preference (weeks start on Monday).
    """
    if override:
        return override
    if settings and settings.get("locale"):
        return settings["locale"]
    tag = ambient_locale(environ)
    logger.debug("Using ambient locale %r", tag)
    return tag
