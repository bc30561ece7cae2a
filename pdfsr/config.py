"""Configuration helpers: settings file discovery and parsing.

Settings never touch the timestamp scale; they only pick external commands
and the -Q selection behaviour.
"""

import pathlib

from pdfsr.messages import warn

DEFAULTS = {
    "viewer": "xdg-open",
    "latex": "pdflatex -interaction=nonstopmode",
    "new_first_fallback": True,
}

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def get_config_path() -> pathlib.Path:
    return pathlib.Path.home() / ".config" / "pdfsr" / "config"


def load_settings(config_path: pathlib.Path | None = None) -> dict:
    if config_path is None:
        config_path = get_config_path()
    settings = dict(DEFAULTS)
    if config_path.exists():
        for key, value in _parse_config(config_path.read_text()).items():
            if isinstance(DEFAULTS.get(key), bool):
                flag = as_bool(value)
                if flag is None:
                    warn(f"{config_path}: {key} must be true or false, got {value!r}; "
                         f"using {str(DEFAULTS[key]).lower()}")
                    continue
                value = flag
            settings[key] = value
    return settings


def as_bool(value) -> bool | None:
    """true/false in any case, quoted or not. None for anything else."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return None


def _parse_config(text: str) -> dict:
    """Flat `key = value` lines. Values stay strings, surrounding quotes removed."""
    result = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        result[key] = value
    return result
