"""${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw YAML config data."""

import os
import re

# group 1: variable name; group 2: ":-default" suffix (optional); group 3: default
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset and has no inline default.

    Names are returned in first-seen order without duplicates, so one error can
    list them all.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            name, has_default = match.group(1), match.group(2) is not None
            if name not in os.environ and not has_default and name not in missing:
                missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every ${...} reference substituted.

    Call collect_missing_vars first; a reference without a default to an unset
    variable raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _substitute(match: re.Match[str]) -> str:
    name, default = match.group(1), match.group(3)
    if name in os.environ:
        return os.environ[name]
    if default is not None:
        return default
    return os.environ[name]


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []
