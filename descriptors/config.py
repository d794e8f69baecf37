from __future__ import annotations

import codecs
from typing import Dict, Optional
import yaml

from descriptors.context import NormalizeConfig

ERROR_POLICIES = ("skip", "abort")


class ConfigError(Exception):
    pass


def _validate_section(obj, key: str) -> Dict:
    if not isinstance(obj, dict) or key not in obj:
        raise ConfigError(f"Missing {key} section")
    value = obj[key]
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise ConfigError(f"Invalid {key} section")


def _string_option(section: Dict, name: str, default: str, allow_empty: bool = False) -> str:
    value = section.get(name, default)
    if not isinstance(value, str) or (not value and not allow_empty):
        raise ConfigError(f"Invalid {name}: {value!r}")
    return value


def _validate_encoding(encoding: str) -> str:
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ConfigError(f"Unknown encoding: {encoding!r}") from None
    return encoding


def config_from_dict(data: Dict) -> NormalizeConfig:
    section = _validate_section(data, "mdnorm")
    defaults = NormalizeConfig()
    on_error = _string_option(section, "on_error", defaults.on_error)
    if on_error not in ERROR_POLICIES:
        raise ConfigError(f"Invalid on_error: {on_error!r} (expected one of {', '.join(ERROR_POLICIES)})")
    return NormalizeConfig(
        on_error=on_error,
        # An empty prefix turns comment skipping off.
        comment_prefix=_string_option(section, "comment_prefix", defaults.comment_prefix, allow_empty=True),
        encoding=_validate_encoding(_string_option(section, "encoding", defaults.encoding)),
    )


def load_config(path: Optional[str] = None) -> NormalizeConfig:
    if path is None:
        return NormalizeConfig()
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}") from exc
    return config_from_dict(data)
