"""Config manager — load JSON → apply env overrides → validate → PomoboxConfig.

The file is read once at start-up.  Settings edited on the device live in
memory only and are never written back.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pomobox.core.models.config import PROFILES, PomoboxConfig

_log = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "pomobox_config.json"

# Environment variable → config field mapping.
# Keys are env-var names; values are ``(section, field, type)`` tuples.
_ENV_OVERRIDES: dict[str, tuple[str, str, type]] = {
    "POMOBOX_LOG_LEVEL": ("system", "log_level", str),
    "POMOBOX_DEV_MODE": ("system", "dev_mode", bool),
    "POMOBOX_TEST_MODE": ("system", "test_mode", bool),
    "POMOBOX_HEADLESS": ("system", "headless", bool),
    "POMOBOX_FRAME_RATE": ("system", "frame_rate", int),
    "POMOBOX_WEBUI_PORT": ("system", "webui_port", int),
}

# Selects one of the named presets in PROFILES, replacing the file's profile.
_PROFILE_ENV = "POMOBOX_PROFILE"


def _coerce(value: str, target_type: type) -> object:
    """Coerce a string env-var value to the expected Python type."""
    if target_type is bool:
        return value.strip().lower() in ("1", "true", "yes")
    return target_type(value)


def load_config(config_path: Path | str | None = None) -> PomoboxConfig:
    """Load, override, and validate the Pomobox configuration.

    Args:
        config_path: Path to ``pomobox_config.json``.  When *None*, falls
            back to ``POMOBOX_CONFIG_FILE`` env-var and then the default
            location next to this module.

    Returns:
        A fully-validated :class:`PomoboxConfig` instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If ``POMOBOX_PROFILE`` names an unknown preset.
        pydantic.ValidationError: If any value is out of range.
    """
    path = _resolve_config_path(config_path)
    _log.info("Loading config from %s", path)

    raw = json.loads(path.read_text(encoding="utf-8"))

    for env_key, (section, field, typ) in _ENV_OVERRIDES.items():
        env_val = os.environ.get(env_key)
        if env_val is not None:
            raw.setdefault(section, {})[field] = _coerce(env_val, typ)
            _log.debug("Env override: %s → %s.%s = %r", env_key, section, field, env_val)

    profile_name = os.environ.get(_PROFILE_ENV)
    if profile_name is not None:
        preset = PROFILES.get(profile_name.strip().lower())
        if preset is None:
            raise ValueError(
                f"Unknown profile {profile_name!r} in {_PROFILE_ENV}; "
                f"expected one of {sorted(PROFILES)}"
            )
        raw["profile"] = preset.model_dump()
        _log.debug("Env override: %s → profile preset %s", _PROFILE_ENV, preset.name)

    return PomoboxConfig(**raw)


def _resolve_config_path(config_path: Path | str | None) -> Path:
    if config_path is not None:
        p = Path(config_path)
    else:
        env = os.environ.get("POMOBOX_CONFIG_FILE")
        p = Path(env) if env else _DEFAULT_CONFIG_PATH
    if not p.is_file():
        raise FileNotFoundError(
            f"Config file not found: {p}\n"
            "Create pomobox_config.json or set POMOBOX_CONFIG_FILE to a valid path."
        )
    return p
