"""Render options: defaults, discovery, loading, validation."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

from apiscope.errors import ConfigError

CONFIG_NAME = ".apiscope.json"
NAMESPACED_ENV = "APISCOPE_NAMESPACED"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RenderOptions:
    """How names and members are rendered.

    ``expanded`` selects the one-parameter-per-line layout; ``None`` means
    "expanded when namespaced".
    """

    namespaced: bool = False
    indent: str = ""
    expanded: bool | None = None


_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "namespaced": (bool,),
    "indent": (str,),
    "expanded": (bool, type(None)),
}


def find_config_root(start: str | Path = ".") -> Path | None:
    """Walk up from *start* looking for a .apiscope.json file.

    Returns the directory containing the config, or None.
    """
    current = Path(start).resolve()
    while current != current.parent:
        if (current / CONFIG_NAME).exists():
            return current
        current = current.parent
    return None


def load_render_options(root: Path | None = None) -> RenderOptions:
    """Read .apiscope.json from *root* (defaults if absent), then apply env overrides."""
    options = RenderOptions()
    if root is not None:
        config_path = Path(root) / CONFIG_NAME
        if config_path.exists():
            try:
                cfg = json.loads(config_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{config_path}: invalid JSON: {exc}") from exc
            options = options_from_dict(cfg)
    return apply_env(options)


def options_from_dict(cfg: dict[str, Any]) -> RenderOptions:
    _validate_config(cfg)
    return RenderOptions(**cfg)


def apply_env(options: RenderOptions, environ: dict[str, str] | None = None) -> RenderOptions:
    env = os.environ if environ is None else environ
    value = env.get(NAMESPACED_ENV)
    if value is None:
        return options
    return replace(options, namespaced=value.strip().lower() in _TRUTHY)


def save_render_options(root: Path, options: RenderOptions) -> Path:
    """Write *options* as .apiscope.json to *root*.

    Returns the path to the written file.
    """
    config_path = Path(root) / CONFIG_NAME
    config_path.write_text(
        json.dumps(asdict(options), indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return config_path


def _validate_config(cfg: Any) -> None:
    if not isinstance(cfg, dict):
        raise ConfigError("Render options must be a JSON object")
    for key, value in cfg.items():
        if key not in _FIELD_TYPES:
            raise ConfigError(
                f"Unknown render option: {key!r}",
                suggestion=f"valid options: {', '.join(sorted(_FIELD_TYPES))}",
            )
        if not isinstance(value, _FIELD_TYPES[key]):
            raise ConfigError(f"Render option {key!r} has invalid value {value!r}")
    indent = cfg.get("indent", "")
    if indent.strip(" "):
        raise ConfigError("Render option 'indent' must contain only spaces")
