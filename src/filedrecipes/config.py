from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError

DEFAULT_RECIPES_FILE = "recipes.txt"
DEFAULT_ENCODING = "utf-8"
DEFAULT_HEADER_ICON = "🍳"
PROJECT_CONFIG_NAME = "filedrecipes.toml"


@dataclass(frozen=True)
class TuiConfig:
    header_icon: str = DEFAULT_HEADER_ICON


@dataclass(frozen=True)
class EffectiveConfig:
    recipes_file: str
    encoding: str
    tui: TuiConfig
    project_dir: str


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/filedrecipes"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_profile(profile: str) -> Optional[str]:
    path = _config_root() / "projects.d" / f"{profile}.toml"
    if not path.exists():
        return None
    data = _load_toml(path)
    project = data.get("project")
    if not project:
        raise ConfigError(f"Profile {profile!r} missing 'project' key")
    return str(project)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / PROJECT_CONFIG_NAME
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    profile = cli_args.get("profile")
    project_dir = cli_args.get("project")
    if not project_dir and profile:
        project_dir = load_profile(profile)
    if not project_dir:
        project_dir = global_cfg.get("default_project") or os.getcwd()

    project_cfg = load_project_config(project_dir)
    merged = merge_config(_cli_to_dict(cli_args), project_cfg, global_cfg)

    recipes_file = str(merged.get("recipes_file") or "").strip() or DEFAULT_RECIPES_FILE
    encoding = _normalize_encoding(merged.get("encoding", DEFAULT_ENCODING))
    tui_icon = merged.get("tui_header_icon", DEFAULT_HEADER_ICON)

    return EffectiveConfig(
        recipes_file=recipes_file,
        encoding=encoding,
        tui=TuiConfig(header_icon=str(tui_icon)),
        project_dir=str(project_dir),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("recipes_file", "encoding", "tui_header_icon"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]
    return out


def _normalize_encoding(value: Any) -> str:
    text = str(value or "").strip() or DEFAULT_ENCODING
    try:
        codecs.lookup(text)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {text!r}") from exc
    return text


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [
        f"recipes_file = {cfg.recipes_file!r}",
        f"encoding = {cfg.encoding!r}",
        f"tui_header_icon = {cfg.tui.header_icon!r}",
    ]
    return "\n".join(lines) + "\n"
