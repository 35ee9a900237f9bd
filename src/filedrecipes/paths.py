from __future__ import annotations

from pathlib import Path

from .config import EffectiveConfig


def resolve_recipes_path(cfg: EffectiveConfig) -> Path:
    rel = Path(cfg.recipes_file).expanduser()
    if rel.is_absolute():
        return rel
    return Path(cfg.project_dir) / rel
