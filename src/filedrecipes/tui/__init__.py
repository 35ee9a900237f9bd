from __future__ import annotations

from ..config import resolve_config
from ..paths import resolve_recipes_path
from ..repository import RecipeRepository
from .app import FiledRecipesApp


def run_tui(cli_args: dict[str, object]) -> int:
    cfg = resolve_config(cli_args)
    repository = RecipeRepository(resolve_recipes_path(cfg), encoding=cfg.encoding)
    app = FiledRecipesApp(cfg, repository)
    app.run()
    return 0


__all__ = ["run_tui", "FiledRecipesApp"]
