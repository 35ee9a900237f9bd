from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Callable

from .config import EffectiveConfig, PROJECT_CONFIG_NAME, DEFAULT_RECIPES_FILE, config_to_toml, resolve_config
from .domain import Recipe
from .errors import (
    ConfigError,
    FiledRecipesError,
    FormatViolationError,
    InvalidLocationError,
    RecipeIndexError,
    ResourceFailureError,
)
from .paths import resolve_recipes_path
from .repository import RecipeRepository, RepositoryResult
from .views import recipe_to_dict, render_listing, render_recipe


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(getattr(args, "verbose", False))

    if args.tui or not args.command:
        return _cmd_tui(args)

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "list": _cmd_list,
        "show": _cmd_show,
        "delete": _cmd_delete,
        "check": _cmd_check,
        "init": _cmd_init,
        "config": _cmd_config,
    }

    handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except FiledRecipesError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _common_parser(default: object = None) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", dest="recipes_file", default=default)
    common.add_argument("--project", default=default)
    common.add_argument("--profile", default=default)
    common.add_argument("--encoding", default=default)
    common.add_argument("--tui-header-icon", default=default)
    common.add_argument("--verbose", action="store_true", default=False if default is None else default)
    return common


def _build_parser() -> argparse.ArgumentParser:
    # Subcommands must not reset options already given before the command name.
    common = _common_parser(default=argparse.SUPPRESS)

    parser = argparse.ArgumentParser(prog="filedrecipes", parents=[_common_parser()])
    parser.add_argument("--tui", action="store_true", help="Launch the interactive recipe browser")
    sub = parser.add_subparsers(dest="command")

    listing = sub.add_parser("list", parents=[common])
    listing.add_argument("--json", action="store_true")

    show = sub.add_parser("show", parents=[common])
    show.add_argument("index", nargs="?", type=int)

    delete = sub.add_parser("delete", parents=[common])
    target = delete.add_mutually_exclusive_group(required=True)
    target.add_argument("index", nargs="?", type=int)
    target.add_argument("--name")
    delete.add_argument("--dry-run", action="store_true")

    sub.add_parser("check", parents=[common])

    init = sub.add_parser("init")
    init.add_argument("path", nargs="?", default=".")
    init.add_argument("--force", action="store_true")

    sub.add_parser("config", parents=[common])

    return parser


def _cmd_list(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    recipes = repo.get_all()
    if args.json:
        print(json.dumps([recipe_to_dict(r) for r in recipes], indent=2, ensure_ascii=False))
    else:
        for line in render_listing(recipes):
            print(line)
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    recipes = repo.get_all() if args.index is None else [repo.get_at(args.index)]
    for i, recipe in enumerate(recipes):
        if i:
            print()
        for line in render_recipe(recipe):
            print(line)
    return 0


def _cmd_delete(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    if args.name is not None:
        if not any(r.name == args.name for r in repo.get_all()):
            raise RecipeIndexError(f"No recipe named {args.name!r}")
        target: Recipe | int = Recipe(name=args.name)
    else:
        target = args.index

    if args.dry_run:
        name = args.name if args.name is not None else repo.get_at(args.index).name
        print(f"Would delete {name!r} from {repo.path}")
        return 0

    repo.delete(target)
    _raise_on_failure(repo.save())
    print(f"Deleted 1 recipe, {len(repo)} left in {repo.path}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    repo = _open_repository(args)
    print(f"{repo.path}: {len(repo)} recipes OK")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    root = os.path.abspath(args.path)
    os.makedirs(root, exist_ok=True)
    config_path = os.path.join(root, PROJECT_CONFIG_NAME)
    if os.path.exists(config_path) and not args.force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")
    with open(config_path, "w", encoding="utf-8") as fh:
        fh.write(f'recipes_file = "{DEFAULT_RECIPES_FILE}"\nencoding = "utf-8"\n# tui_header_icon = "🍳"\n')
    recipes_path = os.path.join(root, DEFAULT_RECIPES_FILE)
    if not os.path.exists(recipes_path):
        with open(recipes_path, "w", encoding="utf-8"):
            pass
    print(config_path)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg))
    return 0


def _cmd_tui(args: argparse.Namespace) -> int:
    from .tui import run_tui

    return run_tui(_cli_args_dict(args))


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(_cli_args_dict(args))


def _open_repository(args: argparse.Namespace) -> RecipeRepository:
    cfg = _resolve_cfg(args)
    repo = RecipeRepository(resolve_recipes_path(cfg), encoding=cfg.encoding)
    _raise_on_failure(repo.load())
    return repo


def _raise_on_failure(result: RepositoryResult) -> None:
    if not result.ok and result.error is not None:
        raise result.error


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.CRITICAL
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: FiledRecipesError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, InvalidLocationError):
        return 3
    if isinstance(exc, FormatViolationError):
        return 4
    if isinstance(exc, ResourceFailureError):
        return 5
    if isinstance(exc, RecipeIndexError):
        return 6
    return 1
