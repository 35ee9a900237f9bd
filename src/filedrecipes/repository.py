from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import shutil
import tempfile
from typing import Union

from .domain import Recipe, format_recipes, parse_lines, sort_recipes
from .errors import (
    FiledRecipesError,
    FormatViolationError,
    InvalidLocationError,
    RecipeIndexError,
    ResourceFailureError,
)
from .signals import Signal

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class RepositoryResult:
    ok: bool
    count: int = 0
    error: FiledRecipesError | None = None

    def __bool__(self) -> bool:
        return self.ok


class RecipeRepository:
    """Holder for the recipes stored in a single text file.

    The repository owns its recipes. Callers only ever receive copies, so
    changing a returned recipe has no effect until it is handed back
    through ``delete`` or persisted state is reloaded.
    """

    def __init__(self, path: PathLike, encoding: str = "utf-8") -> None:
        self._path = resolve_location(path)
        self._encoding = encoding
        self._recipes: list[Recipe] = []
        self._modified = False
        self.recipes_changed = Signal()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_modified(self) -> bool:
        return self._modified

    def __len__(self) -> int:
        return len(self._recipes)

    def get_all(self) -> list[Recipe]:
        return [recipe.copy() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        return self._recipes[self._check_index(index)].copy()

    def delete(self, target: Recipe | int | None) -> bool:
        if isinstance(target, bool):
            raise TypeError("delete() takes a Recipe or an integer index, not a bool")
        if isinstance(target, int):
            del self._recipes[self._check_index(target)]
            removed = True
        else:
            removed = self._remove(target)
        self._modified = True
        self.recipes_changed.emit()
        return removed

    def load(self) -> RepositoryResult:
        try:
            recipes = self._read()
        except (FormatViolationError, ResourceFailureError) as exc:
            logger.error("Failed to load recipes from %s: %s", self._path, exc)
            return RepositoryResult(ok=False, error=exc)

        self._recipes = sort_recipes(recipes)
        self._modified = False
        logger.debug("Loaded %d recipes from %s", len(self._recipes), self._path)
        self.recipes_changed.emit()
        return RepositoryResult(ok=True, count=len(self._recipes))

    def save(self) -> RepositoryResult:
        try:
            self._write()
        except ResourceFailureError as exc:
            logger.error("Failed to save recipes to %s: %s", self._path, exc)
            return RepositoryResult(ok=False, error=exc)

        self._modified = False
        logger.debug("Saved %d recipes to %s", len(self._recipes), self._path)
        return RepositoryResult(ok=True, count=len(self._recipes))

    def _remove(self, target: Recipe | None) -> bool:
        index = self._resolve(target)
        if index is None:
            return False
        del self._recipes[index]
        return True

    def _resolve(self, target: Recipe | None) -> int | None:
        if target is None:
            return None
        # Exact instance first, then copies of it, then any recipe with the same name.
        for matches in (
            lambda r: r is target,
            lambda r: r.recipe_id == target.recipe_id,
            lambda r: r == target,
        ):
            for index, recipe in enumerate(self._recipes):
                if matches(recipe):
                    return index
        return None

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._recipes):
            raise RecipeIndexError(f"Recipe index out of range: {index} (have {len(self._recipes)})")
        return index

    def _read(self) -> list[Recipe]:
        try:
            with self._path.open("r", encoding=self._encoding) as fh:
                return parse_lines(fh)
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceFailureError(f"Failed to read recipe file: {self._path}") from exc

    def _write(self) -> None:
        text = format_recipes(self._recipes)
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self._encoding,
                newline="\n",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                fh.write(text)
            if self._path.exists():
                shutil.copymode(self._path, tmp_name)
            os.replace(tmp_name, self._path)
        except (OSError, UnicodeEncodeError) as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise ResourceFailureError(f"Failed to write recipe file: {self._path}") from exc


def resolve_location(path: PathLike) -> Path:
    text = os.fspath(path)
    if not text or not str(text).strip():
        raise InvalidLocationError("Recipe file path must not be empty")
    if "\0" in str(text):
        raise InvalidLocationError(f"Recipe file path contains a NUL byte: {text!r}")
    try:
        return Path(text).expanduser().resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise InvalidLocationError(f"Cannot resolve recipe file path: {text}") from exc
