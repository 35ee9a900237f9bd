from __future__ import annotations

from ..config import EffectiveConfig
from ..domain import Recipe
from ..repository import RecipeRepository
from .layout import clamp_index, detail_text, normalize_header_icon, recipe_label, status_text
from .textual import App, ComposeResult, Footer, Header, Horizontal, Label, ListItem, ListView, Static, VerticalScroll
from .theme import APP_CSS


class RecipeItem(ListItem):
    def __init__(self, index: int, recipe: Recipe) -> None:
        super().__init__(Label(recipe_label(index, recipe)))
        self.recipe = recipe


class FiledRecipesApp(App):
    TITLE = "filedrecipes"
    CSS = APP_CSS
    BINDINGS = [
        ("d", "delete_recipe", "Delete"),
        ("s", "save", "Save"),
        ("r", "reload", "Reload"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, cfg: EffectiveConfig, repository: RecipeRepository) -> None:
        super().__init__()
        self.cfg = cfg
        self.repository = repository
        self.recipes: list[Recipe] = []
        self.message = ""

    def compose(self) -> ComposeResult:
        yield Header(icon=normalize_header_icon(self.cfg.tui.header_icon))
        with Horizontal(id="browser"):
            yield ListView(id="recipe-list")
            with VerticalScroll(id="detail-pane"):
                yield Static(detail_text(None), id="detail")
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.repository.recipes_changed.subscribe(self._on_recipes_changed)
        self.action_reload()

    def on_unmount(self, event=None) -> None:
        self.repository.recipes_changed.unsubscribe(self._on_recipes_changed)

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        item = event.item
        self._show_detail(getattr(item, "recipe", None))

    def action_reload(self) -> None:
        result = self.repository.load()
        self._set_message("Loaded" if result.ok else f"Load failed: {result.error}")

    def action_save(self) -> None:
        result = self.repository.save()
        self._set_message("Saved" if result.ok else f"Save failed: {result.error}")

    def action_delete_recipe(self) -> None:
        list_view = self.query_one("#recipe-list", ListView)
        item = list_view.highlighted_child
        recipe = getattr(item, "recipe", None)
        if recipe is None:
            return
        self.repository.delete(recipe)
        self._set_message(f"Deleted {recipe.name!r}")

    def _on_recipes_changed(self) -> None:
        self.call_later(self._rebuild_list)

    async def _rebuild_list(self) -> None:
        list_view = self.query_one("#recipe-list", ListView)
        previous = list_view.index or 0
        self.recipes = self.repository.get_all()
        await list_view.clear()
        await list_view.extend(RecipeItem(index, recipe) for index, recipe in enumerate(self.recipes))
        list_view.index = clamp_index(previous, len(self.recipes))
        self._show_detail(None if list_view.index is None else self.recipes[list_view.index])
        self._refresh_status()

    def _show_detail(self, recipe: Recipe | None) -> None:
        self.query_one("#detail", Static).update(detail_text(recipe))

    def _set_message(self, message: str) -> None:
        self.message = message
        self._refresh_status()

    def _refresh_status(self) -> None:
        self.query_one("#status", Static).update(
            status_text(len(self.repository), self.repository.is_modified, self.message)
        )
