from __future__ import annotations

from pathlib import Path

SAMPLE_RECIPES = """[Recept]
Pannkakor
[Ingredienser]
3;dl;vetemjöl
6;dl;mjölk
[Instruktioner]
Vispa ihop mjöl och mjölk till en slät smet.
[Recept]
Äppelpaj
[Ingredienser]
4;st;äpplen
[Instruktioner]
Skala och skiva äpplena.
Grädda i 225 grader i 25 minuter.
"""


def write_recipe_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "filedrecipes"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_profile(home: Path, name: str, project: str) -> Path:
    dir_path = home / ".config" / "filedrecipes" / "projects.d"
    dir_path.mkdir(parents=True, exist_ok=True)
    path = dir_path / f"{name}.toml"
    path.write_text(f"project = {project!r}\n", encoding="utf-8")
    return path
