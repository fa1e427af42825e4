from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable

import chevron

from .errors import FileSystemFailure, MissingTemplateDeclaration, RenderFailure, TemplateNotFound
from .pages import Page

TEMPLATE_KEY = "template"


def resolve_template(page: Page, templates_dir: Path) -> Path:
    name = page.metadata.get(TEMPLATE_KEY)
    if name is None:
        raise MissingTemplateDeclaration(page.relative_path)
    path = templates_dir / name
    if not path.is_file():
        raise TemplateNotFound(path)
    return path


def read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileSystemFailure(f"cannot read template {path}: {exc}") from exc


def render_template(template: str, context: dict, name: str = "<template>") -> str:
    try:
        return chevron.render(template=template, data=context)
    except Exception as exc:
        raise RenderFailure(name, str(exc)) from exc


def write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FileSystemFailure(f"cannot write {path}: {exc}") from exc


def create_directories(paths: Iterable[Path]) -> None:
    for path in paths:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSystemFailure(f"cannot create {path}: {exc}") from exc


def recreate_directory(output_dir: Path, project_root: Path) -> None:
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved or root_resolved.is_relative_to(output_resolved):
        raise FileSystemFailure(f"refusing to delete {output_dir}: it contains the project root")
    try:
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True)
    except OSError as exc:
        raise FileSystemFailure(f"cannot recreate {output_dir}: {exc}") from exc


def copy_tree(source_dir: Path, output_dir: Path) -> None:
    if not source_dir.is_dir():
        return
    try:
        shutil.copytree(source_dir, output_dir, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        raise FileSystemFailure(f"cannot copy {source_dir} to {output_dir}: {exc}") from exc
