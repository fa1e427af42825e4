from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Sequence

from .config import SiteConfig
from .context import build_context
from .pages import Page, collect_all_pages
from .paths import is_index_page, output_path
from .render import (
    copy_tree,
    create_directories,
    read_template,
    recreate_directory,
    render_template,
    resolve_template,
    write_text,
)


def init_project(config: SiteConfig) -> list[Path]:
    dirs = config.input_dirs
    create_directories(dirs)
    return dirs


def render_page(page: Page, all_pages: Sequence[Page], config: SiteConfig) -> Path:
    template_path = resolve_template(page, config.templates)
    template = read_template(template_path)
    context = build_context(page, all_pages, is_index=is_index_page(page.relative_path))
    rendered = render_template(template, context, name=str(template_path))
    destination = output_path(page.relative_path, config.output)
    write_text(destination, rendered)
    return destination


def render_pages(pages: Sequence[Page], config: SiteConfig) -> list[Path]:
    workers = max(1, min(config.build_workers, len(pages) or 1))
    if workers == 1:
        return [render_page(page, pages, config) for page in pages]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(render_page, page, pages, config) for page in pages]
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in pending:
            future.cancel()
        for future in futures:
            if future in done and future.exception() is not None:
                raise future.exception()
        return [future.result() for future in futures]


def build_site(config: SiteConfig) -> int:
    recreate_directory(config.output, config.root)
    copy_tree(config.static, config.output)
    copy_tree(config.styles, config.output)

    pages = collect_all_pages(config.content)
    render_pages(pages, config)
    return len(pages)
