from __future__ import annotations

from functools import cmp_to_key
from typing import Mapping, Sequence, Union

from .pages import Page

# Values a template may receive: plain text, a page's metadata mapping,
# or a listing of page representations.
ContextValue = Union[str, Mapping[str, str], Sequence[Mapping[str, object]]]
RenderContext = dict[str, ContextValue]


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_posts(a: Page, b: Page) -> int:
    date_a = a.metadata.get("date")
    date_b = b.metadata.get("date")
    if date_a is not None and date_b is not None:
        return _cmp(date_b, date_a)
    if date_a is not None:
        return -1
    if date_b is not None:
        return 1
    return _cmp(a.title, b.title)


def blog_posts(pages: Sequence[Page]) -> list[dict]:
    posts = sorted((page for page in pages if page.is_post), key=cmp_to_key(compare_posts))
    return [page.context() for page in posts]


def all_pages_context(pages: Sequence[Page]) -> list[dict]:
    return [page.context() for page in pages]


def build_context(page: Page, all_pages: Sequence[Page] = (), is_index: bool = False) -> RenderContext:
    context: RenderContext = {"content": page.content}
    # front-matter wins, including over "content"
    context.update(page.metadata)

    if is_index:
        context["pages"] = all_pages_context(all_pages)
        context["posts"] = blog_posts(all_pages)

    return context
