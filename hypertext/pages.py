from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Mapping

from .content import ParsedContent, parse_file
from .paths import page_url, relative_path
from .utils import is_hidden

UNTITLED = "Untitled"
MARKDOWN_SUFFIX = ".md"


@dataclass(frozen=True)
class Page:
    relative_path: str
    url: str
    title: str
    metadata: Mapping[str, str] = field(default_factory=dict)
    content: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_parsed(cls, parsed: ParsedContent, relative: str) -> "Page":
        return cls(
            relative_path=relative,
            url=page_url(relative),
            title=parsed.metadata.get("title", UNTITLED),
            metadata=parsed.metadata,
            content=parsed.html,
        )

    @property
    def is_post(self) -> bool:
        return self.metadata.get("type") == "post" or self.relative_path.startswith("blog/")

    def context(self) -> dict:
        return {
            "url": self.url,
            "title": self.title,
            "metadata": dict(self.metadata),
            "content": self.content,
        }


def collect_markdown_files(content_root: Path) -> list[Path]:
    if not content_root.is_dir():
        return []
    files = []
    for path in content_root.rglob("*"):
        rel = PurePosixPath(path.relative_to(content_root).as_posix())
        if is_hidden(rel) or not path.is_file():
            continue
        if path.suffix.lower() == MARKDOWN_SUFFIX:
            files.append(path)
    return sorted(files, key=lambda p: p.relative_to(content_root).as_posix())


def collect_page(path: Path, content_root: Path) -> Page:
    parsed = parse_file(path)
    return Page.from_parsed(parsed, relative_path(path, content_root))


def collect_all_pages(content_root: Path) -> tuple[Page, ...]:
    return tuple(collect_page(path, content_root) for path in collect_markdown_files(content_root))
