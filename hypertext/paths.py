from __future__ import annotations

import os
from pathlib import Path, PurePosixPath

from .errors import FileSystemFailure

INDEX_PAGE = "index.md"
HTML_SUFFIX = ".html"


def _normalized(path: Path) -> Path:
    return Path(os.path.normpath(Path(path).absolute()))


def relative_path(file_path: Path, content_root: Path) -> str:
    try:
        relative = _normalized(file_path).relative_to(_normalized(content_root))
    except ValueError:
        raise FileSystemFailure(f"{file_path} is not inside {content_root}") from None
    if not relative.parts:
        raise FileSystemFailure(f"{file_path} is the content root, not a file inside it")
    return relative.as_posix()


def is_index_page(relative: str) -> bool:
    return relative == INDEX_PAGE


def html_name(relative: str) -> PurePosixPath:
    return PurePosixPath(relative).with_suffix(HTML_SUFFIX)


def output_path(relative: str, output_root: Path) -> Path:
    return Path(output_root).joinpath(*html_name(relative).parts)


def page_url(relative: str) -> str:
    return "/" + html_name(relative).as_posix()
