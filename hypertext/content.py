from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import markdown

from .errors import InvalidContent

FRONT_MATTER_MARKER = "---"
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {"codehilite": {"guess_lang": False}}


@dataclass(frozen=True)
class ParsedContent:
    metadata: dict[str, str] = field(default_factory=dict)
    html: str = ""


def parse_front_matter(text: str) -> tuple[dict[str, str], str]:
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_MARKER:
        return {}, clean_text

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == FRONT_MATTER_MARKER:
            end = i
            break
    if end is None:
        return {}, clean_text

    meta = {}
    for line in lines[1:end]:
        line = line.strip()
        if not line or line.startswith("#") or ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip().lower()
        if not key:
            continue
        meta[key] = value.strip()
    body = "\n".join(lines[end + 1 :])
    return meta, body


def parse_markdown(text: str) -> ParsedContent:
    meta, body = parse_front_matter(text)
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
    return ParsedContent(metadata=meta, html=md.convert(body))


def parse_file(path: Path) -> ParsedContent:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidContent(path) from exc
    try:
        return parse_markdown(text)
    except Exception as exc:
        raise InvalidContent(path) from exc
