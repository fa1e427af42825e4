from __future__ import annotations

from pathlib import PurePosixPath


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def is_hidden(relative: PurePosixPath) -> bool:
    return any(part.startswith(".") for part in relative.parts)
