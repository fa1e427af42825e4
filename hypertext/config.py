from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .utils import parse_int

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

import yaml

DEFAULT_CONFIG = "site.toml"
DEFAULT_PORT = 8000
DEFAULT_HOST = "127.0.0.1"
INDEX_NAME = "index"


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if data is None:
            return {}
        if not isinstance(data, dict):
            print(f"YAML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"JSON config must be a mapping: {path}", file=sys.stderr)
        sys.exit(1)
    return data


@dataclass(frozen=True)
class SiteConfig:
    root: Path = field(default_factory=Path.cwd)
    content_dir: str = "content"
    static_dir: str = "static"
    styles_dir: str = "styles"
    templates_dir: str = "templates"
    output_dir: str = "public"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    index_name: str = INDEX_NAME
    build_workers: int = 1

    @classmethod
    def from_mapping(cls, data: dict, root: Path | None = None) -> "SiteConfig":
        root = Path(root) if root is not None else Path.cwd()

        def cfg_str(key: str, default: str) -> str:
            value = data.get(key)
            if value is None:
                return default
            value = str(value).strip()
            return value or default

        return cls(
            root=root,
            content_dir=cfg_str("content", "content"),
            static_dir=cfg_str("static", "static"),
            styles_dir=cfg_str("styles", "styles"),
            templates_dir=cfg_str("templates", "templates"),
            output_dir=cfg_str("output", "public"),
            host=cfg_str("host", DEFAULT_HOST),
            port=parse_int(data.get("port"), DEFAULT_PORT),
            index_name=cfg_str("index_name", INDEX_NAME),
            build_workers=parse_int(data.get("build_workers"), 1),
        )

    def _resolve(self, value: str) -> Path:
        path = Path(value)
        if path.is_absolute():
            return path
        return self.root / path

    @property
    def content(self) -> Path:
        return self._resolve(self.content_dir)

    @property
    def static(self) -> Path:
        return self._resolve(self.static_dir)

    @property
    def styles(self) -> Path:
        return self._resolve(self.styles_dir)

    @property
    def templates(self) -> Path:
        return self._resolve(self.templates_dir)

    @property
    def output(self) -> Path:
        return self._resolve(self.output_dir)

    @property
    def input_dirs(self) -> list[Path]:
        return [self.content, self.static, self.styles, self.templates]
