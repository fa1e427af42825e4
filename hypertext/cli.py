from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .builder import build_site, init_project
from .config import DEFAULT_CONFIG, SiteConfig, load_config
from .errors import SiteError
from .server import serve


def load_site_config(config_path: str) -> SiteConfig:
    project_root = Path.cwd()
    path = Path(config_path)
    if not path.is_absolute():
        path = project_root / path
    return SiteConfig.from_mapping(load_config(path), root=project_root)


def run_init(config: SiteConfig) -> None:
    created = init_project(config)
    for path in created:
        print(f"Created {path}/")
    print("Project directories created.")


def run_build(config: SiteConfig) -> int:
    start = time.perf_counter()
    count = build_site(config)
    elapsed = time.perf_counter() - start
    print(f"Build complete: {count} pages processed.")
    print(f"Build completed in {elapsed:.2f}s.")
    return count


def run_serve(config: SiteConfig) -> None:
    run_build(config)
    try:
        serve(config)
    except KeyboardInterrupt:
        print("\nServer stopped.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hx", description="An elegant static site generator.")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to site config file (TOML/YAML/JSON).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("init", help="Create a new project structure.")
    subparsers.add_parser("build", help="Build the site into the output directory.")
    subparsers.add_parser("serve", help="Serve the site locally after building.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    config = load_site_config(args.config)
    commands = {"init": run_init, "build": run_build, "serve": run_serve}
    try:
        commands[args.command](config)
    except SiteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
