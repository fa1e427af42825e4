from pathlib import Path

import pytest

from hypertext.config import SiteConfig


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def page_source(body: str = "Hello", **meta: str) -> str:
    lines = ["---"] + [f"{key}: {value}" for key, value in meta.items()] + ["---", body]
    return "\n".join(lines) + "\n"


@pytest.fixture
def config(tmp_path: Path) -> SiteConfig:
    cfg = SiteConfig(root=tmp_path)
    for path in cfg.input_dirs:
        path.mkdir(parents=True)
    write(cfg.templates / "page.html", "<title>{{title}}</title><main>{{{content}}}</main>")
    write(
        cfg.templates / "home.html",
        "<ul>{{#posts}}<li>{{title}}|{{metadata.date}}|{{url}}</li>{{/posts}}</ul>"
        "<ol>{{#pages}}<li>{{url}}</li>{{/pages}}</ol>{{{content}}}",
    )
    return cfg
