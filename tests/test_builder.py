import dataclasses

import pytest

from hypertext.builder import build_site, init_project
from hypertext.config import SiteConfig
from hypertext.errors import InvalidContent, MissingTemplateDeclaration, TemplateNotFound

from .conftest import page_source, write


def snapshot(root):
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


@pytest.fixture
def site(config):
    write(config.content / "index.md", page_source("Welcome", title="Home", template="home.html"))
    write(config.content / "about.md", page_source("About me", title="About", template="page.html"))
    write(config.content / "blog" / "first.md", page_source("One", title="First", date="2024-01-01", template="page.html"))
    write(config.content / "blog" / "second.md", page_source("Two", title="Second", date="2024-03-01", template="page.html"))
    write(config.content / "blog" / "index.md", page_source("Blog", title="Blog", template="home.html"))
    write(config.static / "img" / "logo.png", "PNG")
    write(config.styles / "site.css", "body {}")
    return config


class TestInitProject:
    def test_creates_input_directories(self, tmp_path):
        config = SiteConfig(root=tmp_path)
        init_project(config)
        for name in ("content", "static", "styles", "templates"):
            assert (tmp_path / name).is_dir()
        assert not (tmp_path / "public").exists()


class TestBuildSite:
    def test_output_tree(self, site):
        assert build_site(site) == 5
        assert set(snapshot(site.output)) == {
            "index.html",
            "about.html",
            "blog/first.html",
            "blog/second.html",
            "blog/index.html",
            "img/logo.png",
            "site.css",
        }

    def test_page_render(self, site):
        build_site(site)
        assert (site.output / "about.html").read_text() == "<title>About</title><main><p>About me</p></main>"

    def test_index_lists_sorted_posts(self, site):
        build_site(site)
        html = (site.output / "index.html").read_text()
        assert "<li>Blog||/blog/index.html</li>" in html
        assert html.index("Second|2024-03-01|/blog/second.html") < html.index("First|2024-01-01|/blog/first.html")
        assert html.index("First|") < html.index("Blog||")
        assert "<li>/about.html</li>" in html

    def test_nested_index_gets_no_listings(self, site):
        build_site(site)
        assert (site.output / "blog" / "index.html").read_text() == "<ul></ul><ol></ol><p>Blog</p>"

    def test_removes_stale_files(self, site):
        write(site.output / "stale.html", "old")
        build_site(site)
        assert not (site.output / "stale.html").exists()

    def test_idempotent(self, site):
        build_site(site)
        first = snapshot(site.output)
        build_site(site)
        assert snapshot(site.output) == first

    def test_parallel_matches_sequential(self, site):
        build_site(site)
        sequential = snapshot(site.output)
        build_site(dataclasses.replace(site, build_workers=4))
        assert snapshot(site.output) == sequential

    def test_missing_template_aborts(self, site):
        write(site.content / "broken.md", page_source("x", title="Broken", template="nope.html"))
        with pytest.raises(TemplateNotFound):
            build_site(site)
        assert not (site.output / "broken.html").exists()

    def test_missing_template_aborts_in_parallel(self, site):
        write(site.content / "broken.md", page_source("x", title="Broken", template="nope.html"))
        with pytest.raises(TemplateNotFound):
            build_site(dataclasses.replace(site, build_workers=4))
        assert not (site.output / "broken.html").exists()

    def test_missing_declaration_aborts(self, site):
        write(site.content / "plain.md", "Just text\n")
        with pytest.raises(MissingTemplateDeclaration):
            build_site(site)

    def test_invalid_content_aborts_before_render(self, site):
        (site.content / "bad.md").write_bytes(b"\xff\xfe")
        with pytest.raises(InvalidContent):
            build_site(site)
        assert not (site.output / "index.html").exists()
