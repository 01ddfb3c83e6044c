from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from folio.config import SiteSettings
from folio.main import create_app
from folio.routers.query import limiter

# ---------------------------------------------------------------------------
# Site fixtures
# ---------------------------------------------------------------------------

_TEMPLATES = {
    "layout.html": "<html><title>{{ page.title }}</title><body>{% include content %}</body></html>",
    "index.html": "<p>Welcome to the Catalog of things</p>",
    "404.html": "NOT FOUND PAGE",
    "error.html": "ERROR PAGE",
    "about/index.html": "About me {{ page.title }} and my dogs",
    "broken/index.html": "{% for %}",
    "blog/index.html": (
        "{% for post in page.blog_links %}"
        "<h2>{{ post.name }}</h2><a href=\"{{ post.path }}\"></a>{{ post.text | safe }}"
        "{% endfor %}"
    ),
    "gallery/index.html": (
        "{% for link in page.links %}"
        "<li>{{ link.name }}|{{ link.path }}|{{ link.image }}|{{ link.img_count }}</li>"
        "{% endfor %}"
    ),
    "gallery/template.html": (
        "<h1>{{ page.title }}</h1>"
        "<div id=one>{{ page.image_column_one | join(',') }}</div>"
        "<div id=two>{{ page.image_column_two | join(',') }}</div>"
    ),
    "query/index.html": (
        "{% for d in page.found_documents %}"
        "<li>{{ d.name }}|{{ d.path }}|{{ d.matching_words }}</li>"
        "{% endfor %}"
    ),
}

_STATIC = {
    "css/site.css": "body { color: black; }",
    "about/.keep": "",
    "broken/.keep": "",
    "notes/a.txt": "note a",
    "notes/sub/b.txt": "note b",
    "blog/first-post/index.html": "<p>First post body</p>",
    "blog/second/draft.txt": "no index document here",
    "blog/readme.txt": "not a post",
    "gallery/summer/a.jpg": "jpg-a",
    "gallery/summer/b.jpg": "jpg-b",
    "gallery/summer/c.jpg": "jpg-c",
    "gallery/winter/x.png": "png-x",
    "gallery/readme.txt": "not a collection",
}


def write_tree(root: Path, files: dict) -> None:
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


@pytest.fixture
def site(tmp_path) -> SiteSettings:
    """A complete site laid out under a temporary directory."""
    write_tree(tmp_path / "templates", _TEMPLATES)
    write_tree(tmp_path / "static", _STATIC)
    return SiteSettings(static_root=tmp_path / "static", template_root=tmp_path / "templates")


@pytest.fixture
def client(site) -> TestClient:
    return TestClient(create_app(site))


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the slowapi in-memory counter before every test."""
    limiter._storage.reset()
    yield


@pytest.fixture(name="write_tree")
def write_tree_fixture():
    """Expose :func:`write_tree` to tests that build their own trees."""
    return write_tree
