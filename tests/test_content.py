"""Tests for folio.services.content.resolve_content."""

from pathlib import Path
from unittest.mock import patch

from folio.services.content import ContentKind, directory_listing, resolve_content


class TestResolveContent:
    def test_root_renders_home_template(self, site):
        resolution = resolve_content(site, "/")
        assert resolution.kind is ContentKind.DIRECTORY
        assert resolution.template == "index.html"

    def test_directory_with_template(self, site):
        resolution = resolve_content(site, "/about/")
        assert resolution.kind is ContentKind.DIRECTORY
        assert resolution.template == "about/index.html"

    def test_directory_without_template(self, site):
        resolution = resolve_content(site, "/notes/")
        assert resolution.kind is ContentKind.DIRECTORY
        assert resolution.template is None
        assert resolution.path == site.static_root / "notes"

    def test_regular_file(self, site):
        resolution = resolve_content(site, "/css/site.css")
        assert resolution.kind is ContentKind.FILE
        assert resolution.path == site.static_root / "css" / "site.css"

    def test_missing_path(self, site):
        assert resolve_content(site, "/nope/").kind is ContentKind.NOT_FOUND

    def test_file_used_as_directory_is_not_found(self, site):
        assert resolve_content(site, "/css/site.css/more").kind is ContentKind.NOT_FOUND

    def test_traversal_stays_inside_content_root(self, site):
        resolution = resolve_content(site, "/../../css/site.css")
        assert resolution.kind is ContentKind.FILE
        assert resolution.path == site.static_root / "css" / "site.css"

    def test_permission_error_is_an_error(self, site):
        with patch.object(Path, "stat", autospec=True, side_effect=PermissionError("denied")):
            assert resolve_content(site, "/about/").kind is ContentKind.ERROR

    def test_permission_error_on_template_is_an_error(self, site):
        real_stat = Path.stat

        def fake_stat(path, *args, **kwargs):
            if site.template_root in path.parents:
                raise PermissionError("denied")
            return real_stat(path, *args, **kwargs)

        with patch.object(Path, "stat", autospec=True, side_effect=fake_stat):
            assert resolve_content(site, "/about/").kind is ContentKind.ERROR

    def test_name_with_question_mark(self, site):
        (site.static_root / "what?.txt").write_text("asked")
        resolution = resolve_content(site, "/what?.txt")
        assert resolution.kind is ContentKind.FILE


class TestDirectoryListing:
    def test_lists_entries_with_directory_marker(self, site):
        listing = directory_listing(site.static_root / "notes")
        assert '<a href="a.txt">a.txt</a>' in listing
        assert '<a href="sub/">sub/</a>' in listing

    def test_names_are_escaped(self, tmp_path):
        (tmp_path / "<b>.txt").write_text("")
        listing = directory_listing(tmp_path)
        assert "&lt;b&gt;.txt" in listing
        assert "<b>" not in listing
