"""Tests for single-library materialization."""

import json
import stat

import pytest

from clientlib_common import AssetSpecError, ConfigurationError, MaterializationError
from clientlib_generator.events import EventKind
from clientlib_generator.materializer import process_item
from clientlib_generator.models import GeneratorOptions, LibraryItem
from clientlib_generator.probe import file_exists

pytestmark = pytest.mark.unit


def _options(frontend, **kwargs) -> GeneratorOptions:
    return GeneratorOptions(cwd=frontend, **kwargs)


class TestProcessItem:
    """Tests for process_item."""

    def test_full_layout(self, frontend, site_item, observer):
        """Test folder, descriptor, manifests and copied assets."""
        layout = process_item(LibraryItem.model_validate(site_item), _options(frontend), observer)

        folder = frontend / "clientlibs" / "site.publish"
        assert layout.folder == folder
        assert (folder / "js" / "app.js").read_text() == "console.log('app');\n"
        assert (folder / "js" / "nav.js").is_file()
        assert (folder / "css" / "site.css").is_file()
        assert (folder / "resources" / "img" / "logo.png").read_text() == "PNG"
        assert (folder / "js.txt").read_text() == "#base=js\n\napp.js\nnav.js"
        assert (folder / "css.txt").read_text() == "#base=css\n\nsite.css"
        assert not (folder / "resources.txt").exists()

        descriptor = json.loads((frontend / "clientlibs" / "site.publish.json").read_text())
        assert descriptor["categories"] == ["site.publish"]
        assert descriptor["embed"] == ["site.base"]
        assert descriptor["dependencies"] == ["granite.jquery"]

    def test_directory_source_creates_empty_node(self, frontend, observer):
        """Test a directory entry creates the directory without its contents."""
        item = LibraryItem(name="lib", path="out", assets={"resources": ["src/js"]})

        process_item(item, _options(frontend), observer)

        target = frontend / "out" / "lib" / "resources" / "js"
        assert target.is_dir()
        assert list(target.iterdir()) == []
        assert observer.of_kind(EventKind.DIRECTORY_CREATED)[0].path == target

    def test_xml_mode(self, frontend, observer):
        """Test mode unset writes .content.xml inside the folder."""
        item = LibraryItem(name="foo", path="out", embed=["bar"], assets={"js": ["src/js/app.js"]})

        process_item(item, _options(frontend), observer)

        xml = (frontend / "out" / "foo" / ".content.xml").read_text()
        assert 'categories="[foo]"' in xml
        assert 'embed="[bar]"' in xml
        assert not (frontend / "out" / "foo.json").exists()

    def test_legacy_xml_option(self, frontend, observer):
        """Test the legacy XML attribute option reaches the descriptor writer."""
        item = LibraryItem(name="foo", path="out", dependencies=["dep"])

        process_item(item, _options(frontend, xml_legacy_dependencies=True), observer)

        assert 'embed="[dep]"' in (frontend / "out" / "foo" / ".content.xml").read_text()

    def test_default_root(self, frontend, observer):
        """Test client_lib_root applies when the item has no path."""
        item = LibraryItem(name="foo", mode="json")

        layout = process_item(item, _options(frontend, client_lib_root="dist/clientlibs"), observer)

        assert layout.root == frontend / "dist" / "clientlibs"
        assert file_exists(frontend / "dist" / "clientlibs" / "foo.json")
        assert item.path is None

    def test_no_root_raises(self, frontend, observer):
        """Test a missing root is a configuration error."""
        with pytest.raises(ConfigurationError):
            process_item(LibraryItem(name="foo"), _options(frontend), observer)

    def test_probe_before_and_after(self, frontend, observer):
        """Test the folder does not exist before and does after generation."""
        item = LibraryItem(name="foo", path="out")
        folder = frontend / "out" / "foo"

        assert file_exists(folder) is False
        process_item(item, _options(frontend), observer)
        assert file_exists(folder) is True

    def test_regeneration_removes_stale_files(self, frontend, observer):
        """Test files from a previous run that are no longer declared disappear."""
        first = LibraryItem(name="foo", path="out", assets={"js": ["src/js/app.js", "src/js/nav.js"]})
        second = LibraryItem(name="foo", path="out", assets={"js": ["src/js/app.js"]})

        process_item(first, _options(frontend), observer)
        process_item(second, _options(frontend), observer)

        folder = frontend / "out" / "foo"
        assert not (folder / "js" / "nav.js").exists()
        assert (folder / "js.txt").read_text() == "#base=js\n\napp.js"

    def test_switching_to_xml_removes_json(self, frontend, observer):
        """Test a JSON descriptor from a previous run is removed."""
        process_item(LibraryItem(name="foo", path="out", mode="json"), _options(frontend), observer)
        process_item(LibraryItem(name="foo", path="out"), _options(frontend), observer)

        assert not (frontend / "out" / "foo.json").exists()
        assert (frontend / "out" / "foo" / ".content.xml").exists()

    def test_event_order(self, frontend, observer):
        """Test events follow the pipeline order."""
        item = LibraryItem(
            name="foo",
            path="out",
            assets={"js": ["src/js/app.js", "src/js/nav.js"], "fonts": ["src/fonts"]},
        )

        process_item(item, _options(frontend), observer)

        assert observer.kinds() == [
            EventKind.LIBRARY_STARTED,
            EventKind.DESCRIPTOR_WRITTEN,
            EventKind.MANIFEST_WRITTEN,
            EventKind.FILE_COPIED,
            EventKind.FILE_COPIED,
            EventKind.DIRECTORY_CREATED,
            EventKind.LIBRARY_COMPLETED,
        ]
        copied = observer.of_kind(EventKind.FILE_COPIED)
        assert [e.src for e in copied] == ["src/js/app.js", "src/js/nav.js"]
        assert observer.of_kind(EventKind.DESCRIPTOR_WRITTEN)[0].detail == {"format": "xml"}

    def test_missing_source_raises(self, frontend, observer):
        """Test a missing source file aborts with MaterializationError."""
        item = LibraryItem(name="foo", path="out", assets={"js": ["src/js/app.js", "src/js/missing.js"]})

        with pytest.raises(MaterializationError) as exc_info:
            process_item(item, _options(frontend), observer)

        assert exc_info.value.library == "foo"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        # Files before the failure stay on disk
        assert (frontend / "out" / "foo" / "js" / "app.js").exists()

    def test_group_without_files_raises(self, frontend, observer):
        """Test an asset group lacking files aborts when iteration reaches it."""
        item = LibraryItem(
            name="foo",
            path="out",
            assets=[
                {"type": "js", "base": "js", "files": ["src/js/app.js"]},
                {"type": "css", "base": "css"},
            ],
        )

        with pytest.raises(AssetSpecError):
            process_item(item, _options(frontend), observer)

        assert (frontend / "out" / "foo" / "js" / "app.js").exists()
        assert not (frontend / "out" / "foo" / "css.txt").exists()

    def test_absolute_source(self, frontend, tmp_path, observer):
        """Test absolute source paths ignore the base directory."""
        outside = tmp_path / "outside.js"
        outside.write_text("outside")
        item = LibraryItem(name="foo", path="out", assets={"js": [str(outside)]})

        process_item(item, _options(frontend), observer)

        assert (frontend / "out" / "foo" / "js" / "outside.js").read_text() == "outside"

    def test_copy_keeps_permission_bits(self, frontend, observer):
        """Test copied files keep the source's mode."""
        source = frontend / "src" / "js" / "app.js"
        source.chmod(0o755)
        item = LibraryItem(name="foo", path="out", assets={"js": ["src/js/app.js"]})

        process_item(item, _options(frontend), observer)

        copied = frontend / "out" / "foo" / "js" / "app.js"
        assert stat.S_IMODE(copied.stat().st_mode) == 0o755
