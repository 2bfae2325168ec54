"""
Tests for the mapping catalog.
"""

import json
import pytest

from common.exceptions import CatalogLoadError, DuplicateMappingError
from profilesync.catalog import (
    DEFAULT_DESCRIPTION,
    DEFAULT_MAPPINGS,
    MappingCatalog,
    MappingEntry,
    default_catalog,
    describe,
    load_catalog,
)


@pytest.mark.unit
class TestMappingEntry:
    """Tests for MappingEntry."""

    def test_directory_entry(self):
        """Test fragments ending in a slash are directory entries."""
        assert MappingEntry("vim/.vim/", "vim/.vim/").is_directory is True
        assert MappingEntry("vim/.vimrc", "vim/.vimrc").is_directory is False

    def test_entry_is_frozen(self):
        """Test entries cannot be mutated."""
        entry = MappingEntry("a", "b", "c")
        with pytest.raises(AttributeError):
            entry.source_fragment = "x"

    def test_from_dict_defaults(self):
        """Test destination and description defaults."""
        entry = MappingEntry.from_dict({"source": "tool/rc"})
        assert entry.dest_fragment == "tool/rc"
        assert entry.description == DEFAULT_DESCRIPTION

    def test_from_dict_uses_builtin_description(self):
        """Test a known fragment picks up the built-in description."""
        entry = MappingEntry.from_dict({"source": "aws/config"})
        assert entry.description == "AWS configuration"


@pytest.mark.unit
class TestDefaultCatalog:
    """Tests for the built-in catalog."""

    def test_order_matches_table(self):
        """Test entries keep table order."""
        catalog = default_catalog()
        fragments = [entry.source_fragment for entry in catalog.entries()]
        assert fragments == [source for source, _ in DEFAULT_MAPPINGS]
        assert fragments[0] == "vscode/settings.json"
        assert fragments[-1] == "aws/config"

    def test_size_and_uniqueness(self):
        """Test the table has 30 unique source fragments."""
        catalog = default_catalog()
        fragments = [entry.source_fragment for entry in catalog]
        assert len(catalog) == 30
        assert len(set(fragments)) == len(fragments)

    def test_every_entry_described(self):
        """Test no built-in entry falls back to the generic description."""
        assert all(entry.description != DEFAULT_DESCRIPTION for entry in default_catalog())

    def test_describe_fallback(self):
        """Test unknown fragments get the generic description."""
        assert describe("unknown/file") == "Configuration file"
        assert describe("git/.gitconfig") == "Git global configuration"

    def test_fresh_catalogs_are_equal(self):
        """Test two default catalogs compare equal."""
        assert default_catalog() == default_catalog()


@pytest.mark.unit
class TestMappingCatalog:
    """Tests for MappingCatalog construction."""

    def test_rejects_duplicate_source(self):
        """Test duplicate source fragments are rejected."""
        with pytest.raises(DuplicateMappingError) as exc_info:
            MappingCatalog([
                MappingEntry("git/.gitconfig", "a"),
                MappingEntry("git/.gitconfig", "b"),
            ])
        assert exc_info.value.details["fragment"] == "git/.gitconfig"

    def test_entries_is_immutable(self):
        """Test the entry sequence is a tuple."""
        catalog = MappingCatalog([MappingEntry("a", "a")])
        assert isinstance(catalog.entries(), tuple)

    def test_dict_layout(self):
        """Test to_dict/from_dict preserve order and fields."""
        catalog = MappingCatalog([
            MappingEntry("b/rc", "b/rc", "B"),
            MappingEntry("a/rc", "x/rc", "A"),
        ])
        data = catalog.to_dict()

        assert data["version"] == "1.0"
        assert data["mappings"][1] == {"source": "a/rc", "destination": "x/rc", "description": "A"}
        assert MappingCatalog.from_dict(data) == catalog


class TestLoadCatalog:
    """Tests for loading catalogs from JSON files."""

    def test_load(self, tmp_path):
        """Test loading a valid catalog file."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({
            "version": "1.0",
            "mappings": [
                {"source": "git/.gitconfig"},
                {"source": "tool/rc", "destination": "tool/config", "description": "Tool"},
            ],
        }))

        catalog = load_catalog(path)

        assert len(catalog) == 2
        first, second = catalog.entries()
        assert first.description == "Git global configuration"
        assert second.dest_fragment == "tool/config"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises CatalogLoadError."""
        with pytest.raises(CatalogLoadError):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Test invalid JSON raises CatalogLoadError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(CatalogLoadError) as exc_info:
            load_catalog(path)
        assert exc_info.value.code == "CATALOG_LOAD_FAILED"

    def test_wrong_shape(self, tmp_path):
        """Test a document without a mappings list is rejected."""
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"mappings": {"source": "a"}}))
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_mapping_without_source(self, tmp_path):
        """Test a mapping missing its source is rejected."""
        path = tmp_path / "nosource.json"
        path.write_text(json.dumps({"mappings": [{"destination": "a"}]}))
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_duplicate_in_file(self, tmp_path):
        """Test duplicates in a file raise DuplicateMappingError."""
        path = tmp_path / "dup.json"
        path.write_text(json.dumps({"mappings": [{"source": "a"}, {"source": "a"}]}))
        with pytest.raises(DuplicateMappingError):
            load_catalog(path)
