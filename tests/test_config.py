"""
Tests for configuration parsing and the extensions_to_index setting.
"""

import logging
from pathlib import Path

import pytest

from sitefinder.config import DEFAULT_EXTENSIONS, IndexConfig, load_config, parse_extensions


class TestParseExtensions:

    def test_default(self):
        assert parse_extensions(None) == {".html", ".markdown", ".mkdown", ".mkdn", ".mkd", ".md"}

    def test_comma_separated_replaces_defaults(self):
        assert parse_extensions("html,dhtml") == {".html", ".dhtml"}

    def test_whitespace_dots_and_case(self):
        assert parse_extensions(" .HTML , md ,") == {".html", ".md"}

    def test_list_value(self):
        assert parse_extensions(["txt", ".Rst"]) == {".txt", ".rst"}

    @pytest.mark.parametrize("value", [42, ",,", "", ["html", 3]])
    def test_unusable_values_fall_back(self, value, caplog):
        with caplog.at_level(logging.WARNING, logger="sitefinder.config"):
            assert parse_extensions(value) == DEFAULT_EXTENSIONS
        assert "extensions_to_index" in caplog.text


class TestIndexConfig:

    def test_defaults(self, tmp_path: Path):
        cfg = IndexConfig(source=tmp_path)
        assert cfg.extensions == DEFAULT_EXTENSIONS
        assert cfg.files_to_exclude == []
        assert cfg.paginate_path == "/page:num/"
        assert cfg.fail_fast is False

    def test_string_source_is_expanded(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SITE_HOME", str(tmp_path))
        cfg = IndexConfig(source="$SITE_HOME/site")
        assert cfg.source == tmp_path / "site"

    def test_get(self, tmp_path: Path):
        cfg = IndexConfig(source=tmp_path, extensions_to_index="html")
        assert cfg.get("extensions_to_index") == "html"
        assert cfg.get("timezone", "UTC") == "UTC"

    @pytest.mark.parametrize("key", ["unknown_key", "extensions", "tzinfo", "from_toml"])
    def test_get_rejects_unrecognized_keys(self, tmp_path: Path, key):
        cfg = IndexConfig(source=tmp_path)
        with pytest.raises(KeyError, match=key):
            cfg.get(key, "fallback")


class TestFromToml:

    def _write(self, tmp_path: Path, body: str) -> Path:
        path = tmp_path / "sitefinder.toml"
        path.write_text(body, encoding="utf-8")
        return path

    def test_full_config(self, tmp_path: Path):
        (tmp_path / "site").mkdir()
        path = self._write(tmp_path, """
[site]
source = "site"
timezone = "America/New_York"
collections = ["recipes"]
paginate_path = "/blog/page:num/"

[index]
extensions_to_index = "html,dhtml"
files_to_exclude = ["index.html", "drafts/**"]
workers = 2
fail_fast = true
""")
        cfg = load_config(path)
        assert cfg.source == (tmp_path / "site").resolve()
        assert cfg.timezone == "America/New_York"
        assert cfg.collections == ["recipes"]
        assert cfg.paginate_path == "/blog/page:num/"
        assert cfg.extensions == {".html", ".dhtml"}
        assert cfg.files_to_exclude == ["index.html", "drafts/**"]
        assert cfg.workers == 2
        assert cfg.fail_fast is True

    def test_missing_source(self, tmp_path: Path):
        path = self._write(tmp_path, "[index]\nworkers = 1\n")
        with pytest.raises(ValueError, match="source"):
            IndexConfig.from_toml(path)

    def test_invalid_workers(self, tmp_path: Path):
        path = self._write(tmp_path, '[site]\nsource = "."\n[index]\nworkers = 0\n')
        with pytest.raises(ValueError, match="workers"):
            IndexConfig.from_toml(path)

    def test_unknown_timezone(self, tmp_path: Path):
        path = self._write(tmp_path, '[site]\nsource = "."\ntimezone = "Mars/Olympus_Mons"\n')
        with pytest.raises(ValueError, match="timezone"):
            IndexConfig.from_toml(path)

    def test_bad_extension_list_does_not_fail(self, tmp_path: Path):
        path = self._write(tmp_path, '[site]\nsource = "."\n[index]\nextensions_to_index = 5\n')
        cfg = IndexConfig.from_toml(path)
        assert cfg.extensions == DEFAULT_EXTENSIONS
