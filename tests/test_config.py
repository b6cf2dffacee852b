from pathlib import Path

import pytest

from swagger_markup.config import GroupBy, MarkupConfig
from swagger_markup.markup.builder import MarkupLanguage


class TestGroupBy:
    def test_heading_offset(self):
        assert GroupBy.AS_IS.heading_offset == 0
        assert GroupBy.BY_TAG.heading_offset == 1


class TestMarkupConfig:
    def test_defaults(self):
        config = MarkupConfig()
        assert config.markup_language is MarkupLanguage.ASCIIDOC
        assert config.paths_grouped_by is GroupBy.AS_IS
        assert config.examples_folder is None
        assert config.descriptions_folder is None

    def test_from_yaml(self, tmp_path):
        f = tmp_path / "config.yaml"
        f.write_text(
            "markup_language: markdown\npaths_grouped_by: by-tag\ndescriptions_folder: docs/descriptions\n",
            encoding="utf-8",
        )
        config = MarkupConfig.from_yaml(f)
        assert config.markup_language is MarkupLanguage.MARKDOWN
        assert config.paths_grouped_by is GroupBy.BY_TAG
        assert config.descriptions_folder == Path("docs/descriptions")

    def test_from_yaml_overrides(self, tmp_path):
        f = tmp_path / "config.yaml"
        f.write_text("markup_language: markdown\n", encoding="utf-8")
        config = MarkupConfig.from_yaml(f, markup_language=MarkupLanguage.ASCIIDOC, examples_folder=None)
        assert config.markup_language is MarkupLanguage.ASCIIDOC
        assert config.examples_folder is None

    def test_empty_yaml(self, tmp_path):
        f = tmp_path / "config.yaml"
        f.write_text("", encoding="utf-8")
        assert MarkupConfig.from_yaml(f) == MarkupConfig()

    def test_from_yaml_rejects_non_mapping(self, tmp_path):
        f = tmp_path / "config.yaml"
        f.write_text("- markdown\n- by-tag\n", encoding="utf-8")
        with pytest.raises(ValueError):
            MarkupConfig.from_yaml(f)
