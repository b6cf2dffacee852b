"""End-to-end conversion of the petstore fixtures."""

from pathlib import Path

from swagger_markup.config import GroupBy, MarkupConfig
from swagger_markup.converter import MarkupConverter
from swagger_markup.markup.builder import MarkupLanguage

FIXTURES = Path(__file__).parent / "fixtures"


class TestMarkupConverter:
    def test_build_order(self):
        converter = MarkupConverter.from_file(FIXTURES / "petstore.yaml")
        documents = converter.build()
        assert list(documents) == ["overview", "paths", "definitions"]

    def test_to_string_concatenates_documents(self):
        text = MarkupConverter.from_file(FIXTURES / "petstore.yaml").to_string()
        assert text.index("== Overview") < text.index("== Paths") < text.index("== Definitions")

    def test_to_folder_markdown(self, tmp_path):
        config = MarkupConfig(markup_language=MarkupLanguage.MARKDOWN)
        written = MarkupConverter.from_file(FIXTURES / "petstore.yaml", config).to_folder(tmp_path)
        assert [p.name for p in written] == ["overview.md", "paths.md", "definitions.md"]
        assert all(p.exists() for p in written)

    def test_by_tag_duplicates_multi_tag_operations(self):
        config = MarkupConfig(paths_grouped_by=GroupBy.BY_TAG)
        paths = MarkupConverter.from_file(FIXTURES / "petstore.yaml", config).build()["paths"]
        assert paths.count("==== Create a pet.\n") == 2
        # untagged DELETE /pets/{petId}
        assert "Delete a pet" not in paths

    def test_examples_and_descriptions(self, tmp_path):
        examples = tmp_path / "examples" / "create_a_pet"
        examples.mkdir(parents=True)
        (examples / "http-request.adoc").write_text("POST /v2/pets HTTP/1.1", encoding="utf-8")
        descriptions = tmp_path / "descriptions" / "paths" / "create_a_pet"
        descriptions.mkdir(parents=True)
        (descriptions / "description.adoc").write_text("Stores a new pet.", encoding="utf-8")

        config = MarkupConfig(
            examples_folder=tmp_path / "examples",
            descriptions_folder=tmp_path / "descriptions",
        )
        paths = MarkupConverter.from_file(FIXTURES / "petstore.yaml", config).build()["paths"]
        assert "==== Description\n\nStores a new pet.\n" in paths
        assert "Adds a new pet to the store." not in paths
        assert "==== Example HTTP request\n\nPOST /v2/pets HTTP/1.1\n" in paths
