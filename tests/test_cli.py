from pathlib import Path

from click.testing import CliRunner

from swagger_markup.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliConvert:
    def test_convert_asciidoc(self, tmp_path):
        output_dir = tmp_path / "docs"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_dir),
        ])

        assert result.exit_code == 0, result.output
        for name in ("overview", "paths", "definitions"):
            assert (output_dir / f"{name}.adoc").exists()
        assert "=== List pets" in (output_dir / "paths.adoc").read_text(encoding="utf-8")

    def test_convert_markdown_by_tag(self, tmp_path):
        output_dir = tmp_path / "docs"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore-v3.yaml"),
            "-o", str(output_dir),
            "--markup", "markdown",
            "--group-by", "by-tag",
        ])

        assert result.exit_code == 0, result.output
        paths = (output_dir / "paths.md").read_text(encoding="utf-8")
        assert paths.startswith("## Resources\n\n### Pets\n")
        assert "|200|A paged array of pets|Pets|" in paths

    def test_convert_with_config_file(self, tmp_path):
        examples = tmp_path / "examples" / "list_pets"
        examples.mkdir(parents=True)
        (examples / "curl-request.md").write_text("curl /pets", encoding="utf-8")
        config = tmp_path / "config.yaml"
        config.write_text(
            f"markup_language: markdown\nexamples_folder: {tmp_path / 'examples'}\n",
            encoding="utf-8",
        )

        output_dir = tmp_path / "docs"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_dir),
            "--config", str(config),
        ])

        assert result.exit_code == 0, result.output
        assert "curl /pets" in (output_dir / "paths.md").read_text(encoding="utf-8")

    def test_option_overrides_config_file(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("markup_language: markdown\n", encoding="utf-8")

        output_dir = tmp_path / "docs"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_dir),
            "--config", str(config),
            "--markup", "asciidoc",
        ])

        assert result.exit_code == 0, result.output
        assert (output_dir / "paths.adoc").exists()

    def test_invalid_document_fails(self, tmp_path):
        doc = tmp_path / "notes.md"
        doc.write_text("# API Docs\nSome text", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(doc), "-o", str(tmp_path / "docs")])

        assert result.exit_code != 0
        assert "Cannot parse" in result.output

    def test_invalid_config_fails(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("paths_grouped_by: sideways\n", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore.yaml"),
            "-o", str(tmp_path / "docs"),
            "--config", str(config),
        ])

        assert result.exit_code != 0
        assert "Invalid configuration" in result.output

    def test_non_mapping_config_fails(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("- markdown\n", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore.yaml"),
            "-o", str(tmp_path / "docs"),
            "--config", str(config),
        ])

        assert result.exit_code != 0
        assert "Invalid configuration" in result.output
        assert "Traceback" not in result.output
