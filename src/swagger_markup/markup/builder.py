"""Markup document builders.

A builder accumulates one document in a single markup dialect. The
document renderers only use the primitives defined on MarkupDocBuilder,
so they never need to know which dialect they are writing.
"""

import logging
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class MarkupLanguage(Enum):
    ASCIIDOC = "asciidoc"
    MARKDOWN = "markdown"

    @property
    def file_extensions(self) -> list[str]:
        """Recognized file extensions, in lookup priority order."""
        if self is MarkupLanguage.ASCIIDOC:
            return [".adoc", ".asciidoc", ".txt"]
        return [".md", ".markdown"]

    @property
    def supports_cross_references(self) -> bool:
        return self is MarkupLanguage.ASCIIDOC


class MarkupDocBuilder:
    """Base class for dialect specific builders."""

    language: MarkupLanguage

    def __init__(self):
        self._lines: list[str] = []

    def document_title(self, title: str) -> "MarkupDocBuilder":
        return self.section_title(0, title)

    def section_title(self, level: int, title: str) -> "MarkupDocBuilder":
        raise NotImplementedError

    def text_line(self, text: str) -> "MarkupDocBuilder":
        self._lines.append(text)
        return self

    def paragraph(self, text: str) -> "MarkupDocBuilder":
        self._lines.extend([text, ""])
        return self

    def listing(self, text: str) -> "MarkupDocBuilder":
        raise NotImplementedError

    def unordered_list(self, items: list[str]) -> "MarkupDocBuilder":
        self._lines.extend(f"* {item}" for item in items)
        self._lines.append("")
        return self

    def table_with_header_row(self, rows: list[list[str]]) -> "MarkupDocBuilder":
        """Add a table; the first row is the header."""
        raise NotImplementedError

    def new_line(self) -> "MarkupDocBuilder":
        self._lines.append("")
        return self

    def to_string(self) -> str:
        return "\n".join(self._lines).rstrip("\n") + "\n"

    def write_to_file(self, directory: Path, file_name: str) -> Path:
        """Write the document to directory/file_name plus the dialect's extension."""
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{file_name}{self.language.file_extensions[0]}"
        path.write_text(self.to_string(), encoding="utf-8")
        logger.info("Markup document written to: %s", path)
        return path


class AsciiDocBuilder(MarkupDocBuilder):
    language = MarkupLanguage.ASCIIDOC

    def section_title(self, level: int, title: str) -> "AsciiDocBuilder":
        self._lines.extend([f"{'=' * (level + 1)} {title}", ""])
        return self

    def listing(self, text: str) -> "AsciiDocBuilder":
        self._lines.extend(["----", text, "----", ""])
        return self

    def table_with_header_row(self, rows: list[list[str]]) -> "AsciiDocBuilder":
        self._lines.append('[options="header"]')
        self._lines.append("|===")
        for row in rows:
            self._lines.append("|" + "|".join(_escape_cell(cell, "\\|") for cell in row))
        self._lines.extend(["|===", ""])
        return self


class MarkdownBuilder(MarkupDocBuilder):
    language = MarkupLanguage.MARKDOWN

    def section_title(self, level: int, title: str) -> "MarkdownBuilder":
        self._lines.extend([f"{'#' * (level + 1)} {title}", ""])
        return self

    def listing(self, text: str) -> "MarkdownBuilder":
        self._lines.extend(["```", text, "```", ""])
        return self

    def table_with_header_row(self, rows: list[list[str]]) -> "MarkdownBuilder":
        if not rows:
            return self
        header, *body = rows
        self._lines.append(_markdown_row(header))
        self._lines.append("|" + "|".join("---" for _ in header) + "|")
        self._lines.extend(_markdown_row(row) for row in body)
        self._lines.append("")
        return self


def create_builder(language: MarkupLanguage) -> MarkupDocBuilder:
    """Return an empty builder for the given dialect."""
    if language is MarkupLanguage.ASCIIDOC:
        return AsciiDocBuilder()
    return MarkdownBuilder()


def _markdown_row(cells: list[str]) -> str:
    return "|" + "|".join(_escape_cell(cell, "\\|").replace("\n", "<br>") for cell in cells) + "|"


def _escape_cell(cell: str, pipe: str) -> str:
    return cell.replace("|", pipe)
