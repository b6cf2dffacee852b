"""Converter: renders the overview, paths and definitions documents."""

import logging
from pathlib import Path

from swagger_markup.config import MarkupConfig
from swagger_markup.document.base import MarkupDocument
from swagger_markup.document.definitions import DefinitionsDocument
from swagger_markup.document.overview import OverviewDocument
from swagger_markup.document.paths import PathsDocument
from swagger_markup.parser.base import ApiDocument
from swagger_markup.parser.swagger import parse_swagger

logger = logging.getLogger(__name__)

DOCUMENTS = (OverviewDocument, PathsDocument, DefinitionsDocument)


class MarkupConverter:
    """Turns one ApiDocument into AsciiDoc or Markdown documents."""

    def __init__(self, document: ApiDocument, config: MarkupConfig | None = None):
        self.document = document
        self.config = config or MarkupConfig()

    @classmethod
    def from_file(cls, file_path: Path, config: MarkupConfig | None = None) -> "MarkupConverter":
        logger.debug("Reading API description from %s", file_path)
        return cls(parse_swagger(file_path), config)

    def documents(self) -> list[MarkupDocument]:
        return [document_class(self.document, self.config) for document_class in DOCUMENTS]

    def build(self) -> dict[str, str]:
        """Render every document, in overview -> paths -> definitions order.

        Returns a dict of {document_name: markup}.
        """
        return {document.name: document.build().to_string() for document in self.documents()}

    def to_string(self) -> str:
        return "\n".join(self.build().values())

    def to_folder(self, directory: Path) -> list[Path]:
        """Write each document to directory and return the written paths."""
        return [
            document.build().write_to_file(directory, document.name)
            for document in self.documents()
        ]
