"""Shared plumbing for the overview, paths and definitions documents."""

import json
from pathlib import Path

from swagger_markup.config import MarkupConfig
from swagger_markup.markup.builder import MarkupDocBuilder, create_builder
from swagger_markup.parser.base import ApiDocument
from swagger_markup.resources import read_snippet

DESCRIPTION = "Description"
CONSUMES = "Consumes"
PRODUCES = "Produces"
TAGS = "Tags"
NAME_COLUMN = "Name"
DESCRIPTION_COLUMN = "Description"
REQUIRED_COLUMN = "Required"
SCHEMA_COLUMN = "Schema"
DEFAULT_COLUMN = "Default"
DESCRIPTION_FILE_NAME = "description"


class MarkupDocument:
    """One output document rendered from an ApiDocument."""

    name: str

    def __init__(self, document: ApiDocument, config: MarkupConfig):
        self.document = document
        self.config = config
        self.language = config.markup_language

    def build(self) -> MarkupDocBuilder:
        """Render into a fresh builder and return it."""
        builder = create_builder(self.language)
        self.render(builder)
        return builder

    def render(self, builder: MarkupDocBuilder) -> None:
        raise NotImplementedError

    def hand_written_description(self, section: str, folder: str) -> str | None:
        """Look up descriptions_folder/section/folder/description.<ext>."""
        if self.config.descriptions_folder is None:
            return None
        return read_snippet(
            Path(self.config.descriptions_folder, section),
            folder,
            DESCRIPTION_FILE_NAME,
            self.language.file_extensions,
        )


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def format_default(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (bool, list, dict)):
        return json.dumps(value)
    return str(value)
