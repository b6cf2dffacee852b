"""Definitions document: one section per named schema."""

import logging

from swagger_markup.formatting import get_type
from swagger_markup.markup.builder import MarkupDocBuilder
from swagger_markup.parser.base import Definition

from .base import (
    DEFAULT_COLUMN,
    DESCRIPTION_COLUMN,
    NAME_COLUMN,
    REQUIRED_COLUMN,
    SCHEMA_COLUMN,
    MarkupDocument,
    format_default,
)

logger = logging.getLogger(__name__)

DEFINITIONS = "Definitions"
TYPE = "Type: "


class DefinitionsDocument(MarkupDocument):
    name = "definitions"

    def render(self, builder: MarkupDocBuilder) -> None:
        definitions = self.document.definitions
        if not definitions:
            return
        builder.section_title(1, DEFINITIONS)
        for definition in definitions.values():
            self._definition(builder, definition)

    def _definition(self, builder: MarkupDocBuilder, definition: Definition) -> None:
        builder.section_title(2, definition.name)
        description = self._description(definition.name, None, definition.description)
        if description.strip():
            builder.paragraph(description)
        if definition.properties:
            self._properties(builder, definition)
        elif definition.type is not None and definition.type.kind != "primitive":
            builder.paragraph(TYPE + get_type(definition.type, self.language))
        logger.info("Definition processed: %s", definition.name)

    def _properties(self, builder: MarkupDocBuilder, definition: Definition) -> None:
        rows = [[NAME_COLUMN, DESCRIPTION_COLUMN, REQUIRED_COLUMN, SCHEMA_COLUMN, DEFAULT_COLUMN]]
        for name, prop in definition.properties.items():
            rows.append([
                name,
                self._description(definition.name, name, prop.description),
                str(prop.required).lower(),
                get_type(prop.type, self.language),
                format_default(prop.default),
            ])
        builder.table_with_header_row(rows)

    def _description(self, definition_name: str, property_name: str | None, fallback: str) -> str:
        if self.config.descriptions_folder is None:
            return fallback
        folder = definition_name.lower()
        if property_name is not None:
            folder = f"{folder}/{property_name}"
        hand_written = self.hand_written_description(DEFINITIONS.lower(), folder)
        return fallback if hand_written is None else hand_written
