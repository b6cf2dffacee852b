"""Paths document: one section per operation, grouped as-is or by tag."""

import logging

from swagger_markup.config import GroupBy, MarkupConfig
from swagger_markup.formatting import get_type
from swagger_markup.markup.builder import MarkupDocBuilder
from swagger_markup.parser.base import ApiDocument, Operation, Parameter, PathItem
from swagger_markup.resources import operation_folder, read_snippet

from .base import (
    CONSUMES,
    DEFAULT_COLUMN,
    DESCRIPTION,
    DESCRIPTION_COLUMN,
    NAME_COLUMN,
    PRODUCES,
    REQUIRED_COLUMN,
    SCHEMA_COLUMN,
    TAGS,
    MarkupDocument,
    capitalize_words,
    format_default,
)

logger = logging.getLogger(__name__)

PATHS = "Paths"
RESOURCES = "Resources"
PARAMETERS = "Parameters"
RESPONSES = "Responses"
EXAMPLE_CURL = "Example CURL request"
EXAMPLE_REQUEST = "Example HTTP request"
EXAMPLE_RESPONSE = "Example HTTP response"
TYPE_COLUMN = "Type"
HTTP_CODE_COLUMN = "HTTP Code"
CURL_EXAMPLE_FILE_NAME = "curl-request"
REQUEST_EXAMPLE_FILE_NAME = "http-request"
RESPONSE_EXAMPLE_FILE_NAME = "http-response"
PARAMETER = "Parameter"
NO_CONTENT = "No Content"

EXAMPLES = (
    (CURL_EXAMPLE_FILE_NAME, EXAMPLE_CURL),
    (REQUEST_EXAMPLE_FILE_NAME, EXAMPLE_REQUEST),
    (RESPONSE_EXAMPLE_FILE_NAME, EXAMPLE_RESPONSE),
)


def group_by_tag(paths: dict[str, PathItem | None]) -> dict[str, list[Operation]]:
    """Bucket every operation under each of its tags, in first-seen tag order.

    An operation with several tags lands in several buckets, once per
    distinct tag; untagged operations land in none.
    """
    groups: dict[str, list[Operation]] = {}
    for item in paths.values():
        if item is None:
            continue
        for operation in item.operations.values():
            if operation is None:
                continue
            for tag in dict.fromkeys(operation.tags):
                groups.setdefault(tag, []).append(operation)
    return groups


class PathsDocument(MarkupDocument):
    """Renders the Paths (or Resources) document."""

    name = "paths"

    def __init__(self, document: ApiDocument, config: MarkupConfig):
        super().__init__(document, config)
        self.grouped_by = config.paths_grouped_by
        self.title_level = 2 + self.grouped_by.heading_offset
        self.section_level = self.title_level + 1
        logger.debug(
            "Include examples is %s.",
            "enabled" if config.examples_folder is not None else "disabled",
        )
        logger.debug(
            "Include hand-written descriptions is %s.",
            "enabled" if config.descriptions_folder is not None else "disabled",
        )

    def render(self, builder: MarkupDocBuilder) -> None:
        paths = self.document.paths
        if not paths:
            return
        if self.grouped_by is GroupBy.AS_IS:
            builder.section_title(1, PATHS)
            for item in paths.values():
                if item is not None:
                    self._path_sections(builder, item)
        else:
            builder.section_title(1, RESOURCES)
            tags = {tag.name: tag for tag in self.document.tags}
            for tag_name, operations in group_by_tag(paths).items():
                builder.section_title(2, capitalize_words(tag_name))
                tag = tags.get(tag_name)
                if tag is not None and tag.description:
                    builder.paragraph(tag.description)
                for operation in operations:
                    self._operation(builder, operation)

    def _path_sections(self, builder: MarkupDocBuilder, item: PathItem) -> None:
        for operation in item.operations.values():
            if operation is not None:
                self._operation(builder, operation)

    def _operation(self, builder: MarkupDocBuilder, operation: Operation) -> None:
        self._title(builder, operation)
        self._description(builder, operation)
        self._parameters(builder, operation)
        self._responses(builder, operation)
        self._media_types(builder, CONSUMES, operation.consumes)
        self._media_types(builder, PRODUCES, operation.produces)
        self._tags(builder, operation)
        self._examples(builder, operation)

    def _title(self, builder: MarkupDocBuilder, operation: Operation) -> None:
        if operation.summary.strip():
            builder.section_title(self.title_level, operation.summary)
            builder.listing(operation.method_and_path)
        else:
            builder.section_title(self.title_level, operation.method_and_path)
        logger.info("Path processed: %s", operation.method_and_path)

    def _description(self, builder: MarkupDocBuilder, operation: Operation) -> None:
        description = operation.description
        if self.config.descriptions_folder is not None:
            if operation.summary.strip():
                hand_written = self.hand_written_description(
                    PATHS.lower(), operation_folder(operation.summary)
                )
                if hand_written is not None:
                    description = hand_written
                else:
                    logger.info(
                        "Hand-written description cannot be read. "
                        "Trying to use description from Swagger source."
                    )
            else:
                logger.info(
                    "Hand-written description cannot be read, because summary of operation "
                    "is empty. Trying to use description from Swagger source."
                )
        if description.strip():
            builder.section_title(self.section_level, DESCRIPTION)
            builder.paragraph(description)

    def _parameters(self, builder: MarkupDocBuilder, operation: Operation) -> None:
        if not operation.parameters:
            return
        rows = [[TYPE_COLUMN, NAME_COLUMN, DESCRIPTION_COLUMN, REQUIRED_COLUMN, SCHEMA_COLUMN, DEFAULT_COLUMN]]
        for parameter in operation.parameters:
            rows.append([
                capitalize_words(parameter.location + PARAMETER),
                parameter.name,
                self._parameter_description(operation, parameter),
                str(parameter.required).lower(),
                get_type(parameter.type, self.language),
                format_default(parameter.default),
            ])
        builder.section_title(self.section_level, PARAMETERS)
        builder.table_with_header_row(rows)

    def _parameter_description(self, operation: Operation, parameter: Parameter) -> str:
        """Hand-written parameter description if there is one, else the model's."""
        if self.config.descriptions_folder is None:
            return parameter.description
        if operation.summary.strip() and parameter.name.strip():
            folder = operation_folder(operation.summary)
            hand_written = self.hand_written_description(
                PATHS.lower(), f"{folder}/{parameter.name}"
            )
            if hand_written is not None:
                return hand_written
            logger.warning(
                "Hand-written description file cannot be read. "
                "Trying to use description from Swagger source."
            )
        else:
            logger.warning(
                "Hand-written description file cannot be read, because summary of operation "
                "or name of parameter is empty. Trying to use description from Swagger source."
            )
        return parameter.description

    def _responses(self, builder: MarkupDocBuilder, operation: Operation) -> None:
        if not operation.responses:
            return
        rows = [[HTTP_CODE_COLUMN, DESCRIPTION_COLUMN, SCHEMA_COLUMN]]
        for code, response in operation.responses.items():
            if response.schema_type is not None:
                schema = get_type(response.schema_type, self.language)
            else:
                schema = NO_CONTENT
            rows.append([code, response.description, schema])
        builder.section_title(self.section_level, RESPONSES)
        builder.table_with_header_row(rows)

    def _media_types(self, builder: MarkupDocBuilder, title: str, media_types: list[str]) -> None:
        if media_types:
            builder.section_title(self.section_level, title)
            builder.unordered_list(media_types)

    def _tags(self, builder: MarkupDocBuilder, operation: Operation) -> None:
        # Under BY_TAG the section placement already shows the tags.
        if self.grouped_by is GroupBy.AS_IS and operation.tags:
            builder.section_title(self.section_level, TAGS)
            builder.unordered_list(operation.tags)

    def _examples(self, builder: MarkupDocBuilder, operation: Operation) -> None:
        if self.config.examples_folder is None:
            return
        if not operation.summary.strip():
            logger.warning("Example file cannot be read, because summary of operation is empty.")
            return
        folder = operation_folder(operation.summary)
        for file_name, title in EXAMPLES:
            example = read_snippet(
                self.config.examples_folder, folder, file_name, self.language.file_extensions
            )
            if example is not None:
                builder.section_title(self.section_level, title)
                builder.paragraph(example)
