"""Render-wide configuration."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

from swagger_markup.markup.builder import MarkupLanguage


class GroupBy(Enum):
    AS_IS = "as-is"
    BY_TAG = "by-tag"

    @property
    def heading_offset(self) -> int:
        """Extra heading depth added below the top-level section."""
        return _HEADING_OFFSETS[self]


_HEADING_OFFSETS = {GroupBy.AS_IS: 0, GroupBy.BY_TAG: 1}


class MarkupConfig(BaseModel):
    """Options shared by every document of one conversion."""

    model_config = ConfigDict(frozen=True)

    markup_language: MarkupLanguage = MarkupLanguage.ASCIIDOC
    paths_grouped_by: GroupBy = GroupBy.AS_IS
    examples_folder: Path | None = None  # enables example lookup
    descriptions_folder: Path | None = None  # enables hand-written descriptions

    @classmethod
    def from_yaml(cls, file_path: Path, **overrides) -> "MarkupConfig":
        """Load a config file; keyword overrides that are not None win."""
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{file_path} does not contain a mapping at the top level")
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
