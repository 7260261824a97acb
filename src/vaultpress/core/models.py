"""Intermediate data models for the conversion pipeline"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class BlockKind(str, Enum):
    """Line classifications produced by the block pass; tables are found by find_tables."""
    heading = "heading"
    quote = "quote"
    list_item = "list_item"
    paragraph = "paragraph"


class Table(BaseModel):
    """A pipe table: one header row plus data rows of trimmed, non-empty cells."""
    header: list[str]
    rows: list[list[str]] = Field(default_factory=list)


class ConvertOptions(BaseModel):
    convert_lists: bool = Field(default=False, description="Render '- ' lines as <ul><li> items")


@dataclass
class SourceDoc:
    """A single note ready for conversion; not persisted."""
    name:        str | None          # source filename, used for output naming
    markdown:    str                 # body only (frontmatter stripped when enabled)
