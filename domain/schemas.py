"""Pydantic models for the CLC taxonomy and its derived structures."""

import re

from pydantic import BaseModel, ConfigDict, Field


class TaxonomyNode(BaseModel):
    """One taxonomy entry (class, subclass or division) as supplied by the taxonomy file."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="CLC code as written in the taxonomy, e.g. 'TP3' or 'Z813/817'.")
    name: str = Field(..., description="Human-readable name of the entry.")
    children: list["TaxonomyNode"] = Field(
        default_factory=list,
        description="Child entries, in taxonomy order. Order encodes matching priority.",
    )


class MatchNode(BaseModel):
    """Compiled matcher for one taxonomy node, plus the matchers of its children."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    pattern: re.Pattern
    children: dict[str, "MatchNode"] = Field(default_factory=dict)  # code -> node, taxonomy order

    def matches(self, code: str) -> bool:
        return self.pattern.search(code) is not None


# class code -> MatchNode; insertion order is matching order
MatchTree = dict[str, MatchNode]


class ClcRecord(BaseModel):
    """Descriptive record for a class, subclass or division code."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str
    name: str
    path: list[str] = Field(
        ...,
        description="Codes from the class down to this entry, inclusive.",
    )
    name_path: list[str] = Field(
        ...,
        alias="namePath",
        description="Names matching `path`, one per level.",
    )


# any indexed code -> ClcRecord
FlatIndex = dict[str, ClcRecord]
