"""Catalog value objects."""
from enum import Enum
from typing import Callable, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternCategory(str, Enum):
    """GoF pattern category."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternInfo(BaseModel):
    """One catalog entry: what the pattern is and how to run its demonstration."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Kebab-case slug, unique across the catalog")
    title: str
    category: PatternCategory
    intent: str
    demo: Callable[[], List[str]] = Field(..., exclude=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or v != v.lower() or " " in v:
            raise ValueError("Pattern name must be a lower-case kebab-case slug")
        return v

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class DemoResult(BaseModel):
    """Output of one demonstration run."""

    pattern: str
    category: PatternCategory
    output: List[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
