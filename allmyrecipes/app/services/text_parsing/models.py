"""Pydantic models for line-level recipe text classification."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SectionMode(str, Enum):
    UNKNOWN = "unknown"
    INGREDIENTS = "ingredients"
    STEPS = "steps"
    IGNORE = "ignore"


class LineKind(str, Enum):
    BLANK = "blank"
    HEADING = "heading"
    CONTENT = "content"


class LineLabel(str, Enum):
    BLANK = "blank"
    HEADING = "heading"
    INGREDIENT = "ingredient"
    STEP = "step"
    NOTE = "note"
    NOISE = "noise"


class LineScore(BaseModel):
    """Accumulated evidence for one line."""

    model_config = ConfigDict(frozen=True)

    ingredient_score: float = 0.0
    step_score: float = 0.0
    heading_score: float = 0.0
    kind: LineKind = LineKind.CONTENT


class RawLine(BaseModel):
    """A normalized input line with its marker-stripped text and score."""

    model_config = ConfigDict(frozen=True)

    raw: str
    stripped: str
    has_marker: bool = False
    is_noise: bool = False
    score: LineScore = Field(default_factory=LineScore)


class ClassifiedLine(BaseModel):
    line: RawLine
    label: LineLabel
    mode: SectionMode


class ClassificationResult(BaseModel):
    """Everything the section-state pass produced for one document."""

    lines: List[ClassifiedLine] = Field(default_factory=list)
    headings: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    step_lines: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class ClassifierState(BaseModel):
    """Section state threaded through the classification fold."""

    model_config = ConfigDict(frozen=True)

    mode: SectionMode = SectionMode.UNKNOWN
    heading: Optional[str] = None

    def enter(self, mode: SectionMode, heading: str) -> "ClassifierState":
        return ClassifierState(mode=mode, heading=heading)
