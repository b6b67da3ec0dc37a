"""Pydantic models shared by the HTML and plain-text recipe parsers."""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParsedRecipe(BaseModel):
    """A normalized recipe produced by any parsing path."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    servings: str = ""
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    source_url: Optional[str] = Field(None, alias="sourceUrl")

    @field_validator("ingredients", "steps")
    @classmethod
    def drop_blank_entries(cls, value: List[str]) -> List[str]:
        return [item for item in value if item and item.strip()]


class InstructionText(BaseModel):
    """A bare string inside ``recipeInstructions``."""

    kind: Literal["text"] = "text"
    text: str


class InstructionStep(BaseModel):
    """An object exposing ``text`` (usually a ``HowToStep``)."""

    kind: Literal["step"] = "step"
    text: str


class InstructionSection(BaseModel):
    """An ordered group of instructions (usually a ``HowToSection``)."""

    kind: Literal["section"] = "section"
    name: Optional[str] = None
    items: List["InstructionNode"] = Field(default_factory=list)


InstructionNode = Union[InstructionText, InstructionStep, InstructionSection]

InstructionSection.model_rebuild()
