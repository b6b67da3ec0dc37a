"""Convert raw ``recipeInstructions`` JSON into instruction nodes and flatten them."""

import re
from typing import Any, List, Optional

from allmyrecipes.app.services.url_parsing.models import (
    InstructionNode,
    InstructionSection,
    InstructionStep,
    InstructionText,
)
from allmyrecipes.app.services.url_parsing.parsing_utils import clean_text

_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.?!])\s+")


def split_instruction_string(text: str) -> List[str]:
    """Split a single instruction blob at sentence-ending punctuation."""
    return [part for part in (clean_text(p) for p in _SENTENCE_SPLIT_RE.split(text or "")) if part]


def to_instruction_node(value: Any) -> Optional[InstructionNode]:
    """Map one raw JSON value to a node; values with no usable text map to None."""
    if isinstance(value, str):
        text = clean_text(value)
        return InstructionText(text=text) if text else None
    if isinstance(value, list):
        return InstructionSection(items=to_instruction_nodes(value))
    if isinstance(value, dict):
        elements = value.get("itemListElement")
        if isinstance(elements, list):
            name = clean_text(value.get("name")) if isinstance(value.get("name"), str) else None
            return InstructionSection(name=name or None, items=to_instruction_nodes(elements))
        text = value.get("text")
        if isinstance(text, (str, int, float)) and not isinstance(text, bool):
            text = clean_text(str(text))
            return InstructionStep(text=text) if text else None
    return None


def to_instruction_nodes(values: List[Any]) -> List[InstructionNode]:
    nodes = []
    for value in values:
        node = to_instruction_node(value)
        if node is not None:
            nodes.append(node)
    return nodes


def flatten_instructions(node: InstructionNode) -> List[str]:
    """Depth-first, left-to-right concatenation of leaf text."""
    if isinstance(node, InstructionSection):
        steps: List[str] = []
        for item in node.items:
            steps.extend(flatten_instructions(item))
        return steps
    return [node.text]


def extract_instruction_steps(raw: Any) -> List[str]:
    """Turn any ``recipeInstructions`` shape into an ordered list of step strings."""
    if not raw:
        return []
    if isinstance(raw, str):
        return split_instruction_string(raw)
    if isinstance(raw, list):
        return flatten_instructions(InstructionSection(items=to_instruction_nodes(raw)))
    node = to_instruction_node(raw)
    return flatten_instructions(node) if node is not None else []
