from __future__ import annotations

from enum import Enum


class Display(str, Enum):
    P_TEXT = "plain/text"
    I_TEXT = "input/text"
    I_FORM = "input/form"
    O_TEXT = "output/text"
    O_TABLE = "output/table"
    O_DIAGRAM = "output/diagram"


class Tag(str, Enum):
    EXPRESSION = "e"
    DEFINITION = "def"
    DIAGRAM = "diagram"
    PARAGRAPH = "p"
    SCENARIO = "scenario"
    STATEMENT = "statement"
    TABLE = "table"

    @classmethod
    def from_name(cls, name: str) -> "Tag | None":
        return _TAGS_BY_NAME.get(name.lower())


_TAGS_BY_NAME: dict[str, Tag] = {tag.value: tag for tag in Tag}
RECURSIVE_TAGS = frozenset({Tag.EXPRESSION})
