from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from .display import Display

_WIRE_KEYS = {
    "display_id": "displayId",
    "scope": "def",
}


@dataclass(frozen=True)
class Content:
    display_id: str
    value: str | None

    display: ClassVar[Display]

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {
            "displayId": self.display_id,
            "display": self.display.value,
        }
        for item in fields(self):
            if item.name == "display_id":
                continue
            value = getattr(self, item.name)
            if value is None:
                continue
            data[_WIRE_KEYS.get(item.name, item.name)] = value
        return data


@dataclass(frozen=True)
class PlainText(Content):
    display: ClassVar[Display] = Display.P_TEXT


@dataclass(frozen=True)
class InputText(Content):
    rel: str | None = None
    ref: str | None = None
    type: str | None = None

    display: ClassVar[Display] = Display.I_TEXT


@dataclass(frozen=True)
class LocalDefinition(Content):
    scope: str | None = None
    ref: str | None = None
    type: str | None = None

    display: ClassVar[Display] = Display.I_TEXT


@dataclass(frozen=True)
class InputForm(Content):
    type: str | None = None

    display: ClassVar[Display] = Display.I_FORM


@dataclass(frozen=True)
class OutputText(Content):
    action: str | None = None

    display: ClassVar[Display] = Display.O_TEXT


@dataclass(frozen=True)
class OutputTable(Content):
    max: str | None = None
    cols: str | None = None
    sort: str | None = None
    fold: str | None = None

    display: ClassVar[Display] = Display.O_TABLE


@dataclass(frozen=True)
class OutputDiagram(Content):
    x: str | None = None
    y: str | None = None
    id: str | None = None
    max: str | None = None
    fold: str | None = None
    type: str | None = None

    display: ClassVar[Display] = Display.O_DIAGRAM


@dataclass(frozen=True)
class Article:
    title: str | None
    content: tuple[Content, ...] = ()

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {}
        if self.title is not None:
            data["title"] = self.title
        data["content"] = [item.to_dict() for item in self.content]
        return data


@dataclass(frozen=True)
class Terminology:
    name: str | None
    value: str | None

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.name is not None:
            data["name"] = self.name
        if self.value is not None:
            data["value"] = self.value
        return data


@dataclass(frozen=True)
class Issue:
    articles: tuple[Article, ...]
    terminology: tuple[Terminology, ...]
    language: str | None = None
    currency: str | None = None
    version: str | None = None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "terminology": [term.to_dict() for term in self.terminology],
            "articles": [article.to_dict() for article in self.articles],
        }
        for key in ("language", "currency", "version"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data
