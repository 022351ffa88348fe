"""Schemas for structured item content (boards and sheets) plus their skeletons."""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

CardColor = Literal["blue", "green", "yellow", "red", "purple"]
CellType = Literal["text", "number", "date", "currency", "percent", "checkbox"]

_CARD_COLORS = ("blue", "green", "yellow", "red", "purple")
_CELL_TYPES = ("text", "number", "date", "currency", "percent", "checkbox")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _with_defaults(raw: dict, default_id: str, index: int) -> dict:
    """Fill id/order the model left out; ids are always strings."""
    order = raw.get("order")
    return {
        **raw,
        "id": str(raw.get("id") or default_id),
        "title": _text(raw.get("title") or raw.get("name")) or None,
        "order": order if isinstance(order, int) and not isinstance(order, bool) else index,
    }


class _Content(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True, exclude_none=True, mode="json"))


class ChecklistItem(_Content):
    id: str
    text: str
    checked: bool = False


class Card(_Content):
    id: str
    title: str
    description: str = ""
    color: CardColor = "blue"
    order: int = 0
    checklist: list[ChecklistItem] | None = None

    @model_validator(mode="before")
    @classmethod
    def _fill(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data["description"] = _text(data.get("description"))
        if data.get("color") not in _CARD_COLORS:
            data["color"] = "blue"
        checklist = data.get("checklist")
        if isinstance(checklist, list):
            items = []
            for i, entry in enumerate(checklist):
                if isinstance(entry, str):
                    entry = {"text": entry}
                if isinstance(entry, dict) and entry.get("text"):
                    items.append(
                        {
                            **entry,
                            "id": str(entry.get("id") or f"{data.get('id', 'card')}-check-{i + 1}"),
                            "text": _text(entry.get("text")),
                            "checked": entry.get("checked") is True,
                        }
                    )
            data["checklist"] = items or None
        elif checklist is not None:
            data["checklist"] = None
        return data


class Column(_Content):
    id: str
    title: str
    cards: list[Card] = []
    order: int = 0

    @model_validator(mode="before")
    @classmethod
    def _fill(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        cards = data.get("cards") if isinstance(data.get("cards"), list) else []
        col_id = str(data.get("id") or "col")
        data["cards"] = [
            _with_defaults(c, f"{col_id}-card-{i + 1}", i) if isinstance(c, dict) else c
            for i, c in enumerate(cards)
        ]
        return data


class BoardContent(_Content):
    """Kanban board: ordered columns of cards."""

    columns: list[Column] = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _fill(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("columns"), list):
            return data
        return {
            **data,
            "columns": [
                _with_defaults(c, f"col-{i + 1}", i) if isinstance(c, dict) else c
                for i, c in enumerate(data["columns"])
            ],
        }


class Cell(_Content):
    value: str = ""
    type: CellType = "text"

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, (str, int, float)) and not isinstance(data, bool):
            return {"value": str(data), "type": "number" if isinstance(data, (int, float)) else "text"}
        if not isinstance(data, dict):
            return data
        data = dict(data)
        value = data.get("value")
        data["value"] = "" if value is None else str(value)
        if data.get("type") not in _CELL_TYPES:
            data["type"] = "text"
        return data


class SheetContent(_Content):
    """Spreadsheet: rows of typed cells with frozen header rows."""

    data: list[list[Cell]] = Field(min_length=1)
    frozen_rows: int = 1

    @field_validator("frozen_rows", mode="before")
    @classmethod
    def _frozen(cls, value: Any) -> int:
        return value if isinstance(value, int) and not isinstance(value, bool) and value >= 0 else 1


def skeleton_board(title: str = "Getting Started") -> BoardContent:
    """Three empty columns with a single seed card."""
    return BoardContent(
        columns=[
            Column(
                id="col-1",
                title="To Do",
                order=0,
                cards=[
                    Card(
                        id="card-1",
                        title=title,
                        description="Add your first task here.",
                        color="blue",
                        order=0,
                    )
                ],
            ),
            Column(id="col-2", title="In Progress", order=1, cards=[]),
            Column(id="col-3", title="Done", order=2, cards=[]),
        ]
    )


def skeleton_sheet() -> SheetContent:
    """Header row plus one empty data row."""
    return SheetContent(
        data=[
            [Cell(value="Item", type="text"), Cell(value="Notes", type="text"), Cell(value="Value", type="text")],
            [Cell(value="", type="text"), Cell(value="", type="text"), Cell(value="", type="number")],
        ],
        frozen_rows=1,
    )
