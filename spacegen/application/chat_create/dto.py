"""Chat-create DTOs."""

from typing import Any

from pydantic import BaseModel, Field

from spacegen.domain.entities.workspace import (
    ITEM_TYPE_VALUES,
    WIDGET_TYPE_VALUES,
    ItemType,
    PlanItem,
    WidgetType,
)
from spacegen.domain.errors import ExtractionError

MIN_MESSAGE_LENGTH = 3


class ChatCreateRequest(BaseModel):
    """Request to create a single item from a chat message."""

    message: str = Field("", max_length=5_000)

    @property
    def is_too_short(self) -> bool:
        return len((self.message or "").strip()) < MIN_MESSAGE_LENGTH


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def intent_to_plan_item(intent: Any) -> PlanItem:
    """Map the model's single-item intent onto a PlanItem.

    Unknown file types become notes, unknown widget types become status
    widgets, and a link without a URL becomes a note.
    """
    if not isinstance(intent, dict):
        raise ExtractionError("Intent payload is not an object")
    title = _text(intent.get("title")) or "New Item"
    purpose = _text(intent.get("purpose"))
    brief = _text(intent.get("contentBrief")) or purpose
    link_url = _text(intent.get("linkUrl")) or None

    if _text(intent.get("type")).lower() == "widget":
        widget = _text(intent.get("widgetType")).lower()
        return PlanItem(
            type=ItemType.WIDGET,
            widget_type=WidgetType(widget) if widget in WIDGET_TYPE_VALUES else WidgetType.STATUS,
            name=title,
            purpose=purpose,
            content_brief=brief,
        )

    file_type = _text(intent.get("fileType")).lower()
    if file_type not in ITEM_TYPE_VALUES or file_type == ItemType.WIDGET.value:
        file_type = ItemType.NOTE.value
    if file_type == ItemType.LINK.value and not link_url:
        file_type = ItemType.NOTE.value
    return PlanItem(
        type=ItemType(file_type),
        name=title,
        purpose=purpose,
        content_brief=brief,
        link_url=link_url if file_type == ItemType.LINK.value else None,
    )
