"""Workspace domain model: understanding profile, plan and built items.

Model output is untrusted. Every schema here accepts loosely-typed JSON and
replaces invalid fields with a documented default instead of rejecting the
whole payload:

- non-string scalars become strings, missing/null strings become ""
- a single string where a list is expected becomes a one-element list
- a nested section that is not an object becomes an empty section
"""

import json
import math
import time
import uuid
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from spacegen.domain.errors import ExtractionError


def _loose_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float, bool)):
        return str(value)
    return ""


def _loose_list(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        return tuple(s for s in (_loose_str(v) for v in value) if s)
    return ()


def _loose_section(value: Any) -> Any:
    return value if isinstance(value, (dict, BaseModel)) else {}


LooseStr = Annotated[str, BeforeValidator(_loose_str)]
LooseList = Annotated[tuple[str, ...], BeforeValidator(_loose_list)]


class _Section(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Identity(_Section):
    """Who the person is."""

    profession: LooseStr = ""
    niche: LooseStr = ""
    experience_hint: LooseStr = ""
    personality: LooseStr = ""


class Goals(_Section):
    """What success means to them."""

    primary: LooseStr = ""
    secondary: LooseList = ()
    success_looks_like: LooseStr = ""


class Workflow(_Section):
    """Who they serve and how they work."""

    serves: LooseStr = ""
    process: LooseStr = ""
    tools: LooseList = ()


class Needs(_Section):
    """Stated and inferred needs."""

    explicit: LooseList = ()
    implicit: LooseList = ()


class UnderstandingProfile(_Section):
    """Structured reading of the user's prompt, produced once per request."""

    identity: Identity = Identity()
    goals: Goals = Goals()
    workflow: Workflow = Workflow()
    needs: Needs = Needs()
    tone: LooseStr = "professional"
    custom_requests: LooseList = ()
    summary: LooseStr = Field("", alias="understanding")
    wallpaper_keyword: LooseStr = ""

    @field_validator("identity", "goals", "workflow", "needs", mode="before")
    @classmethod
    def _sections(cls, value: Any) -> Any:
        return _loose_section(value)

    @field_validator("tone")
    @classmethod
    def _tone(cls, value: str) -> str:
        # Single word expected; keep the first one
        return value.split()[0].lower() if value.strip() else "professional"

    @classmethod
    def from_model_output(cls, data: Any) -> "UnderstandingProfile":
        """Validate extracted JSON. Raises ExtractionError when nothing usable is present."""
        if not isinstance(data, dict):
            raise ExtractionError("Understanding payload is not an object")
        profile = cls.model_validate(data)
        if not profile.summary and not profile.identity.profession:
            raise ExtractionError("Understanding payload has neither summary nor profession")
        return profile

    def to_context(self) -> str:
        """Pretty JSON used as context in planning and content prompts."""
        return json.dumps(self.model_dump(by_alias=True, mode="json"), indent=2)


class ItemType(str, Enum):
    """Closed set of plannable item types."""

    NOTE = "note"
    CASE_STUDY = "case-study"
    FOLDER = "folder"
    EMBED = "embed"
    BOARD = "board"
    SHEET = "sheet"
    LINK = "link"
    CUSTOM_APP = "custom-app"
    WIDGET = "widget"


class WidgetType(str, Enum):
    """Closed set of functional widgets rendered by the presentation layer."""

    STATUS = "status"
    CONTACT = "contact"
    BOOK = "book"
    LINKS = "links"
    TIPJAR = "tipjar"
    FEEDBACK = "feedback"


ITEM_TYPE_VALUES = frozenset(t.value for t in ItemType)
WIDGET_TYPE_VALUES = frozenset(t.value for t in WidgetType)


class PlanItem(_Section):
    """One intended workspace item."""

    type: ItemType
    widget_type: WidgetType | None = None
    name: str
    purpose: str = ""
    content_brief: str = ""
    priority: int = 0
    link_url: str | None = None
    parent_folder: str | None = None

    def summary(self) -> dict:
        """Short form used by plan and building events."""
        return {"name": self.name, "type": self.type.value, "purpose": self.purpose}


def _plan_item_from_raw(raw: Any, index: int) -> PlanItem | None:
    """Normalize one model-proposed item. Returns None when it has no name."""
    if not isinstance(raw, dict):
        return None
    name = _loose_str(raw.get("name") or raw.get("title"))
    if not name:
        return None
    item_type = _loose_str(raw.get("type")).lower()
    if item_type not in ITEM_TYPE_VALUES:
        item_type = ItemType.NOTE.value
    widget_type = _loose_str(raw.get("widgetType")).lower() or None
    link_url = _loose_str(raw.get("linkUrl")) or None
    if item_type == ItemType.WIDGET.value:
        if widget_type not in WIDGET_TYPE_VALUES:
            widget_type = WidgetType.CONTACT.value
    else:
        widget_type = None
    if item_type == ItemType.LINK.value and not link_url:
        # A link without a target cannot render; keep the content as a note
        item_type = ItemType.NOTE.value
    priority = raw.get("priority")
    if isinstance(priority, bool) or not isinstance(priority, (int, float)) or not math.isfinite(priority):
        priority = index + 1
    purpose = _loose_str(raw.get("purpose"))
    return PlanItem(
        type=ItemType(item_type),
        widget_type=WidgetType(widget_type) if widget_type else None,
        name=name,
        purpose=purpose,
        content_brief=_loose_str(raw.get("contentBrief")) or purpose,
        priority=int(priority),
        link_url=link_url if item_type == ItemType.LINK.value else None,
        parent_folder=_loose_str(raw.get("parentFolder")) or None,
    )


class Plan(_Section):
    """Ordered list of plan items with a one-sentence summary."""

    summary: str = ""
    reasoning: str = ""
    items: tuple[PlanItem, ...] = ()

    def sorted_items(self) -> list[PlanItem]:
        """Items stable-sorted by priority, with parentFolder limited to earlier folders."""
        ordered = sorted(self.items, key=lambda i: i.priority)
        folders: set[str] = set()
        result: list[PlanItem] = []
        for item in ordered:
            if item.parent_folder and item.parent_folder not in folders:
                item = item.model_copy(update={"parent_folder": None})
            if item.type is ItemType.FOLDER:
                folders.add(item.name)
            result.append(item)
        return result

    @classmethod
    def from_model_output(cls, data: Any) -> "Plan":
        """Accept `{plan: {summary, items}, reasoning}` or a flat `{summary, items}`.

        Raises ExtractionError when no usable item is present.
        """
        if not isinstance(data, dict):
            raise ExtractionError("Plan payload is not an object")
        body = data.get("plan") if isinstance(data.get("plan"), dict) else data
        raw_items = body.get("items")
        if not isinstance(raw_items, list):
            raise ExtractionError("Plan payload has no items list")
        items = [p for i, raw in enumerate(raw_items) if (p := _plan_item_from_raw(raw, i)) is not None]
        if not items:
            raise ExtractionError("Plan payload has no usable items")
        return cls(
            summary=_loose_str(body.get("summary")),
            reasoning=_loose_str(data.get("reasoning") or body.get("reasoning")),
            items=tuple(items),
        )


def new_item_id() -> str:
    """Unique item id: item-<epoch ms>-<9 random chars>."""
    return f"item-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


class WorkspaceItem(_Section):
    """A built, content-bearing item handed to the presentation layer."""

    id: str = Field(default_factory=new_item_id)
    kind: Literal["file", "widget"] = Field("file", alias="type")
    file_type: ItemType | None = None
    widget_type: WidgetType | None = None
    title: str
    content: str = ""
    purpose: str = ""
    priority: int = 0
    link_url: str | None = None
    parent_folder: str | None = None

    @property
    def type_label(self) -> str:
        """fileType for files, 'widget' for widgets."""
        if self.kind == "widget":
            return ItemType.WIDGET.value
        return (self.file_type or ItemType.NOTE).value

    @classmethod
    def from_plan_item(cls, item: PlanItem, content: str) -> "WorkspaceItem":
        """Build the artifact for a plan item. Widgets never carry content."""
        if item.type is ItemType.WIDGET:
            return cls(
                kind="widget",
                widget_type=item.widget_type or WidgetType.CONTACT,
                title=item.name,
                content="",
                purpose=item.purpose,
                priority=item.priority,
                parent_folder=item.parent_folder,
            )
        return cls(
            kind="file",
            file_type=item.type,
            title=item.name,
            content=content,
            purpose=item.purpose,
            priority=item.priority,
            link_url=item.link_url,
            parent_folder=item.parent_folder,
        )

    def to_wire(self) -> dict:
        """camelCase JSON shape consumed by the desktop renderer."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
