"""Onboarding intent: a coarse workspace configuration read from a prompt.

`ParsedIntent` validates model output strictly. Any value outside the
vocabularies below rejects the whole payload so the caller can switch to the
template intent. `IntentOutline` is the looser shape clients send back when
asking for note content.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

BaseTemplate = Literal["portfolio", "business", "writing", "creative", "personal", "developer", "agency"]
IntentWidget = Literal["status", "clock", "contact", "book", "tipjar", "links", "feedback"]
IntentFileType = Literal["note", "case-study", "folder", "image", "link", "embed", "download", "cv"]
IntentTone = Literal["professional", "casual", "creative", "minimal", "playful"]

# Note types that get written content
WRITTEN_NOTE_TYPES = frozenset({"note", "case-study"})


class _Camel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class IntentNote(_Camel):
    title: str
    type: IntentFileType


class ParsedIntent(_Camel):
    """Template, widgets, folders and notes chosen for one user."""

    user_type: str
    base_template: BaseTemplate
    widgets: tuple[IntentWidget, ...]
    folders: tuple[str, ...]
    notes: tuple[IntentNote, ...]
    status_text: str
    tone: IntentTone
    summary: str

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class OutlineNote(_Camel):
    title: str
    type: str


class IntentOutline(_Camel):
    """Intent as echoed back by a client. Vocabularies are not enforced."""

    user_type: str
    base_template: str
    widgets: tuple[str, ...]
    folders: tuple[str, ...]
    notes: tuple[OutlineNote, ...]
    status_text: str
    tone: str
    summary: str
