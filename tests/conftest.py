"""Pytest configuration and shared fixtures."""

import json

import pytest

from spacegen.api.container import reset_container
from spacegen.api.dependencies import limiter
from spacegen.domain.errors import AllProvidersFailedError, ProviderError

UNDERSTANDING_JSON = {
    "identity": {
        "profession": "wedding photographer",
        "niche": "intimate outdoor weddings",
        "experienceHint": "senior",
        "personality": "warm",
    },
    "goals": {
        "primary": "booking more couples",
        "secondary": ["grow portfolio"],
        "successLooksLike": "couples book a call",
    },
    "workflow": {"serves": "engaged couples", "process": "consult, shoot, deliver", "tools": ["Lightroom"]},
    "needs": {"explicit": ["booking calls"], "implicit": ["portfolio", "pricing"]},
    "tone": "warm",
    "customRequests": [],
    "understanding": "A warm wedding photographer in Austin who wants couples to book calls.",
    "wallpaperKeyword": "wedding",
}

PLAN_JSON = {
    "plan": {
        "summary": "A warm wedding photography studio",
        "items": [
            {"type": "widget", "widgetType": "book", "name": "Book a Consultation", "purpose": "Let couples book", "priority": 4},
            {"type": "note", "name": "Hello, I'm Your Photographer", "purpose": "Introduce", "contentBrief": "Warm intro", "priority": 1},
            {"type": "board", "name": "Wedding Season", "purpose": "Track shoots", "priority": 3},
            {"type": "case-study", "name": "Hill Country Elopement", "purpose": "Show work", "priority": 2},
        ],
    },
    "reasoning": "Intro first, booking last",
}

BOARD_JSON = {
    "columns": [
        {"id": "col-1", "title": "Inquiries", "cards": [{"id": "c1", "title": "Smith wedding", "color": "green"}], "order": 0},
        {"id": "col-2", "title": "Booked", "cards": [], "order": 1},
    ]
}

ONBOARDING_JSON = {
    "userType": "wedding photographer",
    "baseTemplate": "portfolio",
    "widgets": ["status", "book"],
    "folders": ["Weddings"],
    "notes": [
        {"title": "About Me", "type": "note", "reason": "intro"},
        {"title": "Hill Country Elopement", "type": "case-study"},
        {"title": "Gallery", "type": "image"},
    ],
    "statusText": "Booking 2027 weddings",
    "tone": "casual",
    "summary": "A warm portfolio for a wedding photographer",
}

NOTE_CONTENTS_JSON = {
    "About Me": "<h1>Hi, I'm [Your Name]</h1><p>I photograph weddings.</p>",
    "Hill Country Elopement": "<h1>Hill Country Elopement</h1><p>Sunrise vows.</p>",
}


class ScriptedGateway:
    """Gateway double that answers by recognizing which prompt it was given."""

    def __init__(self, fail_on: tuple[str, ...] = (), overrides: dict[str, str] | None = None) -> None:
        self.fail_on = fail_on
        self.overrides = overrides or {}
        self.calls: list[tuple[str, int]] = []
        self.prompts: list[str] = []

    @staticmethod
    def kind_of(prompt: str) -> str:
        if "map it to the available building blocks" in prompt:
            return "onboarding"
        if "copywriter setting up a personal workspace" in prompt:
            return "notes"
        if "analyzing a user's request" in prompt:
            return "understanding"
        if "Based on this deep understanding" in prompt:
            return "planning"
        if "Determine what SINGLE item" in prompt:
            return "intent"
        if "kanban board" in prompt:
            return "board"
        if "spreadsheet data" in prompt:
            return "sheet"
        if "Build a small interactive tool" in prompt:
            return "custom-app"
        return "content"

    async def generate(self, prompt: str, max_tokens: int = 2000) -> str:
        kind = self.kind_of(prompt)
        self.calls.append((kind, max_tokens))
        self.prompts.append(prompt)
        if kind in self.fail_on:
            raise AllProvidersFailedError([ProviderError("openrouter", 503, "unavailable")])
        if kind in self.overrides:
            return self.overrides[kind]
        if kind == "understanding":
            return f"Here is my analysis:\n```json\n{json.dumps(UNDERSTANDING_JSON)}\n```"
        if kind == "planning":
            return json.dumps(PLAN_JSON)
        if kind == "board":
            return json.dumps(BOARD_JSON)
        if kind == "onboarding":
            return json.dumps(ONBOARDING_JSON)
        if kind == "notes":
            return f"```json\n{json.dumps(NOTE_CONTENTS_JSON)}\n```"
        return "```html\n<h1>Generated</h1><p>Written in first person.</p>\n```"


@pytest.fixture
def scripted_gateway():
    return ScriptedGateway()


@pytest.fixture
def make_gateway():
    """Factory for gateways that fail or answer differently per prompt kind."""
    return ScriptedGateway


@pytest.fixture(autouse=True)
def _reset_globals():
    """Fresh container and rate-limit counters for every test."""
    reset_container()
    limiter.reset()
    yield
    reset_container()


@pytest.fixture(autouse=True)
def _reset_sse_app_status():
    """sse_starlette keeps a module-level exit event bound to the first event loop."""
    from sse_starlette.sse import AppStatus

    if hasattr(AppStatus, "should_exit_event"):
        AppStatus.should_exit_event = None
    yield
