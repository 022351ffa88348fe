"""Fallback workspace generator - deterministic, AI-free workspace from keyword heuristics."""

from dataclasses import dataclass

from spacegen.domain.entities.structured_content import skeleton_board
from spacegen.domain.entities.workspace import (
    Identity,
    ItemType,
    Plan,
    PlanItem,
    UnderstandingProfile,
    WidgetType,
    WorkspaceItem,
)


@dataclass(frozen=True)
class ProfessionRule:
    """Keyword rule selecting profession wording for the fallback workspace."""

    triggers: tuple[str, ...]
    profession: str
    niche: str
    folder_name: str
    service_name: str
    # (keywords, folder name) overrides checked in order
    folder_variants: tuple[tuple[tuple[str, ...], str], ...] = ()

    def folder_for(self, text: str) -> str:
        for keywords, name in self.folder_variants:
            if any(k in text for k in keywords):
                return name
        return self.folder_name


# Checked in order; the first rule with a matching trigger wins
PROFESSION_RULES: tuple[ProfessionRule, ...] = (
    ProfessionRule(
        triggers=("photographer",),
        profession="photographer",
        niche="photography",
        folder_name="Photo Gallery",
        service_name="Photography Services",
        folder_variants=((("wedding",), "Wedding Gallery"),),
    ),
    ProfessionRule(
        triggers=("designer",),
        profession="designer",
        niche="design",
        folder_name="Design Projects",
        service_name="Design Services",
        folder_variants=((("ui", "product"), "Product Work"),),
    ),
    ProfessionRule(
        triggers=("developer", "engineer"),
        profession="developer",
        niche="development",
        folder_name="Code Projects",
        service_name="Development Services",
    ),
    ProfessionRule(
        triggers=("writer", "author"),
        profession="writer",
        niche="writing",
        folder_name="Published Work",
        service_name="Writing Services",
    ),
    ProfessionRule(
        triggers=("learn",),
        profession="learner",
        niche="learning",
        folder_name="Study Notes",
        service_name="Learning Goals",
    ),
)

DEFAULT_RULE = ProfessionRule(
    triggers=(),
    profession="creative professional",
    niche="your work",
    folder_name="Portfolio",
    service_name="Services",
)

BOOKING_SIGNALS = ("book", "schedule", "call", "appointment", "consultation", "calendar", "meeting")
CONTACT_SIGNALS = ("contact", "email", "reach out", "inquir", "hire", "get in touch", "message")
LINKS_SIGNALS = ("link", "social", "instagram", "twitter", "linkedin", "youtube", "tiktok", "github")
STATUS_SIGNALS = ("available", "availability", "status", "open for", "taking clients")


@dataclass(frozen=True)
class NeedSignals:
    """Boolean need-signals detected in the prompt."""

    booking: bool
    contact: bool
    links: bool
    status: bool

    @classmethod
    def detect(cls, text: str) -> "NeedSignals":
        return cls(
            booking=any(s in text for s in BOOKING_SIGNALS),
            contact=any(s in text for s in CONTACT_SIGNALS),
            links=any(s in text for s in LINKS_SIGNALS),
            status=any(s in text for s in STATUS_SIGNALS),
        )


def select_profession(text: str) -> ProfessionRule:
    """First matching profession rule, or the generic creative profile."""
    for rule in PROFESSION_RULES:
        if any(t in text for t in rule.triggers):
            return rule
    return DEFAULT_RULE


def _about(rule: ProfessionRule) -> str:
    return f"""<h1>Hey, I'm [Your Name]</h1>
<p>I'm a {rule.profession} passionate about creating meaningful work in {rule.niche}.</p>
<p>My approach combines creativity with purpose. Every project is an opportunity to solve problems and create something valuable.</p>
<h2>What I Do</h2>
<p>I help clients achieve their goals through thoughtful, intentional {rule.niche}. Whether you need a complete solution or guidance on your next project, I'm here to help.</p>
<p><strong>Let's work together.</strong></p>"""


FEATURED_PROJECT = """<h1>Featured Project</h1>
<h2>Overview</h2>
<p>A brief description of what this project was about and why it mattered.</p>
<h2>The Challenge</h2>
<p>What problem were you solving? What were the constraints?</p>
<h2>The Approach</h2>
<p>How did you tackle this challenge? What made your approach unique?</p>
<h2>Results</h2>
<p>What was the impact? Include metrics if possible.</p>"""


def _services(rule: ProfessionRule) -> str:
    return f"""<h1>{rule.service_name}</h1>
<p>Here's how I can help you:</p>
<h2>What I Offer</h2>
<ul>
<li><strong>Consultation</strong> - Let's discuss your project and goals</li>
<li><strong>Full Projects</strong> - End-to-end {rule.niche} solutions</li>
<li><strong>Collaboration</strong> - Working alongside your team</li>
</ul>
<h2>Process</h2>
<p>Every project starts with understanding your needs. From there, we'll work together to create something you'll love.</p>
<p><strong>Ready to start? Get in touch.</strong></p>"""


# Appended in this order regardless of which signals fired
_WIDGETS: tuple[tuple[WidgetType, str, str], ...] = (
    (WidgetType.STATUS, "Availability", "Let visitors know whether you're taking new work"),
    (WidgetType.BOOK, "Book a Call", "Let people schedule time with you"),
    (WidgetType.CONTACT, "Get in Touch", "Make it easy for visitors to contact you"),
    (WidgetType.LINKS, "Find Me Online", "Collect your social profiles and external links"),
)


def _widget_enabled(widget: WidgetType, signals: NeedSignals) -> bool:
    if widget is WidgetType.STATUS:
        return signals.status
    if widget is WidgetType.BOOK:
        return signals.booking
    if widget is WidgetType.CONTACT:
        # Contact is the default call to action unless booking replaces it
        return signals.contact or not signals.booking
    if widget is WidgetType.LINKS:
        return signals.links
    return False


@dataclass(frozen=True)
class FallbackWorkspace:
    """Deterministic workspace plus the profile wording it was derived from."""

    rule: ProfessionRule
    signals: NeedSignals
    items: tuple[WorkspaceItem, ...]

    @property
    def understanding(self) -> str:
        return (
            f"I understand you're a {self.rule.profession}. Let me set up a comprehensive workspace "
            f"to showcase {self.rule.niche} and help visitors connect with you."
        )

    @property
    def summary(self) -> str:
        return f"Setting up a comprehensive workspace for a {self.rule.profession}"

    def to_profile(self) -> UnderstandingProfile:
        """Minimal profile used for events, wallpaper matching and content prompts."""
        return UnderstandingProfile(
            identity=Identity(profession=self.rule.profession, niche=self.rule.niche),
            tone="professional",
            summary=self.understanding,
            wallpaper_keyword=self.rule.profession,
        )

    def to_plan(self, reasoning: str = "Using a recommended workspace layout") -> Plan:
        """Plan mirroring the fallback items, for AI content generation per item."""
        return Plan(
            summary=self.summary,
            reasoning=reasoning,
            items=tuple(
                PlanItem(
                    type=ItemType.WIDGET if item.kind == "widget" else item.file_type,
                    widget_type=item.widget_type,
                    name=item.title,
                    purpose=item.purpose,
                    content_brief=item.purpose,
                    priority=item.priority,
                )
                for item in self.items
            ),
        )


def build_fallback_workspace(prompt: str) -> FallbackWorkspace:
    """Build the deterministic workspace for a prompt. Never fails."""
    text = (prompt or "").lower()
    rule = select_profession(text)
    signals = NeedSignals.detect(text)

    files = [
        (ItemType.NOTE, "About Me", _about(rule), "Introduce yourself to visitors"),
        (ItemType.FOLDER, rule.folder_for(text), "", f"Organize your {rule.niche} work"),
        (ItemType.CASE_STUDY, "Featured Project", FEATURED_PROJECT, "Showcase your best work with context"),
        (ItemType.NOTE, rule.service_name, _services(rule), "Explain what you offer"),
        (
            ItemType.BOARD,
            "Project Board",
            skeleton_board(f"Plan your next {rule.niche} project").to_json(),
            "Track work in progress",
        ),
    ]
    items: list[WorkspaceItem] = [
        WorkspaceItem(kind="file", file_type=t, title=title, content=content, purpose=purpose, priority=i + 1)
        for i, (t, title, content, purpose) in enumerate(files)
    ]
    for widget, title, purpose in _WIDGETS:
        if _widget_enabled(widget, signals):
            items.append(
                WorkspaceItem(
                    kind="widget",
                    widget_type=widget,
                    title=title,
                    purpose=purpose,
                    priority=len(items) + 1,
                )
            )
    return FallbackWorkspace(rule=rule, signals=signals, items=tuple(items))


def generate_fallback_items(prompt: str) -> list[WorkspaceItem]:
    """Deterministic item list for a prompt."""
    return list(build_fallback_workspace(prompt).items)
