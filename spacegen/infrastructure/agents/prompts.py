"""Prompt builders for the build pipeline (understanding, planning, content) and chat-create."""

from types import MappingProxyType

from spacegen.domain.entities.workspace import PlanItem, UnderstandingProfile

UNDERSTANDING_SCHEMA = """{
  "identity": {
    "profession": "specific job title",
    "niche": "their specialization",
    "experienceHint": "junior/mid/senior/expert vibe",
    "personality": "warm/technical/creative/corporate/etc"
  },
  "goals": {
    "primary": "main thing they want to achieve",
    "secondary": ["other goals inferred"],
    "successLooksLike": "what would make this workspace successful for them"
  },
  "workflow": {
    "serves": "who are their clients/audience",
    "process": "how they work",
    "tools": ["tools/platforms they likely use"]
  },
  "needs": {
    "explicit": ["things they asked for"],
    "implicit": ["things they need but didn't ask for"]
  },
  "tone": "one word describing ideal tone",
  "customRequests": ["any unique tools or features they mentioned"],
  "understanding": "2-3 sentence summary of who this person is and what they need",
  "wallpaperKeyword": "2-3 words describing a fitting background photo"
}"""

PLAN_SCHEMA = """{
  "plan": {
    "summary": "One sentence describing what you're building and why",
    "items": [
      {
        "type": "note|case-study|folder|embed|board|sheet|link|custom-app|widget",
        "widgetType": "status|contact|book|links|tipjar|feedback (only when type is widget)",
        "name": "Specific name for this user",
        "purpose": "Why THIS user needs this (1-2 sentences)",
        "contentBrief": "What should be inside, specific to their situation",
        "priority": 1,
        "linkUrl": "https://... (only when type is link)",
        "parentFolder": "name of an earlier folder item (optional)"
      }
    ]
  },
  "reasoning": "Brief explanation of your overall design decisions"
}"""

COMPONENT_TYPES = """FILES (rich content):
- note: Rich text document (About Me, Services, Process, Pricing, etc.)
- case-study: Portfolio piece with sections (Overview, Challenge, Approach, Results)
- folder: Container to organize related files together
- embed: Short intro for embedded external content (portfolio site, showreel, prototype)
- board: Kanban board with columns and cards
- sheet: Spreadsheet with a header row and data rows
- link: URL shortcut (requires linkUrl)
- custom-app: Small self-contained interactive tool (calculator, quiz, estimator)

WIDGETS (functional elements rendered by the desktop; they have no written content):
- widget: set "widgetType" to one of:
  - "status": availability badge
  - "contact": contact form for inquiries
  - "book": booking widget for scheduling calls
  - "links": social and external links
  - "tipjar": support/tip jar
  - "feedback": collect feedback and testimonials"""

WORD_TARGETS = MappingProxyType(
    {
        "note": "150-250 words",
        "case-study": "250-400 words",
        "embed": "60-120 words",
    }
)

# Variables supplied by the desktop host. Apps must not declare their own :root scope.
HOST_CSS_VARIABLES = (
    "--color-bg-base",
    "--color-bg-elevated",
    "--color-text-primary",
    "--color-text-secondary",
    "--color-accent-primary",
    "--color-border-default",
    "--radius-md",
    "--font-body",
)


def build_understanding_prompt(user_prompt: str) -> str:
    """Phase 1: extract a deep profile of the person from their request."""
    return f"""You are analyzing a user's request to build their personal workspace. Extract DEEP understanding, not surface-level parsing.

Analyze and extract:
1. WHO they are (profession, niche, experience level, personality hints)
2. Their PRIMARY GOAL (what does success look like for them?)
3. Their WORKFLOW (how do they work, who do they serve, what's their process?)
4. EXPLICIT NEEDS (what they directly asked for)
5. IMPLICIT NEEDS (what they didn't ask for but clearly need)
6. TONE that fits them (professional, playful, minimal, bold, warm, technical)
7. Any CUSTOM TOOLS or unique features they mentioned

User prompt: "{user_prompt}"

Return JSON only:
{UNDERSTANDING_SCHEMA}"""


def build_planning_prompt(profile: UnderstandingProfile) -> str:
    """Phase 2: design a tailored list of 4-8 items."""
    return f"""Based on this deep understanding of the user:
{profile.to_context()}

Design a workspace tailored specifically for them.

Available component types:

{COMPONENT_TYPES}

Rules:
- Create 4-8 items, each with a CLEAR PURPOSE for THIS user
- Names should be SPECIFIC (e.g. "Wedding Shoots", not "Projects")
- Include at least 1 widget if they have functional needs (booking, contact, availability, links)
- If they ask for something no component can do, create a note that honestly describes it
- Order items with priority: introduction first, portfolio next, widgets last

Return JSON only:
{PLAN_SCHEMA}"""


def build_content_prompt(item: PlanItem, profile: UnderstandingProfile) -> str:
    """Phase 3: first-person HTML for note, case-study and embed items."""
    words = WORD_TARGETS.get(item.type.value, WORD_TARGETS["note"])
    sections = ""
    if item.type.value == "case-study":
        sections = "\nInclude sections: Overview, Challenge, Approach, Results."
    return f"""Generate the actual content for this workspace component.

User context:
{profile.to_context()}

Component to create:
- Name: {item.name}
- Type: {item.type.value}
- Purpose: {item.purpose}
- Brief: {item.content_brief}

Write the content AS IF YOU ARE THIS PERSON.
- Use first person
- Match their tone ({profile.tone})
- Reference their specific niche and situation
- Use [Your Name] only for their actual name
- Length: {words}{sections}

Use HTML: <h1>, <h2>, <p>, <ul>, <li>, <strong>, <em>.
Return just the HTML content, no markdown code blocks."""


def build_board_prompt(item: PlanItem) -> str:
    return f"""Generate a kanban board structure as JSON.

Purpose: {item.purpose}
Title: {item.name}
Brief: {item.content_brief}

Return JSON:
{{
  "columns": [
    {{
      "id": "col-1",
      "title": "Column Name",
      "cards": [
        {{ "id": "c1", "title": "Card title", "description": "Details", "order": 0, "color": "blue|green|yellow|red|purple" }}
      ],
      "order": 0
    }}
  ]
}}

Create 3-4 columns with 2-4 realistic, useful cards each."""


def build_sheet_prompt(item: PlanItem) -> str:
    return f"""Generate spreadsheet data as JSON.

Purpose: {item.purpose}
Title: {item.name}
Brief: {item.content_brief}

Return JSON:
{{
  "data": [
    [{{ "value": "Header 1", "type": "text" }}, {{ "value": "Header 2", "type": "text" }}],
    [{{ "value": "Data", "type": "text" }}, {{ "value": "100", "type": "number" }}]
  ],
  "frozenRows": 1
}}

Cell types: text, number, date, currency, percent, checkbox.
Create a header row + 5-8 data rows with realistic content."""


def build_custom_app_prompt(item: PlanItem, profile: UnderstandingProfile) -> str:
    """Self-contained <style> + HTML + <script> against host CSS variables."""
    variables = ", ".join(HOST_CSS_VARIABLES)
    return f"""Build a small interactive tool for this person's workspace.

Who it is for: {profile.identity.profession or "a creative professional"}
Tool name: {item.name}
Purpose: {item.purpose}
Brief: {item.content_brief}

Output exactly three parts, in order:
1. a <style> block
2. the HTML markup
3. a <script> block with plain JavaScript

Rules:
- No markdown code fences, no explanations
- No frameworks or external libraries
- Style only with these host CSS variables: {variables}
- Do NOT define a :root block or redefine any variable
- Scope every selector under a single wrapper class"""


def build_chat_intent_prompt(message: str) -> str:
    """Single-item intent for chat-create."""
    return f"""You are a helpful assistant inside a personal workspace app.
The user is asking you to create something for their desktop workspace.

{COMPONENT_TYPES}

User request: "{message}"

Determine what SINGLE item to create. Return JSON only:
{{
  "type": "file" | "widget",
  "fileType": "note|case-study|board|sheet|link|folder|embed|custom-app",
  "widgetType": "status|contact|book|links|tipjar|feedback",
  "title": "Short descriptive name",
  "purpose": "Why this item is useful",
  "contentBrief": "What the content should include",
  "linkUrl": "URL if fileType is link"
}}

Only include fileType OR widgetType (based on type)."""


ONBOARDING_INTENT_GUIDE = """You are helping configure a personal desktop workspace. Your job is to understand what kind of creative space the user wants and map it to the available building blocks.

WIDGETS (interactive elements):
- status: availability status ("Available for work", "Taking projects")
- clock: current time with timezone
- contact: contact form for inquiries
- book: schedule/calendar booking
- tipjar: accept tips/payments
- links: quick links to social profiles
- feedback: collect visitor feedback

FILE TYPES:
- note: text document with rich formatting
- case-study: portfolio piece with sections
- folder: container for organizing files
- image: photo or graphic
- link: external URL with preview
- embed: YouTube, Spotify, Figma and similar
- download: downloadable file
- cv: resume document

BASE TEMPLATES: portfolio (designers, artists, photographers), business (freelancers, consultants), writing (writers, bloggers), creative (multi-disciplinary makers), personal (link-in-bio), developer (projects, tech stack), agency (small teams)

TONES: professional, casual, creative, minimal, playful

Pick the closest template, 2-4 widgets, 1-3 folders and 3-6 notes, the right tone, and a short status message that fits their vibe."""

ONBOARDING_INTENT_SCHEMA = """{
  "userType": "their profession or type",
  "baseTemplate": "one of the base templates",
  "widgets": ["widget types"],
  "folders": ["folder names"],
  "notes": [
    { "title": "Note Title", "type": "note" },
    { "title": "Case Study Title", "type": "case-study" }
  ],
  "statusText": "their availability/status message",
  "tone": "one of the tones",
  "summary": "one line on what you're building for them"
}"""


def build_onboarding_intent_prompt(user_prompt: str) -> str:
    """Coarse workspace configuration for the onboarding flow."""
    return f"""{ONBOARDING_INTENT_GUIDE}

User prompt: "{user_prompt}"

Return ONLY valid JSON in this exact format:
{ONBOARDING_INTENT_SCHEMA}"""


def build_note_contents_prompt(user_type: str, tone: str, user_prompt: str, notes: list[tuple[str, str]]) -> str:
    """One JSON object mapping note titles to HTML, for notes and case studies only."""
    note_list = "\n".join(f"- {title} ({kind})" for title, kind in notes)
    return f"""You are a copywriter setting up a personal workspace. Write sample content for these notes that feels personal, not generic.

User type: {user_type}
Tone: {tone}
User's original description: "{user_prompt}"

Notes:
{note_list}

GUIDELINES:
- Write in first person
- Keep each note under 150 words
- Use [brackets] for things they should customize, like [your name] or [your city]
- Be specific to their profession
- Use only <h1>, <h2>, <p>, <ul>, <li>, <strong>, <em>

Return ONLY valid JSON where keys are note titles and values are HTML content:
{{
  "About Me": "<h1>Hey, I'm [Your Name]</h1><p>...</p>"
}}"""
