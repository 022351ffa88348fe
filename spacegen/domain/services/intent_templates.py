"""Template intents and note content used when intent parsing or note writing fails."""

import html
import re
from dataclasses import dataclass
from types import MappingProxyType

from spacegen.domain.entities.intent import IntentNote, IntentOutline, ParsedIntent

DEFAULT_TEMPLATE = "portfolio"

# Scored in this order; a later template must strictly beat the best score so far
TEMPLATE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("portfolio", (
        "design", "designer", "artist", "creative", "portfolio", "showcase", "work", "projects",
        "visual", "ui", "ux", "graphic", "illustration", "photography", "photographer", "motion",
        "animation", "3d", "art",
    )),
    ("business", (
        "freelance", "consultant", "business", "services", "client", "booking", "schedule",
        "professional", "agency", "studio", "hire",
    )),
    ("writing", (
        "writer", "writing", "blog", "blogger", "newsletter", "author", "content", "articles",
        "journalist", "copywriter", "editor",
    )),
    ("creative", ("multi", "mixed", "experimental", "interdisciplinary", "maker", "creator", "generalist")),
    ("personal", ("personal", "bio", "links", "social", "about me", "profile", "influencer")),
    ("developer", (
        "developer", "dev", "engineer", "programmer", "coding", "software", "tech", "code", "github",
        "open source", "frontend", "backend", "fullstack",
    )),
    ("agency", ("agency", "team", "company", "firm", "collective", "group")),
)


@dataclass(frozen=True)
class TemplateConfig:
    widgets: tuple[str, ...]
    folders: tuple[str, ...]
    notes: tuple[tuple[str, str], ...]  # (title, file type)
    status_text: str
    tone: str


TEMPLATE_CONFIGS = MappingProxyType(
    {
        "portfolio": TemplateConfig(
            widgets=("status", "contact", "links"),
            folders=("Projects", "Archive"),
            notes=(("About Me", "note"), ("Featured Project", "case-study"), ("Services", "note")),
            status_text="Available for projects",
            tone="creative",
        ),
        "business": TemplateConfig(
            widgets=("status", "contact", "book"),
            folders=("Client Work",),
            notes=(("About", "note"), ("Services", "note"), ("Process", "note")),
            status_text="Open for new clients",
            tone="professional",
        ),
        "writing": TemplateConfig(
            widgets=("status", "links", "feedback"),
            folders=("Essays", "Drafts"),
            notes=(("About Me", "note"), ("Latest Post", "note"), ("Newsletter", "note")),
            status_text="Writing new things",
            tone="casual",
        ),
        "creative": TemplateConfig(
            widgets=("status", "contact", "tipjar"),
            folders=("Experiments", "Collaborations"),
            notes=(("Hello", "note"), ("Current Project", "case-study"), ("Influences", "note")),
            status_text="Making things",
            tone="playful",
        ),
        "personal": TemplateConfig(
            widgets=("status", "links", "clock"),
            folders=(),
            notes=(("Hey there", "note"), ("What I'm up to", "note")),
            status_text="Doing my thing",
            tone="casual",
        ),
        "developer": TemplateConfig(
            widgets=("status", "links", "contact"),
            folders=("Projects", "Open Source"),
            notes=(("About", "note"), ("Tech Stack", "note"), ("Featured Project", "case-study")),
            status_text="Building cool stuff",
            tone="minimal",
        ),
        "agency": TemplateConfig(
            widgets=("status", "contact", "book"),
            folders=("Case Studies", "Team"),
            notes=(
                ("Who We Are", "note"),
                ("Services", "note"),
                ("Our Process", "note"),
                ("Client Work", "case-study"),
            ),
            status_text="Taking on new projects",
            tone="professional",
        ),
    }
)

CONTENT_TEMPLATES = MappingProxyType(
    {
        "portfolio": MappingProxyType(
            {
                "About Me": """<h1>Hey, I'm [Your Name]</h1>
<p>I'm a designer who believes great work comes from genuine curiosity and relentless iteration. Currently based in [City], I spend my days crafting digital experiences that feel both intuitive and delightful.</p>
<p>When I'm not pushing pixels, you'll find me [your hobby] or exploring [your interest].</p>
<p><strong>Let's make something together.</strong></p>""",
                "Featured Project": """<h1>[Project Name]</h1>
<h2>Overview</h2>
<p>A brief description of what this project is and why it matters. What problem did you solve?</p>
<h2>The Challenge</h2>
<p>Describe the constraints, goals, and context that shaped your approach.</p>
<h2>The Solution</h2>
<p>Walk through your process and the key decisions you made along the way.</p>
<h2>Results</h2>
<p>Share the impact: metrics, feedback, or outcomes that demonstrate success.</p>""",
                "Services": """<h2>What I Do</h2>
<ul>
<li><strong>Brand Identity</strong>: logos, visual systems, guidelines</li>
<li><strong>UI/UX Design</strong>: interfaces that work beautifully</li>
<li><strong>Creative Direction</strong>: vision and strategy for projects</li>
</ul>
<p>Every project starts with understanding your goals. <strong>Let's talk.</strong></p>""",
            }
        ),
        "business": MappingProxyType(
            {
                "About": """<h1>Hello, I'm [Your Name]</h1>
<p>I help businesses [your value proposition]. With [X] years of experience in [your field], I've worked with companies like [notable clients] to achieve [outcomes].</p>
<p>My approach combines strategic thinking with hands-on execution to deliver results that matter.</p>""",
                "Services": """<h2>How I Can Help</h2>
<ul>
<li><strong>[Service 1]</strong>: brief description of what this includes</li>
<li><strong>[Service 2]</strong>: brief description of what this includes</li>
<li><strong>[Service 3]</strong>: brief description of what this includes</li>
</ul>
<h2>Pricing</h2>
<p>Projects typically start at $[X]. Book a call to discuss your needs.</p>""",
                "Process": """<h2>How We'll Work Together</h2>
<ol>
<li><strong>Discovery</strong>: we start with a conversation to understand your goals</li>
<li><strong>Strategy</strong>: I develop a clear plan tailored to your needs</li>
<li><strong>Execution</strong>: we work together to bring it to life</li>
<li><strong>Refinement</strong>: iterate based on feedback and results</li>
</ol>""",
            }
        ),
        "writing": MappingProxyType(
            {
                "About Me": """<h1>Hi, I'm [Your Name]</h1>
<p>I write about [your topics]. My work has appeared in [publications] and reached [audience size] readers.</p>
<p>I believe [your writing philosophy]. Every piece I write aims to [your goal].</p>
<p>Subscribe to get new essays in your inbox.</p>""",
                "Latest Post": """<h1>[Post Title]</h1>
<p><em>Published [date]</em></p>
<p>Your opening hook goes here. Make it count, this is what pulls readers in.</p>
<h2>The main idea</h2>
<p>Develop your argument or story here. Use examples, anecdotes, and evidence to support your point.</p>
<h2>What this means</h2>
<p>Connect the dots. Help readers understand why this matters to them.</p>
<p><em>Thanks for reading. Hit reply if this resonated.</em></p>""",
                "Newsletter": """<h1>The [Newsletter Name]</h1>
<p>Every [frequency], I share [what you share].</p>
<p>Join [X] readers who get [benefit] straight to their inbox.</p>
<ul>
<li>No spam, ever</li>
<li>Unsubscribe anytime</li>
<li>Free forever</li>
</ul>""",
            }
        ),
        "creative": MappingProxyType(
            {
                "Hello": """<h1>Hey</h1>
<p>I'm [Your Name]. I make things.</p>
<p>Sometimes they're [type of work]. Other times they're [other type]. Mostly I'm just following my curiosity and seeing where it leads.</p>
<p>This space is where I share what I'm working on, thinking about, and inspired by.</p>
<p>Come say hi: [your email]</p>""",
                "Current Project": """<h1>[Project Name]</h1>
<p>Right now I'm exploring [concept/medium/idea].</p>
<h2>The spark</h2>
<p>What got you started on this? What question are you trying to answer?</p>
<h2>The process</h2>
<p>How are you approaching it? What are you learning?</p>
<h2>What's next</h2>
<p>Where is this going? What comes after?</p>""",
                "Influences": """<h1>Things I Love</h1>
<p>A running list of people, places, and things that shape how I see and make.</p>
<ul>
<li><strong>[Person/Thing]</strong>: why they inspire you</li>
<li><strong>[Person/Thing]</strong>: why they inspire you</li>
<li><strong>[Person/Thing]</strong>: why they inspire you</li>
</ul>
<p><em>Last updated: [date]</em></p>""",
            }
        ),
        "personal": MappingProxyType(
            {
                "Hey there": """<h1>Hi, I'm [Your Name]</h1>
<p>Welcome to my corner of the internet.</p>
<p>I'm a [what you do] based in [location]. I'm passionate about [your interests] and always up for [what you enjoy].</p>
<p>Connect with me on [platform] or drop me a line at [email].</p>""",
                "What I'm up to": """<h1>Now</h1>
<p><em>Updated [date]</em></p>
<h2>Working on</h2>
<p>[Current projects or focus areas]</p>
<h2>Reading</h2>
<p>[Books, articles, or content you're consuming]</p>
<h2>Excited about</h2>
<p>[Things you're looking forward to]</p>""",
            }
        ),
        "developer": MappingProxyType(
            {
                "About": """<h1>Hey, I'm [Your Name]</h1>
<p>I'm a [role] who loves building [what you build]. Currently [working at / freelancing / building].</p>
<p>I'm passionate about [your technical interests] and believe in [your philosophy on code/building].</p>
<p>Check out my work on <a href="https://github.com/yourusername">GitHub</a> or reach out to chat.</p>""",
                "Tech Stack": """<h2>Tools I Use</h2>
<ul>
<li><strong>Languages</strong>: TypeScript, Python, [others]</li>
<li><strong>Frontend</strong>: React, Next.js, [others]</li>
<li><strong>Backend</strong>: Node.js, [others]</li>
<li><strong>Database</strong>: PostgreSQL, [others]</li>
<li><strong>Infrastructure</strong>: Vercel, AWS, [others]</li>
</ul>
<p>Always learning. Currently exploring [new tech].</p>""",
                "Featured Project": """<h1>[Project Name]</h1>
<p><a href="https://github.com/you/project">GitHub</a> · <a href="https://project.com">Live Demo</a></p>
<h2>What it does</h2>
<p>Brief explanation of the project and its purpose.</p>
<h2>How it works</h2>
<p>Technical overview of the architecture and key decisions.</p>
<h2>Lessons learned</h2>
<p>What you discovered building this.</p>""",
            }
        ),
        "agency": MappingProxyType(
            {
                "Who We Are": """<h1>[Agency Name]</h1>
<p>We're a [type] studio helping [clients] achieve [outcomes].</p>
<p>Founded in [year], we've partnered with brands like [notable clients] to create work that [impact].</p>
<p>Our team brings together expertise in [disciplines] to deliver results that matter.</p>""",
                "Services": """<h2>What We Do</h2>
<ul>
<li><strong>[Service 1]</strong>: detailed description</li>
<li><strong>[Service 2]</strong>: detailed description</li>
<li><strong>[Service 3]</strong>: detailed description</li>
</ul>
<h2>Engagement Models</h2>
<p>We work on projects, retainers, or embedded partnerships. Let's find the right fit.</p>""",
                "Our Process": """<h2>How We Work</h2>
<ol>
<li><strong>Discover</strong>: deep dive into your business, users, and goals</li>
<li><strong>Define</strong>: align on strategy, scope, and success metrics</li>
<li><strong>Design</strong>: create and iterate on solutions</li>
<li><strong>Deliver</strong>: launch, measure, and optimize</li>
</ol>""",
                "Client Work": """<h1>[Client Name] Case Study</h1>
<h2>The Brief</h2>
<p>What the client needed and why.</p>
<h2>Our Approach</h2>
<p>How we tackled the challenge.</p>
<h2>The Work</h2>
<p>What we delivered and key highlights.</p>
<h2>Results</h2>
<p>Impact and outcomes achieved.</p>""",
            }
        ),
    }
)

_USER_TYPE_PATTERNS = (
    re.compile(r"i(?:'m| am) (?:a |an )?([a-z\s]+?)(?:\.|,|who|based|and|working)", re.IGNORECASE),
    re.compile(r"([a-z\s]+?) (?:looking|wanting|need)", re.IGNORECASE),
    re.compile(r"^([a-z\s]+?) here", re.IGNORECASE),
)
_PUNCTUATION_RE = re.compile(r"[.,!?]")


def detect_template(text: str) -> str:
    """Template whose keywords appear most often in the text (portfolio on a tie at zero)."""
    lowered = text.lower()
    best, best_score = DEFAULT_TEMPLATE, 0
    for template, keywords in TEMPLATE_KEYWORDS:
        score = sum(1 for k in keywords if k in lowered)
        if score > best_score:
            best, best_score = template, score
    return best


def extract_user_type(text: str) -> str:
    for pattern in _USER_TYPE_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return " ".join(_PUNCTUATION_RE.sub("", text).split(" ")[:4])


def fallback_intent(prompt: str) -> ParsedIntent:
    """Intent built from keyword heuristics alone."""
    template = detect_template(prompt)
    config = TEMPLATE_CONFIGS[template]
    user_type = extract_user_type(prompt)
    return ParsedIntent(
        user_type=user_type,
        base_template=template,
        widgets=config.widgets,
        folders=config.folders,
        notes=tuple(IntentNote(title=title, type=kind) for title, kind in config.notes),
        status_text=config.status_text,
        tone=config.tone,
        summary=f"Setting up a {template} space for {user_type}",
    )


def placeholder_note(title: str) -> str:
    """Content for a note the model skipped."""
    return f"<h1>{html.escape(title)}</h1><p>Add your content here.</p>"


def fallback_content(intent: IntentOutline) -> dict[str, str]:
    """Template content per note title; unknown titles get a generic stub."""
    templates = CONTENT_TEMPLATES.get(intent.base_template, CONTENT_TEMPLATES[DEFAULT_TEMPLATE])
    content: dict[str, str] = {}
    for note in intent.notes:
        content[note.title] = templates.get(note.title) or (
            f"<h1>{html.escape(note.title)}</h1>\n"
            "<p>Add your content here. This is your space to share your story.</p>"
        )
    return content

