"""Static page content: plain records rendered top to bottom."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class TextRun:
    """A stretch of paragraph text sharing one style; ``url`` makes it a link."""
    text: str
    url: Optional[str] = None
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class Project:
    name: str
    description: str
    partnerships: Optional[str] = None
    views: Optional[str] = None
    url: str = "#"

    @property
    def details(self) -> Tuple[str, ...]:
        return tuple(text for text in (self.partnerships, self.views) if text)


@dataclass(frozen=True, slots=True)
class Article:
    title: str
    publication: str
    url: str = "#"


@dataclass(frozen=True, slots=True)
class Social:
    platform: str
    username: str
    url: str = "#"


@dataclass(frozen=True, slots=True)
class NavLink:
    label: str
    url: str = "#"


@dataclass(frozen=True, slots=True)
class PortfolioContent:
    owner: str
    greeting: str
    bio: Tuple[Tuple[TextRun, ...], ...]
    projects: Tuple[Project, ...]
    extra_title: str
    extra_body: str
    articles: Tuple[Article, ...]
    contact_email: str
    socials: Tuple[Social, ...]
    nav: Tuple[NavLink, ...] = field(default_factory=tuple)
    footer: str = ""

    @property
    def contact_url(self) -> str:
        return f"mailto:{self.contact_email}"


PLACEHOLDER_URL = "https://example.com"

DEFAULT_CONTENT = PortfolioContent(
    owner="Ryan Manthy",
    greeting=(
        "Hey, \U0001F44B\n"
        "I'm a designer, engineer,\n"
        "and civic organizer\n"
        "who enjoys building cool stuff for\n"
        "governments, non-profits, and biologists"
    ),
    bio=(
        (
            TextRun("I'm in my last year studying "),
            TextRun("computer science", bold=True),
            TextRun(" and "),
            TextRun("biomedical engineering", bold=True),
            TextRun(
                " at Illinois Tech. Right now, I'm creating software to get out the vote in "
                "Pennsylvania and Arizona with "
            ),
            TextRun("New Voters", url=PLACEHOLDER_URL),
            TextRun(" and building "),
            TextRun("GovGoose", url=PLACEHOLDER_URL),
            TextRun(", a RAG Model for state and local government."),
        ),
        (
            TextRun("I've previously worked at the "),
            TextRun("Chan Zuckerberg Initiative", url=PLACEHOLDER_URL),
            TextRun(", "),
            TextRun("U.S. Department of Health and Human Services", url=PLACEHOLDER_URL),
            TextRun(", "),
            TextRun("Kaplan Institute", url=PLACEHOLDER_URL),
            TextRun(", and Dom's Kitchen & Market "),
            TextRun("(Closed in 2024)", italic=True),
            TextRun(". I am a "),
            TextRun("2022 Obama Chesky Voyager Scholar", bold=True),
            TextRun(" and 2024 Student Laureate for the "),
            TextRun("Abraham Lincoln Civic Engagement Award", bold=True),
            TextRun("."),
        ),
        (
            TextRun(
                "My experience has spanned design, software engineering, and business development in "
                "government, healthcare, and biotechnology. "
            ),
            TextRun("Available for Work Fall 2024", italic=True),
        ),
    ),
    projects=(
        Project(
            "Youth Civic Hub",
            "centralized civic information tool for NYC youth",
            partnerships="built in partnership with NYC Office of Public Engagement",
        ),
        Project("CELLxGENE Explorer", "conducted a post-launch usability test of visualization tool"),
        Project(
            "teen.vote",
            "tool to run voter registration drives and engage young people in civics",
            views="10k+ students engaged annually",
        ),
        Project("CancerX Data Sprint", "proposed data sprint to promote interoperability of oncology data"),
    ),
    extra_title="Another Text Option",
    extra_body=(
        "This section can be used for additional descriptions, skills, or any other "
        "information you'd like to highlight."
    ),
    articles=(
        Article("Article Title 1", "Publication Name 1"),
        Article("Article Title 2", "Publication Name 2"),
        Article("Article Title 3", "Publication Name 3"),
        Article("Article Title 4", "Publication Name 4"),
    ),
    contact_email="your.email@example.com",
    socials=(
        Social("Twitter", "@yourusername"),
        Social("GitHub", "yourusername"),
        Social("LinkedIn", "yourname"),
    ),
    nav=(NavLink("Contact"), NavLink("Resume")),
    footer="© 2024 Ryan Manthy. All rights reserved.",
)
