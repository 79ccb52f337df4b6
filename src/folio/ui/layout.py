from __future__ import annotations

import re
import textwrap
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from folio.components.card import CardBounds
from folio.constants import (
    CHAR_WIDTH,
    CONTENT_MAX_WIDTH,
    HEADING_HEIGHT,
    LINE_HEIGHT,
    PAGE_MARGIN_TOP,
    PAGE_MARGIN_X,
    PORTRAIT_SIZE,
    PRESS_CARD_HEIGHT,
    PRESS_GRID_BREAKPOINT,
    PRESS_GRID_GAP,
    PROJECT_NAME_WIDTH,
    PROJECT_ROW_PADDING,
    SECTION_GAP,
    SOCIAL_LABEL_WIDTH,
)
from folio.content import PortfolioContent, TextRun

SECTION_ORDER = ("header", "bio", "projects", "extra", "press", "contact", "socials", "footer")
GREETING_LINE_HEIGHT = 34.0


@dataclass(slots=True)
class TextBlock:
    """Wrapped text anchored at its top-left corner in page space."""
    section: str
    left: float
    top: float
    lines: Tuple[str, ...]
    font_size: int = 14
    line_height: float = LINE_HEIGHT
    bold: bool = False
    muted: bool = False

    @property
    def height(self) -> float:
        return len(self.lines) * self.line_height


@dataclass(slots=True)
class TextSpan:
    """One styled piece of a paragraph on a single line."""
    section: str
    left: float
    top: float
    text: str
    bold: bool = False
    italic: bool = False
    url: Optional[str] = None
    font_size: int = 14

    @property
    def width(self) -> float:
        return text_width(self.text)


@dataclass(slots=True)
class LinkBox:
    section: str
    label: str
    url: str
    bounds: CardBounds
    underline: bool = False


@dataclass
class PageLayout:
    """Page-space geometry for one window width (top-left origin, y down)."""
    window_width: float
    column_left: float
    column_width: float
    content_height: float = 0.0
    sections: Dict[str, CardBounds] = field(default_factory=dict)
    texts: List[TextBlock] = field(default_factory=list)
    spans: List[TextSpan] = field(default_factory=list)
    links: List[LinkBox] = field(default_factory=list)
    portrait: CardBounds = field(default_factory=CardBounds)
    greeting_left: float = 0.0
    greeting_top: float = 0.0
    greeting_width: float = 0.0
    rule_y: float = 0.0
    project_rows: List[CardBounds] = field(default_factory=list)
    press_cards: List[CardBounds] = field(default_factory=list)
    social_leaders: List[Tuple[float, float, float]] = field(default_factory=list)

    def section_texts(self, name: str) -> List[TextBlock]:
        return [block for block in self.texts if block.section == name]

    def section_spans(self, name: str) -> List[TextSpan]:
        return [span for span in self.spans if span.section == name]

    def section_links(self, name: str) -> List[LinkBox]:
        return [link for link in self.links if link.section == name]


def wrap_text(text: str, width: float) -> Tuple[str, ...]:
    """Wrap ``text`` to roughly ``width`` pixels using the fixed glyph estimate."""
    max_chars = max(8, int(width // CHAR_WIDTH))
    lines: list[str] = []
    for segment in text.split("\n"):
        stripped = segment.strip()
        if not stripped:
            lines.append("")
            continue
        lines.extend(textwrap.wrap(stripped, width=max_chars))
    return tuple(lines)


def text_width(text: str) -> float:
    return len(text) * CHAR_WIDTH


def flow_runs(
    section: str, runs: Sequence[TextRun], left: float, top: float, width: float, line_height: float = LINE_HEIGHT
) -> tuple[List[TextSpan], float]:
    """Word-wrap styled runs into per-line spans; returns the spans and the height used.

    A word that directly follows the previous run (``", a"`` after a link) is
    never moved to a new line on its own, so punctuation stays attached.
    """
    max_chars = max(8, int(width // CHAR_WIDTH))
    spans: List[TextSpan] = []
    line: list[list] = []  # [run, start column, text]
    row = 0
    col = 0
    after_space = True

    def flush() -> None:
        for run, start, text in line:
            stripped = text.strip()
            if not stripped:
                continue
            lead = len(text) - len(text.lstrip())
            spans.append(
                TextSpan(
                    section,
                    left + (start + lead) * CHAR_WIDTH,
                    top + row * line_height,
                    stripped,
                    bold=run.bold,
                    italic=run.italic,
                    url=run.url,
                )
            )
        line.clear()

    for run in runs:
        for token in re.findall(r"\s+|\S+", run.text):
            if token.isspace():
                after_space = True
                if col == 0:
                    continue
                token = " "
            else:
                if after_space and col > 0 and col + len(token) > max_chars:
                    flush()
                    row += 1
                    col = 0
                after_space = False
            if line and line[-1][0] is run:
                line[-1][2] += token
            else:
                line.append([run, col, token])
            col += len(token)
    if line:
        flush()
        row += 1
    return spans, row * line_height


def press_grid_columns(window_width: float) -> int:
    return 2 if window_width >= PRESS_GRID_BREAKPOINT else 1


def compute_page_layout(content: PortfolioContent, window_width: float) -> PageLayout:
    """Lay the page out as a single centered column."""
    column_width = max(120.0, min(float(CONTENT_MAX_WIDTH), window_width - 2 * PAGE_MARGIN_X))
    left = max(PAGE_MARGIN_X, (window_width - column_width) / 2)
    layout = PageLayout(window_width=window_width, column_left=left, column_width=column_width)
    y = PAGE_MARGIN_TOP

    # Header: name on the left, nav links flush right.
    top = y
    layout.texts.append(TextBlock("header", left, y, (content.owner,), font_size=22, line_height=HEADING_HEIGHT, bold=True))
    nav_right = left + column_width
    for nav in reversed(content.nav):
        label_w = text_width(nav.label)
        nav_right -= label_w
        layout.links.append(LinkBox("header", nav.label, nav.url, CardBounds(nav_right, y + 8, label_w, LINE_HEIGHT)))
        nav_right -= 16
    y += HEADING_HEIGHT
    layout.sections["header"] = CardBounds(left, top, column_width, y - top)
    y += SECTION_GAP

    # Bio: portrait with the typed greeting beside it, then paragraphs.
    top = y
    layout.portrait = CardBounds(left, y, PORTRAIT_SIZE, PORTRAIT_SIZE)
    layout.greeting_left = left + PORTRAIT_SIZE + 16
    layout.greeting_top = y
    layout.greeting_width = max(0.0, column_width - PORTRAIT_SIZE - 16)
    greeting_lines = len(content.greeting.split("\n"))
    y += max(PORTRAIT_SIZE, greeting_lines * GREETING_LINE_HEIGHT) + 20
    for paragraph in content.bio:
        spans, height = flow_runs("bio", paragraph, left, y, column_width)
        layout.spans.extend(spans)
        for span in spans:
            if span.url:
                bounds = CardBounds(span.left, span.top, span.width, LINE_HEIGHT)
                layout.links.append(LinkBox("bio", span.text, span.url, bounds, underline=True))
        y += height + LINE_HEIGHT
    layout.sections["bio"] = CardBounds(left, top, column_width, y - top)
    layout.rule_y = y + SECTION_GAP / 2
    y += SECTION_GAP

    # Projects: linked name column plus description and optional details.
    top = y
    y = _heading(layout, "projects", "Projects and initiatives:", y)
    desc_left = left + PROJECT_NAME_WIDTH
    desc_width = max(80.0, column_width - PROJECT_NAME_WIDTH)
    for project in content.projects:
        row_top = y
        text_top = y + PROJECT_ROW_PADDING
        layout.links.append(
            LinkBox(
                "projects",
                project.name,
                project.url,
                CardBounds(left + PROJECT_ROW_PADDING, text_top, PROJECT_NAME_WIDTH - 2 * PROJECT_ROW_PADDING, LINE_HEIGHT),
            )
        )
        block = TextBlock("projects", desc_left, text_top, wrap_text(project.description, desc_width))
        layout.texts.append(block)
        row_bottom = text_top + block.height
        for detail in project.details:
            detail_block = TextBlock(
                "projects", desc_left, row_bottom + 4, wrap_text(detail, desc_width), font_size=12, line_height=18, muted=True
            )
            layout.texts.append(detail_block)
            row_bottom = detail_block.top + detail_block.height
        row_end = max(row_bottom, text_top + LINE_HEIGHT) + PROJECT_ROW_PADDING
        layout.project_rows.append(CardBounds(left, row_top, column_width, row_end - row_top))
        y = row_end + 16
    layout.sections["projects"] = CardBounds(left, top, column_width, y - top)
    y += SECTION_GAP

    top = y
    y = _heading(layout, "extra", content.extra_title, y)
    block = TextBlock("extra", left, y, wrap_text(content.extra_body, column_width))
    layout.texts.append(block)
    y += block.height
    layout.sections["extra"] = CardBounds(left, top, column_width, y - top)
    y += SECTION_GAP

    # Press grid.
    top = y
    y = _heading(layout, "press", "Featured Press", y)
    columns = press_grid_columns(window_width)
    card_width = (column_width - PRESS_GRID_GAP * (columns - 1)) / columns
    for index in range(len(content.articles)):
        row, col = divmod(index, columns)
        bounds = CardBounds(
            left + col * (card_width + PRESS_GRID_GAP),
            y + row * (PRESS_CARD_HEIGHT + PRESS_GRID_GAP),
            card_width,
            PRESS_CARD_HEIGHT,
        )
        layout.press_cards.append(bounds)
    rows = (len(content.articles) + columns - 1) // columns
    if rows:
        y += rows * PRESS_CARD_HEIGHT + (rows - 1) * PRESS_GRID_GAP
    layout.sections["press"] = CardBounds(left, top, column_width, y - top)
    y += SECTION_GAP

    # Contact line with the mail link after the lead-in.
    top = y
    y = _heading(layout, "contact", "Get in Touch", y)
    lead = "Feel free to reach out to me at"
    layout.texts.append(TextBlock("contact", left, y, (lead,)))
    email_left = left + text_width(lead + " ")
    layout.links.append(
        LinkBox("contact", content.contact_email, content.contact_url, CardBounds(email_left, y, text_width(content.contact_email), LINE_HEIGHT))
    )
    y += LINE_HEIGHT
    layout.sections["contact"] = CardBounds(left, top, column_width, y - top)
    y += SECTION_GAP

    # Socials: platform, dotted leader, handle link on the right.
    top = y
    y = _heading(layout, "socials", "Socials", y)
    for social in content.socials:
        layout.texts.append(TextBlock("socials", left, y, (social.platform,)))
        handle_w = text_width(social.username)
        handle_left = left + column_width - handle_w
        layout.links.append(LinkBox("socials", social.username, social.url, CardBounds(handle_left, y, handle_w, LINE_HEIGHT)))
        layout.social_leaders.append((left + SOCIAL_LABEL_WIDTH, handle_left - 8, y + LINE_HEIGHT - 4))
        y += LINE_HEIGHT + 8
    layout.sections["socials"] = CardBounds(left, top, column_width, y - top)
    y += SECTION_GAP

    top = y
    if content.footer:
        layout.texts.append(
            TextBlock("footer", left + (column_width - text_width(content.footer)) / 2, y, (content.footer,), muted=True)
        )
        y += LINE_HEIGHT
    layout.sections["footer"] = CardBounds(left, top, column_width, y - top)
    layout.content_height = y + PAGE_MARGIN_TOP
    return layout


def _heading(layout: PageLayout, section: str, title: str, y: float) -> float:
    layout.texts.append(TextBlock(section, layout.column_left, y, (title,), font_size=18, line_height=HEADING_HEIGHT, bold=True))
    return y + HEADING_HEIGHT
