# ============================================================================
# HOVER REVEAL
# ============================================================================
HOVER_REVEAL_DURATION_MS = 300.0
WAVE_POINT_COUNT = 12
# Per-point vertical rate range; spread gives the ragged top edge.
WAVE_RATE_MIN = 0.8
WAVE_RATE_MAX = 1.2
# Line segments used when flattening one quadratic curve.
CURVE_SEGMENTS = 8

# Press card fill colors, picked by card index.
CARD_PALETTE = (
    (255, 214, 165),  # #FFD6A5
    (202, 255, 191),  # #CAFFBF
    (155, 246, 255),  # #9BF6FF
    (189, 178, 255),  # #BDB2FF
)


# ============================================================================
# TEXT EFFECTS & PAGE REVEAL
# ============================================================================
TYPING_INTERVAL = 0.05  # seconds per revealed character
SECTION_REVEAL_DURATION = 1.0
SECTION_REVEAL_OFFSET = 32.0  # px the section slides in from
# Staggered delays (seconds) in page order: header, bio, projects, extra, press, contact, socials, footer.
SECTION_REVEAL_DELAYS = (0.0, 0.3, 0.5, 0.7, 0.9, 1.1, 1.3, 1.5)


# ============================================================================
# WINDOW & LAYOUT
# ============================================================================
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 760
WINDOW_TITLE = "Portfolio"
CONTENT_MAX_WIDTH = 750
PAGE_MARGIN_X = 20.0
PAGE_MARGIN_TOP = 40.0
SECTION_GAP = 60.0
HEADING_HEIGHT = 40.0
LINE_HEIGHT = 22.0
CHAR_WIDTH = 8.0  # approximate glyph advance used to wrap text for layout
PORTRAIT_SIZE = 160.0
PROJECT_NAME_WIDTH = 220.0
PROJECT_ROW_PADDING = 10.0
PRESS_CARD_HEIGHT = 96.0
PRESS_GRID_GAP = 24.0
# Below this window width the press grid collapses to one column.
PRESS_GRID_BREAKPOINT = 640
SOCIAL_LABEL_WIDTH = 100.0
SCROLL_STEP = 40.0


# ============================================================================
# COLORS
# ============================================================================
PAGE_BACKGROUND = (255, 249, 244)  # #FFF9F4
TEXT_COLOR = (17, 17, 17)
MUTED_TEXT_COLOR = (75, 85, 99)
RULE_COLOR = (209, 213, 219)
LINK_COLOR = (37, 99, 235)
CARD_BORDER_COLOR = (229, 231, 235)
HOVER_BACKGROUND = (243, 244, 246)  # gray-100 behind hovered rows and cards
PORTRAIT_COLOR = (226, 220, 212)
