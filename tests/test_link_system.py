import webbrowser

from folio.components.card import CardBounds, PressCard
from folio.components.viewport import Viewport
from folio.events.bus import EVENT_LINK_OPENED, EVENT_MOUSE_PRESS, EventBus
from folio.systems.link_system import LinkSystem
from folio.ui.layout import PageLayout
from folio.world import create_world


def _setup(opener):
    bus = EventBus()
    world = create_world(bus, height=2000)
    LinkSystem(world, bus, opener=opener)
    viewport = next(v for _, v in world.get_component(Viewport))
    layout = next(l for _, l in world.get_component(PageLayout))
    return bus, world, viewport, layout


def test_clicking_press_card_opens_its_url():
    opened = []
    bus, world, viewport, layout = _setup(opened.append)
    events = []
    bus.subscribe(EVENT_LINK_OPENED, lambda sender, **kw: events.append(kw))
    entity, (card, bounds) = list(world.get_components(PressCard, CardBounds))[0]
    bus.emit(EVENT_MOUSE_PRESS, x=bounds.left + 5, y=viewport.to_screen_y(bounds.top + 5), button=1)
    assert opened == [card.url]
    assert events == [{"entity": entity, "url": card.url}]


def test_clicking_contact_opens_mail_link():
    opened = []
    bus, world, viewport, layout = _setup(opened.append)
    link = layout.section_links("contact")[0]
    bus.emit(EVENT_MOUSE_PRESS, x=link.bounds.left + 2, y=viewport.to_screen_y(link.bounds.top + 2), button=1)
    assert opened == ["mailto:your.email@example.com"]


def test_right_click_and_empty_space_do_nothing():
    opened = []
    bus, world, viewport, layout = _setup(opened.append)
    link = layout.section_links("contact")[0]
    bus.emit(EVENT_MOUSE_PRESS, x=link.bounds.left + 2, y=viewport.to_screen_y(link.bounds.top + 2), button=4)
    bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=None, y=1, button=1)
    assert opened == []


def test_opener_failure_is_contained():
    def _broken(url):
        raise webbrowser.Error("no browser")

    bus, world, viewport, layout = _setup(_broken)
    link = layout.section_links("socials")[0]
    bus.emit(EVENT_MOUSE_PRESS, x=link.bounds.left + 1, y=viewport.to_screen_y(link.bounds.top + 1), button=1)


def test_clicking_bio_link_opens_it():
    opened = []
    bus, world, viewport, layout = _setup(opened.append)
    events = []
    bus.subscribe(EVENT_LINK_OPENED, lambda sender, **kw: events.append(kw))
    link = next(link for link in layout.section_links("bio") if link.label == "GovGoose")
    bus.emit(EVENT_MOUSE_PRESS, x=link.bounds.left + 4, y=viewport.to_screen_y(link.bounds.top + 4), button=1)
    assert opened == ["https://example.com"]
    assert events == [{"entity": None, "url": "https://example.com"}]


def test_plain_bio_text_is_not_a_link():
    opened = []
    bus, world, viewport, layout = _setup(opened.append)
    span = next(span for span in layout.section_spans("bio") if span.bold)
    bus.emit(EVENT_MOUSE_PRESS, x=span.left + 2, y=viewport.to_screen_y(span.top + 2), button=1)
    assert opened == []
