"""The shared viewer page that rendered cards and hoisted resources land in."""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..corpus.markup import MARKUP_PARSER
from ..templates import PageTemplates


class PageDocument:
    """
    Single page holding every rendered card of the selected deck.

    Hoisted stylesheets go to ``<head>``; hoisted external scripts go to
    the library region; inline scripts run once per deck render land in
    the deferred-script region, which is reset at every deck render.
    """

    def __init__(self) -> None:
        self.soup = BeautifulSoup(PageTemplates.PAGE_HTML, MARKUP_PARSER)
        self._by_id("viewer-style").string = PageTemplates.PAGE_CSS
        self._by_id("viewer-flip").string = PageTemplates.FLIP_JS
        self.executed_scripts: List[str] = []

    def _by_id(self, element_id: str) -> Tag:
        element = self.soup.find(id=element_id)
        if element is None:
            raise KeyError(f"Page skeleton has no #{element_id}")
        return element

    @property
    def head(self) -> Tag:
        return self.soup.head

    @property
    def cards_container(self) -> Tag:
        return self._by_id("cards-container")

    def new_tag(self, name: str, class_: Optional[str] = None, **attrs: str) -> Tag:
        tag = self.soup.new_tag(name, attrs=attrs)
        if class_:
            tag["class"] = class_.split()
        return tag

    def fragment(self, html: str) -> List:
        """Parse an HTML fragment into detached nodes ready to append."""
        return list(BeautifulSoup(html, MARKUP_PARSER).contents)

    def append_html(self, parent: Tag, html: str) -> None:
        for node in self.fragment(html):
            parent.append(node)

    # --- hoisted resources -------------------------------------------------

    def append_stylesheet(self, href: str) -> Tag:
        link = self.soup.new_tag("link", attrs={"rel": "stylesheet", "href": href})
        self.head.append(link)
        return link

    def append_script(
        self,
        src: str,
        defer: bool = False,
        is_async: bool = False,
        onload: Optional[str] = None
    ) -> Tag:
        attrs = {"src": src}
        if defer:
            attrs["defer"] = ""
        if is_async:
            attrs["async"] = ""
        if onload:
            attrs["onload"] = onload
        script = self.soup.new_tag("script", attrs=attrs)
        self._by_id("library-scripts").append(script)
        return script

    def run_script(self, content: str) -> Tag:
        script = self.soup.new_tag("script")
        script.string = content
        self._by_id("deferred-scripts").append(script)
        self.executed_scripts.append(content)
        return script

    def reset_scripts(self) -> None:
        self._by_id("deferred-scripts").clear()
        self.executed_scripts = []

    # --- display surface ---------------------------------------------------

    def set_title(self, name: str) -> None:
        self._by_id("deck-title").string = name
        self.soup.title.string = name

    def set_controls_visible(self, render_mode: str) -> None:
        controls = self._by_id("controls")
        controls["style"] = "display:block"
        self._by_id("render-mode").string = render_mode

    def show_message(self, html: str) -> None:
        """Replace the cards container content (loading, empty and error states)."""
        self.clear_cards()
        self.append_html(self.cards_container, html)

    def clear_cards(self) -> None:
        self.cards_container.clear()

    def append_card(self, card: Tag) -> None:
        self.cards_container.append(card)

    def render(self) -> str:
        return str(self.soup)
