"""Text-level, list and sectioning elements."""

from __future__ import annotations

from typing import Optional

from .element import Element


class Break(Element):
    """<br/>"""

    def __init__(self) -> None:
        super().__init__("br")


class Header1(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("h1", content)


class Header2(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("h2", content)


class Header3(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("h3", content)


class Bold(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("b", content)


class Italic(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("i", content)


class Strong(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("strong", content)


class Mark(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("mark", content)


class Paragraph(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("p", content)


class Div(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("div", content)


class Span(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("span", content)


class Link(Element):
    """<a href> hyperlink."""

    def __init__(self, content: str, url: str) -> None:
        super().__init__("a", content)
        self.set_attribute("href", url)


class Image(Element):
    """<img>; width and height are only written when positive."""

    def __init__(self, src: str, alt: str, width: int = 0, height: int = 0) -> None:
        super().__init__("img")
        self.set_attribute("src", src)
        self.set_attribute("alt", alt)
        if width > 0:
            self.set_attribute("width", width)
        if height > 0:
            self.set_attribute("height", height)


class Time(Element):
    def __init__(self, content: str, datetime: str) -> None:
        super().__init__("time", content)
        self.set_attribute("datetime", datetime)


class List(Element):
    """<ul>, or <ol> when ``ordered``; fill it with ListItem elements."""

    def __init__(self, ordered: bool = False) -> None:
        super().__init__("ol" if ordered else "ul")


class ListItem(Element):
    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("li", content)


class Header(Element):
    def __init__(self) -> None:
        super().__init__("header")


class Footer(Element):
    def __init__(self) -> None:
        super().__init__("footer")


class Section(Element):
    def __init__(self) -> None:
        super().__init__("section")


class Article(Element):
    def __init__(self) -> None:
        super().__init__("article")


class Nav(Element):
    def __init__(self) -> None:
        super().__init__("nav")


class Aside(Element):
    def __init__(self) -> None:
        super().__init__("aside")


class Main(Element):
    def __init__(self) -> None:
        super().__init__("main")


class Figure(Element):
    def __init__(self) -> None:
        super().__init__("figure")


class FigCaption(Element):
    def __init__(self, content: str) -> None:
        super().__init__("figcaption", content)


class Details(Element):
    """<details> section, opened by default when ``open`` is given.

    Pair it with a Summary for the visible heading::

        <details>
          <summary>Copyright 2017.</summary>
          <p>All rights reserved.</p>
        </details>
    """

    def __init__(self, open: Optional[str] = None) -> None:
        super().__init__("details")
        if open is not None:
            self.set_attribute("open", open)


class Summary(Element):
    def __init__(self, content: str) -> None:
        super().__init__("summary", content)


__all__ = [
    "Article",
    "Aside",
    "Bold",
    "Break",
    "Details",
    "Div",
    "FigCaption",
    "Figure",
    "Footer",
    "Header",
    "Header1",
    "Header2",
    "Header3",
    "Image",
    "Italic",
    "Link",
    "List",
    "ListItem",
    "Main",
    "Mark",
    "Nav",
    "Paragraph",
    "Section",
    "Span",
    "Strong",
    "Summary",
    "Time",
]
