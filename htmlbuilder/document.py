"""The <html> document root and the elements allowed in its <head>."""

from __future__ import annotations

from typing import Optional

from .element import Element


class Title(Element):
    """<title> of the document, required in <head>."""

    def __init__(self, content: str) -> None:
        super().__init__("title", content)


class Style(Element):
    """Inline CSS."""

    def __init__(self, content: str) -> None:
        super().__init__("style", content)


class Script(Element):
    """Inline Javascript, or a reference to a script file when ``src`` is given."""

    def __init__(self, src: Optional[str] = None, content: Optional[str] = None) -> None:
        super().__init__("script", content)
        if src is not None:
            self.set_attribute("src", src)


class Meta(Element):
    """<meta charset> or <meta name content>."""

    def __init__(
        self,
        charset: Optional[str] = None,
        *,
        name: Optional[str] = None,
        content: Optional[str] = None,
    ) -> None:
        super().__init__("meta")
        if charset is not None:
            self.set_attribute("charset", charset)
        elif name is not None and content is not None:
            self.set_attribute("name", name)
            self.set_attribute("content", content)
        else:
            raise ValueError("Meta needs either a charset or both a name and a content")


class Rel(Element):
    """<link> to an external resource such as a stylesheet."""

    def __init__(self, rel: str, url: str, type: Optional[str] = None) -> None:
        super().__init__("link")
        self.set_attribute("rel", rel)
        self.set_attribute("href", url)
        if type is not None:
            self.set_attribute("type", type)


class Base(Element):
    def __init__(self, url: str, target: Optional[str] = None) -> None:
        super().__init__("base")
        self.set_attribute("href", url)
        if target is not None:
            self.set_attribute("target", target)


class Head(Element):
    """<head>, first child of every document."""

    accepts = (Title, Style, Script, Meta, Rel, Base)

    def __init__(self) -> None:
        super().__init__("head")


class Body(Element):
    """<body>, second child of every document."""

    def __init__(self) -> None:
        super().__init__("body")


class Document(Element):
    """Root <html> element, created with its <head> and <body>.

    The two children are fixed: content goes into ``document.head`` or
    ``document.body``, and appending directly to the document raises
    :class:`~htmlbuilder.element.CompositionError`.
    """

    closed = True

    def __init__(self, title: Optional[str] = None) -> None:
        super().__init__("html")
        self._adopt(Head())
        self._adopt(Body())
        if title is not None:
            self.head.append(Title(title))

    @property
    def head(self) -> Head:
        return self.children[0]  # type: ignore[return-value]

    @property
    def body(self) -> Body:
        return self.children[1]  # type: ignore[return-value]


__all__ = ["Base", "Body", "Document", "Head", "Meta", "Rel", "Script", "Style", "Title"]
