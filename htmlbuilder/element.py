"""Element tree for HTML documents and its indented serialization."""

from __future__ import annotations

import io
from typing import ClassVar, Dict, Iterator, List, Optional, TextIO, Tuple, Type, Union

# Spaces added per nesting level; read at render time.
INDENTATION = 2

AttributeValue = Union[str, int]


class CompositionError(TypeError):
    """A node was attached somewhere the tree structure does not allow."""


def _render_attrs(attrs: Dict[str, str]) -> str:
    parts: List[str] = []
    for name in sorted(attrs):
        value = attrs[name]
        # Empty values render name-only (checked, disabled, ...).
        parts.append(f' {name}="{value}"' if value else f" {name}")
    return "".join(parts)


class Element:
    """Any node of an HTML document.

    A named element owns its attributes and an ordered list of children. An
    element with an empty name is raw text: its content is written on its own
    line, without tags.

    Builder calls return the element itself so a whole subtree can be written
    as one expression::

        Div().cls("box").append(Paragraph("A")).append(Paragraph("B"))

    Attribute values and content are written verbatim. Escaping ``<``, ``>``,
    ``&`` and ``"`` is left to the caller.
    """

    # Child classes accepted by append(); empty means any element.
    accepts: ClassVar[Tuple[Type["Element"], ...]] = ()
    # Children are fixed at construction time.
    closed: ClassVar[bool] = False

    def __init__(self, name: str, content: Optional[str] = None) -> None:
        self.name = name
        self.content = content or ""
        self.attributes: Dict[str, str] = {}
        self.children: List[Element] = []
        self.force_closing_tag = False
        self.parent: Optional[Element] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, content={self.content!r}, "
            f"attributes={self.attributes!r}, children={len(self.children)})"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __lshift__(self, child: Union["Element", str]) -> "Element":
        return self.append(child)

    def set_attribute(self, name: str, value: AttributeValue) -> "Element":
        """Set (or overwrite) an attribute; non-negative integers are stored in decimal."""
        if not self.name:
            raise CompositionError(f"text node cannot carry attribute {name!r}")
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise TypeError(
                f"attribute {name!r} must be a str or an int, not {type(value).__name__}"
            )
        if isinstance(value, int) and value < 0:
            raise ValueError(f"attribute {name!r} must not be negative, got {value}")
        self.attributes[name] = str(value)
        return self

    def id(self, value: str) -> "Element":
        return self.set_attribute("id", value)

    def cls(self, value: str) -> "Element":
        return self.set_attribute("class", value)

    def title(self, value: str) -> "Element":
        return self.set_attribute("title", value)

    def style(self, value: str) -> "Element":
        return self.set_attribute("style", value)

    def append(self, child: Union["Element", str]) -> "Element":
        """Take ownership of ``child`` as the last child; strings become text nodes."""
        if isinstance(child, str):
            child = Text(child)
        if not isinstance(child, Element):
            raise TypeError(f"cannot append {type(child).__name__} to <{self.name}>")
        if self.closed:
            raise CompositionError(f"<{self.name}> does not accept new children")
        if self.accepts and not isinstance(child, self.accepts):
            allowed = ", ".join(kind.__name__ for kind in self.accepts)
            raise CompositionError(
                f"<{self.name}> only accepts {allowed}, not {type(child).__name__}"
            )
        self._adopt(child)
        return self

    def _adopt(self, child: "Element") -> None:
        if not self.name:
            raise CompositionError("text node cannot have children")
        if child.parent is not None:
            raise CompositionError(
                f"{type(child).__name__} already belongs to <{child.parent.name}>"
            )
        if any(node is child for node in self.ancestors(include_self=True)):
            raise CompositionError(f"cannot append <{child.name}> inside itself")
        child.parent = self
        self.children.append(child)

    def ancestors(self, include_self: bool = False) -> Iterator["Element"]:
        node = self if include_self else self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["Element"]:
        """Yield this element and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def render(self, stream: TextIO, indentation: int = 0) -> None:
        """Write the element and its subtree to ``stream``, starting at ``indentation`` spaces."""
        self._render_open(stream, indentation)
        self._render_content(stream, indentation)
        self._render_close(stream, indentation)

    def to_string(self) -> str:
        stream = io.StringIO()
        self.render(stream)
        return stream.getvalue()

    def _render_open(self, stream: TextIO, indentation: int) -> None:
        if not self.name:
            return
        stream.write(" " * indentation)
        stream.write(f"<{self.name}{_render_attrs(self.attributes)}")
        if self.content or self.force_closing_tag:
            stream.write(">")
        elif self.children:
            stream.write(">\n")
        else:
            stream.write("/>\n")

    def _render_content(self, stream: TextIO, indentation: int) -> None:
        if not self.name:
            stream.write(f"{' ' * indentation}{self.content}\n")
            return
        stream.write(self.content)
        for child in self.children:
            child.render(stream, indentation + INDENTATION)

    def _render_close(self, stream: TextIO, indentation: int) -> None:
        if not self.name:
            return
        if self.children:
            stream.write(" " * indentation)
        if self.content or self.children or self.force_closing_tag:
            stream.write(f"</{self.name}>\n")


class Text(Element):
    """Raw text placed between sibling elements."""

    def __init__(self, content: str) -> None:
        super().__init__("", content)


__all__ = ["INDENTATION", "AttributeValue", "CompositionError", "Element", "Text"]
