"""Whole-page output: building a Document from a PageSpec and rendering it."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, List, TextIO, Type, Union

import yaml

from .document import Base, Document, Meta, Rel, Script, Style, Title
from .element import Element, Text
from .models import NodeSpec, PageSpec
from .tables import Col, ColHeader, Row, Table

DOCTYPE = "<!DOCTYPE html>"

MARKUP_CHARACTERS = '<>&"'

# Tags built with their gated flavor so composition rules also hold for page files.
_CONTAINERS: Dict[str, Type[Element]] = {"table": Table, "tr": Row}
_CELLS: Dict[str, Type[Element]] = {"td": Col, "th": ColHeader}

# Element content that is code rather than text.
_VERBATIM_TAGS = frozenset({"script", "style"})

# Browsers ignore the self-closing slash on these and swallow the rest of the page.
_NEVER_SELF_CLOSED = frozenset({"script"})


def load_page_spec(path: Path) -> PageSpec:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return PageSpec.model_validate(data)


def node_from_spec(spec: Union[NodeSpec, str]) -> Element:
    if isinstance(spec, str):
        return Text(spec)

    if spec.tag in _CONTAINERS:
        element = _CONTAINERS[spec.tag]()
        if spec.text:
            # Rejected by the container, with the list of allowed children.
            element.append(spec.text)
    elif spec.tag in _CELLS:
        element = _CELLS[spec.tag](spec.text)
    else:
        element = Element(spec.tag, spec.text)

    for name, value in spec.attrs.items():
        element.set_attribute(name, value)
    if spec.force_closing_tag or spec.tag in _NEVER_SELF_CLOSED:
        element.force_closing_tag = True
    for child in spec.children:
        element.append(node_from_spec(child))
    return element


def build_document(spec: PageSpec) -> Document:
    """Build the element tree for a page; raises CompositionError on misplaced nodes."""
    document = Document()
    if spec.lang:
        document.set_attribute("lang", spec.lang)

    head = document.head
    if spec.head.charset:
        head.append(Meta(charset=spec.head.charset))
    for meta in spec.head.meta:
        head.append(Meta(name=meta.name, content=meta.content))
    if spec.head.title is not None:
        head.append(Title(spec.head.title))
    if spec.head.base is not None:
        head.append(Base(spec.head.base.href, spec.head.base.target))
    for href in spec.head.stylesheets:
        head.append(Rel("stylesheet", href, "text/css"))
    for src in spec.head.scripts:
        script = Script(src)
        script.force_closing_tag = True
        head.append(script)
    if spec.head.style:
        head.append(Style(spec.head.style))

    for node in spec.body:
        document.body.append(node_from_spec(node))
    return document


def render_page(document: Document, stream: TextIO, doctype: bool = True) -> None:
    if doctype:
        stream.write(DOCTYPE + "\n")
    document.render(stream)


def page_to_string(document: Document, doctype: bool = True) -> str:
    stream = io.StringIO()
    render_page(document, stream, doctype=doctype)
    return stream.getvalue()


def _describe(element: Element) -> str:
    names = [node.name or "#text" for node in element.ancestors(include_self=True)]
    return " > ".join(reversed(names))


def find_unescaped(root: Element) -> List[str]:
    """List strings in the tree that contain markup characters.

    Rendering writes every value verbatim, so each hit is a place where the
    output may not be well-formed.
    """
    problems: List[str] = []
    for element in root.walk():
        for name in sorted(element.attributes):
            value = element.attributes[name]
            if any(char in value for char in MARKUP_CHARACTERS):
                problems.append(f"{_describe(element)}: attribute {name}={value!r} is not escaped")
        verbatim = element.name in _VERBATIM_TAGS or (
            element.parent is not None and element.parent.name in _VERBATIM_TAGS
        )
        if element.content and not verbatim:
            if any(char in element.content for char in MARKUP_CHARACTERS):
                problems.append(f"{_describe(element)}: content {element.content!r} is not escaped")
    return problems


__all__ = [
    "DOCTYPE",
    "build_document",
    "find_unescaped",
    "load_page_spec",
    "node_from_spec",
    "page_to_string",
    "render_page",
]
