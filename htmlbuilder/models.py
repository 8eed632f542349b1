"""Pydantic models describing a page declaratively."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class NodeSpec(BaseModel):
    """One element of the page body.

    YAML numbers in ``text`` and ``children`` are written as text, so a
    table cell can simply be ``text: 42``.
    """

    tag: str = Field(..., min_length=1, description="Element name (e.g., div, p, table).")
    text: Optional[str] = Field(
        None, description="Content written right after the opening tag."
    )
    attrs: Dict[str, Union[StrictInt, str]] = Field(
        default_factory=dict,
        description="Attributes; an empty string writes a name-only attribute.",
    )
    children: List[Union[str, "NodeSpec"]] = Field(
        default_factory=list,
        description="Child elements, or plain strings for raw text lines.",
    )
    force_closing_tag: bool = Field(
        False,
        alias="forceClosingTag",
        description="Write <tag></tag> instead of <tag/> when the element is empty.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid", coerce_numbers_to_str=True)

    @field_validator("attrs", mode="before")
    @classmethod
    def _reject_boolean_attrs(cls, value: Any) -> Any:
        if isinstance(value, dict):
            for name, item in value.items():
                if isinstance(item, bool):
                    raise ValueError(
                        f"attribute {name!r} is a boolean; use an empty string "
                        "for a name-only attribute"
                    )
        return value


class MetaSpec(BaseModel):
    name: str
    content: str

    model_config = ConfigDict(coerce_numbers_to_str=True)


class BaseSpec(BaseModel):
    href: str
    target: Optional[str] = None


class HeadSpec(BaseModel):
    """Contents of <head>."""

    title: Optional[str] = Field(None, description="Document title.")
    charset: Optional[str] = Field("utf-8", description="Value of <meta charset>.")
    meta: List[MetaSpec] = Field(
        default_factory=list, description="Named <meta> entries (e.g., viewport)."
    )
    base: Optional[BaseSpec] = None
    stylesheets: List[str] = Field(
        default_factory=list, description="Stylesheet URLs, linked in order."
    )
    scripts: List[str] = Field(
        default_factory=list, description="Script URLs, loaded in order."
    )
    style: Optional[str] = Field(None, description="Inline CSS.")

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)


class PageSpec(BaseModel):
    """A whole HTML page."""

    lang: Optional[str] = Field(None, description="lang attribute of <html>.")
    doctype: bool = Field(True, description="Prefix the output with <!DOCTYPE html>.")
    head: HeadSpec = Field(default_factory=HeadSpec)
    body: List[Union[str, NodeSpec]] = Field(
        default_factory=list, description="Top-level nodes of <body>."
    )

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)
