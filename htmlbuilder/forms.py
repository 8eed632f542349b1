"""Form controls."""

from __future__ import annotations

from typing import Optional

from .element import AttributeValue, Element


class Form(Element):
    def __init__(self, action: Optional[str] = None) -> None:
        super().__init__("form")
        if action is not None:
            self.set_attribute("action", action)


class Input(Element):
    """<input>; the typed subclasses below only preset ``type``.

    Boolean switches (``checked``, ``disabled``, ...) are written as
    name-only attributes.
    """

    def __init__(
        self,
        type: Optional[str] = None,
        name: Optional[str] = None,
        value: Optional[str] = None,
        content: Optional[str] = None,
    ) -> None:
        super().__init__("input", content)
        if type is not None:
            self.set_attribute("type", type)
        if name is not None:
            self.set_attribute("name", name)
        if value is not None:
            self.set_attribute("value", value)

    def size(self, size: int) -> "Input":
        return self.set_attribute("size", size)

    def maxlength(self, maxlength: int) -> "Input":
        return self.set_attribute("maxlength", maxlength)

    def placeholder(self, placeholder: str) -> "Input":
        return self.set_attribute("placeholder", placeholder)

    def min(self, value: AttributeValue) -> "Input":
        return self.set_attribute("min", value)

    def max(self, value: AttributeValue) -> "Input":
        return self.set_attribute("max", value)

    def checked(self, flag: bool = True) -> "Input":
        if flag:
            self.set_attribute("checked", "")
        return self

    def autocomplete(self) -> "Input":
        return self.set_attribute("autocomplete", "")

    def autofocus(self) -> "Input":
        return self.set_attribute("autofocus", "")

    def disabled(self) -> "Input":
        return self.set_attribute("disabled", "")

    def readonly(self) -> "Input":
        return self.set_attribute("readonly", "")

    def required(self) -> "Input":
        return self.set_attribute("required", "")


class InputRadio(Input):
    def __init__(self, name: str, value: Optional[str] = None, content: Optional[str] = None) -> None:
        super().__init__("radio", name, value, content)


class InputCheckbox(Input):
    def __init__(self, name: str, value: Optional[str] = None, content: Optional[str] = None) -> None:
        super().__init__("checkbox", name, value, content)


class InputText(Input):
    def __init__(self, name: str, value: Optional[str] = None) -> None:
        super().__init__("text", name, value)


class InputNumber(Input):
    def __init__(self, name: str, value: Optional[str] = None) -> None:
        super().__init__("number", name, value)


class InputRange(Input):
    def __init__(self, name: str, value: Optional[str] = None) -> None:
        super().__init__("range", name, value)


class InputDate(Input):
    def __init__(self, name: str, value: Optional[str] = None) -> None:
        super().__init__("date", name, value)


class InputTime(Input):
    def __init__(self, name: str, value: Optional[str] = None) -> None:
        super().__init__("time", name, value)


class InputEmail(Input):
    def __init__(self, name: str, value: Optional[str] = None) -> None:
        super().__init__("email", name, value)


class InputUrl(Input):
    def __init__(self, name: str, value: Optional[str] = None) -> None:
        super().__init__("url", name, value)


class InputPassword(Input):
    def __init__(self, name: str) -> None:
        super().__init__("password", name)


class InputSubmit(Input):
    def __init__(self, value: Optional[str] = None, name: Optional[str] = None) -> None:
        super().__init__("submit", name, value)


class InputReset(Input):
    def __init__(self, value: Optional[str] = None) -> None:
        super().__init__("reset", None, value)


class InputList(Input):
    """Text input with suggestions from the <datalist> whose id is ``list_id``."""

    def __init__(self, name: str, list_id: str) -> None:
        super().__init__(None, name)
        self.set_attribute("list", list_id)


class TextArea(Element):
    def __init__(self, name: str, cols: int = 0, rows: int = 0) -> None:
        super().__init__("textarea")
        self.set_attribute("name", name)
        if cols > 0:
            self.set_attribute("cols", cols)
        if rows > 0:
            self.set_attribute("rows", rows)
        self.force_closing_tag = True

    def maxlength(self, maxlength: int) -> "TextArea":
        self.set_attribute("maxlength", maxlength)
        return self


class DataList(Element):
    """<datalist> of Option elements for an InputList."""

    def __init__(self, id: str) -> None:
        super().__init__("datalist")
        self.set_attribute("id", id)


class Select(Element):
    def __init__(self, name: str) -> None:
        super().__init__("select")
        self.set_attribute("name", name)


class Option(Element):
    """<option> of a Select or a DataList."""

    def __init__(self, value: str, content: Optional[str] = None) -> None:
        super().__init__("option", content)
        self.set_attribute("value", value)
        self.force_closing_tag = True

    def selected(self, flag: bool = True) -> "Option":
        if flag:
            self.set_attribute("selected", "")
        return self


__all__ = [
    "DataList",
    "Form",
    "Input",
    "InputCheckbox",
    "InputDate",
    "InputEmail",
    "InputList",
    "InputNumber",
    "InputPassword",
    "InputRadio",
    "InputRange",
    "InputReset",
    "InputSubmit",
    "InputText",
    "InputTime",
    "InputUrl",
    "Option",
    "Select",
    "TextArea",
]
