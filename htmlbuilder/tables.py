"""Table elements; each container only accepts the next level down."""

from __future__ import annotations

from typing import Optional

from .element import Element


class _Cell(Element):
    def __init__(self, name: str, content: Optional[str] = None) -> None:
        super().__init__(name, content)
        # An empty cell is <td></td>, never <td/>.
        self.force_closing_tag = True

    def row_span(self, rows: int) -> "_Cell":
        if rows > 0:
            self.set_attribute("rowspan", rows)
        return self

    def col_span(self, cols: int) -> "_Cell":
        if cols > 0:
            self.set_attribute("colspan", cols)
        return self


class ColHeader(_Cell):
    """<th> header cell."""

    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("th", content)


class Col(_Cell):
    """<td> data cell."""

    def __init__(self, content: Optional[str] = None) -> None:
        super().__init__("td", content)


class Row(Element):
    """<tr>, holding only Col and ColHeader cells."""

    accepts = (ColHeader, Col)

    def __init__(self) -> None:
        super().__init__("tr")


class Table(Element):
    """<table>, holding only Row elements."""

    accepts = (Row,)

    def __init__(self) -> None:
        super().__init__("table")


__all__ = ["Col", "ColHeader", "Row", "Table"]
