import io

from bs4 import BeautifulSoup

from htmlbuilder import element as element_module
from htmlbuilder.element import Element, Text
from htmlbuilder.elements import Bold, Div, Image, List, ListItem, Paragraph
from htmlbuilder.tables import Col


def test_content_renders_inline():
    assert Element("p", "Hello").to_string() == "<p>Hello</p>\n"


def test_empty_element_self_closes():
    assert Element("br").to_string() == "<br/>\n"


def test_force_closing_tag_keeps_open_and_close_on_one_line():
    assert Col().to_string() == "<td></td>\n"

    span = Element("span")
    span.force_closing_tag = True
    assert span.to_string() == "<span></span>\n"


def test_children_are_indented_under_the_parent():
    div = Div().append(Paragraph("A")).append(Paragraph("B"))

    assert div.to_string() == "<div>\n  <p>A</p>\n  <p>B</p>\n</div>\n"


def test_nested_children_add_one_level_each():
    tree = Div().append(Div().append(Element("br")))

    assert tree.to_string() == "<div>\n  <div>\n    <br/>\n  </div>\n</div>\n"


def test_attributes_render_sorted_by_name():
    node = Element("input").set_attribute("type", "text").set_attribute("name", "x")

    assert node.to_string() == '<input name="x" type="text"/>\n'


def test_empty_attribute_value_renders_name_only():
    node = Element("input").set_attribute("disabled", "").set_attribute("value", "v")

    assert node.to_string() == '<input disabled value="v"/>\n'


def test_integer_attributes_render_in_decimal():
    image = Image("a.png", "A", width=10)

    assert image.to_string() == '<img alt="A" src="a.png" width="10"/>\n'


def test_text_child_renders_on_its_own_line():
    paragraph = Element("p").append("hello")

    assert paragraph.to_string() == "<p>\n  hello\n</p>\n"


def test_text_node_renders_at_given_indentation():
    stream = io.StringIO()
    Text("x").render(stream, 4)

    assert stream.getvalue() == "    x\n"


def test_render_starts_at_given_indentation():
    stream = io.StringIO()
    Div().append(Paragraph("x")).render(stream, 2)

    assert stream.getvalue() == "  <div>\n    <p>x</p>\n  </div>\n"


def test_content_and_children_share_the_opening_line():
    paragraph = Element("p", "x").append(Element("br"))

    assert paragraph.to_string() == "<p>x  <br/>\n</p>\n"


def test_force_closing_tag_with_children():
    cell = Col().append(Bold("b"))

    assert cell.to_string() == "<td>  <b>b</b>\n</td>\n"


def test_indentation_width_is_configurable(monkeypatch):
    monkeypatch.setattr(element_module, "INDENTATION", 4)

    tree = Div().append(Div().append(Element("br")))

    assert tree.to_string() == "<div>\n    <div>\n        <br/>\n    </div>\n</div>\n"


def test_render_does_not_change_the_tree():
    tree = Div().id("main").append(Paragraph("A")).append("tail")
    first = tree.to_string()

    assert tree.to_string() == first
    assert str(tree) == first
    assert tree.attributes == {"id": "main"}
    assert len(tree.children) == 2


def test_render_writes_to_any_stream():
    class Sink:
        def __init__(self):
            self.parts = []

        def write(self, text):
            self.parts.append(text)

    sink = Sink()
    Element("p", "Hello").render(sink)

    assert "".join(sink.parts) == "<p>Hello</p>\n"


def test_rendered_children_follow_append_order():
    items = ["one", "two", "three", "four"]
    unordered = List()
    for item in items:
        unordered.append(ListItem(item))

    html = unordered.to_string()
    soup = BeautifulSoup(html, "html.parser")

    assert [li.get_text() for li in soup.find_all("li")] == items
    assert [line.strip() for line in html.splitlines()] == (
        ["<ul>"] + [f"<li>{item}</li>" for item in items] + ["</ul>"]
    )
