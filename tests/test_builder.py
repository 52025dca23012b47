import unittest

from lxml import etree

from issue_template.builder import build_content, element_tag
from issue_template.content import (
    InputForm,
    InputText,
    LocalDefinition,
    OutputDiagram,
    OutputTable,
    OutputText,
    PlainText,
)
from issue_template.display import Display, Tag
from issue_template.walker import IterContext


def _child(markup: str) -> etree._Element:
    root = etree.fromstring(markup)
    return root[0]


class BuildContentTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = IterContext()

    def test_paragraph_uses_trimmed_text(self) -> None:
        node = _child("<article><p>  Hello <b>world</b>  </p></article>")
        content = build_content(node, self.ctx, 1)
        self.assertIsInstance(content, PlainText)
        self.assertEqual(content.value, "Hello world")
        self.assertEqual(content.display, Display.P_TEXT)
        self.assertEqual(content.display_id, "1.1")

    def test_expression_fields(self) -> None:
        node = _child(
            '<article><e name="Ref. 1" rel="Ref. 0" type="venncode" value="{c = class}"/></article>'
        )
        content = build_content(node, self.ctx, 3)
        self.assertEqual(
            content,
            InputText(
                display_id="3.1",
                value="{c = class}",
                rel="Ref. 0",
                ref="Ref. 1",
                type="venncode",
            ),
        )

    def test_definition_prefers_text_over_value(self) -> None:
        node = _child('<article><def name="d" value="attr">text</def></article>')
        content = build_content(node, self.ctx, 1)
        self.assertIsInstance(content, LocalDefinition)
        self.assertEqual(content.value, "text")
        self.assertEqual(content.scope, "local")
        self.assertEqual(content.ref, "d")

    def test_definition_falls_back_to_value(self) -> None:
        node = _child('<article><def name="d" value="attr">   </def></article>')
        content = build_content(node, self.ctx, 1)
        self.assertEqual(content.value, "attr")

    def test_scenario(self) -> None:
        node = _child('<article><scenario type="monthly" value="Ref. 1">ignored</scenario></article>')
        content = build_content(node, self.ctx, 1)
        self.assertEqual(content, InputForm(display_id="1.1", value="Ref. 1", type="monthly"))

    def test_statement_text_then_value(self) -> None:
        node = _child('<article><statement action="go" value="attr">said</statement></article>')
        content = build_content(node, self.ctx, 1)
        self.assertEqual(content, OutputText(display_id="1.1", value="said", action="go"))
        node = _child('<article><statement value="attr"/></article>')
        content = build_content(node, self.ctx, 1)
        self.assertEqual(content.value, "attr")
        self.assertIsNone(content.action)
        self.assertEqual(content.display_id, "1.2")

    def test_table_value_falls_back_to_parent(self) -> None:
        node = _child('<e value="Ref. 1"><table cols="ds" sort="d"/></e>')
        content = build_content(node, self.ctx, 1)
        self.assertEqual(
            content,
            OutputTable(display_id="1.1", value="Ref. 1", cols="ds", sort="d"),
        )

    def test_table_own_value_wins(self) -> None:
        node = _child('<e value="Ref. 1"><table value="Ref. 2" max="10"/></e>')
        content = build_content(node, self.ctx, 1)
        self.assertEqual(content.value, "Ref. 2")
        self.assertEqual(content.max, "10")

    def test_table_without_any_value(self) -> None:
        node = _child('<article><table cols="x"/></article>')
        content = build_content(node, self.ctx, 1)
        self.assertIsNone(content.value)

    def test_only_value_is_inherited(self) -> None:
        node = _child('<e value="Ref. 1" max="9" type="sum"><diagram/></e>')
        content = build_content(node, self.ctx, 1)
        self.assertIsInstance(content, OutputDiagram)
        self.assertEqual(content.value, "Ref. 1")
        self.assertIsNone(content.max)
        self.assertIsNone(content.type)

    def test_diagram_fields(self) -> None:
        node = _child(
            '<article value="Ref. 1"><diagram x="d" y="s" id="g1" max="3" fold="m" type="time"/></article>'
        )
        content = build_content(node, self.ctx, 2)
        self.assertEqual(
            content,
            OutputDiagram(
                display_id="2.1",
                value="Ref. 1",
                x="d",
                y="s",
                id="g1",
                max="3",
                fold="m",
                type="time",
            ),
        )

    def test_counter_is_per_tag(self) -> None:
        root = etree.fromstring("<article><p>a</p><e value='x'/><p>b</p><p></p><e value='y'/></article>")
        ids = [build_content(node, self.ctx, 1).display_id for node in root]
        self.assertEqual(ids, ["1.1", "1.1", "1.2", "1.3", "1.2"])
        self.assertEqual(self.ctx.count, {"p": 3, "e": 2})

    def test_tag_name_is_case_insensitive(self) -> None:
        node = _child("<article><P>Upper</P></article>")
        content = build_content(node, self.ctx, 1)
        self.assertIsInstance(content, PlainText)
        self.assertEqual(self.ctx.count, {"p": 1})

    def test_namespaced_tag_uses_local_name(self) -> None:
        node = _child('<article xmlns="urn:budget"><p>ns</p></article>')
        self.assertIs(element_tag(node), Tag.PARAGRAPH)
        self.assertEqual(build_content(node, self.ctx, 1).value, "ns")

    def test_unknown_tag_is_ignored(self) -> None:
        node = _child("<article><note>x</note></article>")
        self.assertIsNone(build_content(node, self.ctx, 1))
        self.assertEqual(self.ctx.count, {})

    def test_comment_is_ignored(self) -> None:
        node = _child("<article><!-- note --></article>")
        self.assertIsNone(element_tag(node))
        self.assertIsNone(build_content(node, self.ctx, 1))
        self.assertEqual(self.ctx.count, {})


if __name__ == "__main__":
    unittest.main()
