# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for rendering and RenderConfig."""

import pytest

from genro_htmldsl import (
    BuilderBase,
    Element,
    RenderConfig,
    TextNode,
    element,
    html,
    render,
)


class DocBuilder(BuilderBase):
    """Grammar with a single header below the root."""

    @element(children=('header',))
    def html(self, target, init=None, **attr):
        return self.child(target, 'html', init, **attr)

    @element(text=True)
    def header(self, target, init=None, **attr):
        return self.child(target, 'header', init, **attr)


def _sample_page():
    def p_init(p):
        p.append_text('some')
        p.b(lambda b: b.append_text('mixed'))
        p.append_text('text')

    return html(lambda h: (
        h.head(lambda head: head.title(lambda t: t.append_text('XML encoding with Python'))),
        h.body(lambda body: (
            body.h1(lambda h1: h1.append_text('XML encoding')),
            body.p(p_init),
            body.a('http://python.org', lambda a: a.append_text('Python')),
        )),
    ))


def _expected_depths(node, depth=0):
    if isinstance(node, TextNode):
        return [depth]
    inner = [d for child in node.children for d in _expected_depths(child, depth + 1)]
    return [depth] + inner + [depth]


class TestRender:
    """Tests for render()."""

    def test_header_scenario(self):
        """Test a root with one header holding text."""
        root = html(
            lambda h: h.header(lambda hd: hd.append_text('T')),
            builder=DocBuilder(),
        )
        assert render(root) == (
            "<html>\n"
            "  <header>\n"
            "    T\n"
            "  </header>\n"
            "</html>\n"
        )

    def test_hyperlink_scenario(self):
        """Test an a element renders its href in the opening tag."""
        root = html(lambda h: h.body(
            lambda b: b.a('http://example.org', lambda a: a.append_text('X'))
        ))
        link = root.children[0].children[0]
        assert render(link) == (
            '<a href="http://example.org">\n'
            "  X\n"
            "</a>\n"
        )

    def test_full_page(self):
        """Test a document with mixed content."""
        expected = "\n".join([
            "<html>",
            "  <head>",
            "    <title>",
            "      XML encoding with Python",
            "    </title>",
            "  </head>",
            "  <body>",
            "    <h1>",
            "      XML encoding",
            "    </h1>",
            "    <p>",
            "      some",
            "      <b>",
            "        mixed",
            "      </b>",
            "      text",
            "    </p>",
            '    <a href="http://python.org">',
            "      Python",
            "    </a>",
            "  </body>",
            "</html>",
        ]) + "\n"
        assert render(_sample_page()) == expected

    def test_empty_root(self):
        """Test a root without children renders two lines."""
        assert render(html(lambda h: None)) == "<html>\n</html>\n"

    def test_indentation_equals_depth(self):
        """Test every line is indented by its node's distance from the root."""
        root = _sample_page()
        lines = render(root).splitlines()
        actual = [(len(line) - len(line.lstrip(' '))) // 2 for line in lines]
        assert actual == _expected_depths(root)

    def test_attribute_order_and_last_write(self):
        """Test attributes render in insertion order, once per key."""
        def p_init(p):
            p.set_attr(b='1', a='2')
            p.set_attr(b='3')

        root = html(lambda h: h.body(lambda body: body.p(p_init)))
        first_line = render(root.children[0].children[0]).splitlines()[0]
        assert first_line == '<p b="3" a="2">'

    def test_render_is_idempotent(self):
        """Test rendering the same tree twice gives identical text."""
        root = _sample_page()
        assert render(root) == render(root)
        assert str(root) == render(root)

    def test_render_text_node(self):
        """Test a text node renders alone."""
        assert render(TextNode('plain')) == "plain\n"

    def test_render_does_not_change_tree(self):
        """Test rendering leaves children and attributes untouched."""
        root = _sample_page()
        before = [(d, repr(n)) for d, n in root.walk()]
        render(root)
        assert [(d, repr(n)) for d, n in root.walk()] == before

    def test_no_escaping(self):
        """Test text and attribute values are written verbatim."""
        el = Element('p', {'title': 'a<b'})
        el.append_text('1 < 2 & 3')
        assert render(el) == '<p title="a<b">\n  1 < 2 & 3\n</p>\n'


class TestRenderConfig:
    """Tests for indentation options."""

    def test_default_indent(self):
        assert RenderConfig().indent_unit == '  '

    def test_indent_unit_argument(self):
        """Test a custom indent unit."""
        root = html(lambda h: h.body(lambda b: b.append_text('x')))
        assert render(root, '\t') == "<html>\n\t<body>\n\t\tx\n\t</body>\n</html>\n"

    def test_config_argument(self):
        """Test passing a RenderConfig."""
        root = html(lambda h: h.body())
        text = render(root, config=RenderConfig(indent_unit='    '))
        assert text == "<html>\n    <body>\n    </body>\n</html>\n"

    def test_indent_unit_overrides_config(self):
        root = html(lambda h: h.body())
        text = render(root, ' ', config=RenderConfig(indent_unit='    '))
        assert text == "<html>\n <body>\n </body>\n</html>\n"

    @pytest.mark.parametrize('unit', ['', 'ab', ' -'])
    def test_invalid_indent_unit(self, unit):
        with pytest.raises(ValueError):
            RenderConfig(indent_unit=unit)

    def test_non_string_indent_unit(self):
        with pytest.raises(TypeError):
            RenderConfig(indent_unit=2)

    def test_config_is_frozen(self):
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.indent_unit = '\t'
