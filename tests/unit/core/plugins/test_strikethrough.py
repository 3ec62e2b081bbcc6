"""Unit tests for core/plugins/strikethrough.py"""

import pytest

from peekmd.core.parse import render_markdown


def _children(parser, md: str) -> list:
    return next(t for t in parser.parse(md) if t.type == 'inline').children


def test_strikethrough_pair():
    """A closed ~~run~~ renders as an <s> element with no tildes left."""
    html = render_markdown("This is ~~deleted~~ text.")
    assert html == "<p>This is <s>deleted</s> text.</p>\n"
    assert "~" not in html


def test_strikethrough_tokens(parser):
    """Matched delimiters become s_open/s_close tokens around the text."""
    children = _children(parser, "~~gone~~")
    assert [c.type for c in children] == ['s_open', 'text', 's_close']
    assert children[0].markup == '~~'
    assert children[0].nesting == 1 and children[2].nesting == -1


@pytest.mark.parametrize("md,expected", [
    ("~~unclosed", "<p>~~unclosed</p>\n"),
    ("closed~~ only", "<p>closed~~ only</p>\n"),
    ("a ~ single", "<p>a ~ single</p>\n"),
    ("~~ spaced ~~", "<p>~~ spaced ~~</p>\n"),
])
def test_unmatched_runs_stay_literal(md, expected):
    """Runs that cannot pair render as the literal characters."""
    assert render_markdown(md) == expected


def test_innermost_opener_wins():
    """An opener with no closer stays literal while the later pair matches."""
    assert render_markdown("~~a ~~b~~") == "<p>~~a <s>b</s></p>\n"


def test_intraword_strikethrough():
    """Tilde runs inside a word may both open and close."""
    assert render_markdown("a~~b~~c") == "<p>a<s>b</s>c</p>\n"


def test_surplus_opener_tildes_kept_before_pair(parser):
    """Extra opener tildes stay as literal text ahead of the <s> element."""
    assert render_markdown("x ~~~~bold~~") == "<p>x ~~<s>bold</s></p>\n"
    children = _children(parser, "x ~~~bold~~")
    assert [c.type for c in children] == ['text', 's_open', 'text', 's_close']
    assert children[0].content == 'x ~'


def test_surplus_closer_tildes_kept_after_pair():
    """Extra closer tildes stay as literal text after the </s>."""
    assert render_markdown("~~bold~~~") == "<p><s>bold</s>~</p>\n"


def test_strikethrough_with_emphasis():
    """Strike and emphasis delimiters resolve independently."""
    assert render_markdown("~~*both*~~") == "<p><s><em>both</em></s></p>\n"
    assert render_markdown("x ~~~*both*~~ **bold**") == "<p>x ~<s><em>both</em></s> <strong>bold</strong></p>\n"


def test_strikethrough_inside_link():
    """Delimiters nested in link text are matched too."""
    html = render_markdown("[~~old~~](https://example.com)")
    assert html == '<p><a href="https://example.com"><s>old</s></a></p>\n'


def test_builtin_rule_replaced(parser):
    """The preset's strikethrough rule is disabled in favour of the tilde-run scanner."""
    active = parser.inline.ruler.get_active_rules()
    assert 'github_strikethrough' in active
    assert 'strikethrough' not in active
    assert 'github_strikethrough' in parser.inline.ruler2.get_active_rules()
