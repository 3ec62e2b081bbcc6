"""Unit tests for core/plugins/mermaid.py"""

from peekmd.core.parse import render_markdown
from peekmd.core.plugins.mermaid import mermaid_html


DIAGRAM = "graph TD\n  A --> B\n  B --> C & D\n"


def test_mermaid_fence_is_raw():
    """Mermaid source is emitted trimmed and unescaped."""
    html = render_markdown(f"```mermaid\n{DIAGRAM}```")
    assert html == '<pre class="mermaid">graph TD\n  A --> B\n  B --> C & D</pre>\n'


def test_other_fences_escaped():
    """The same text under another language tag is escaped."""
    html = render_markdown(f"```text\n{DIAGRAM}```")
    assert "-->" not in html
    assert "--&gt;" in html
    assert "&amp;" in html


def test_untagged_fence_escaped():
    html = render_markdown(f"```\n{DIAGRAM}```")
    assert "-->" not in html
    assert "&gt;" in html


def test_mermaid_info_trimmed():
    """Surrounding spaces in the info string still select the diagram renderer."""
    html = render_markdown(f"```  mermaid  \n{DIAGRAM}```")
    assert html.startswith('<pre class="mermaid">')


def test_mermaid_html():
    assert mermaid_html("\n  a-->b  \n") == '<pre class="mermaid">a-->b</pre>\n'
