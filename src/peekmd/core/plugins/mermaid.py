"""Mermaid fences passed through raw for client-side diagram rendering"""

from collections.abc import Sequence

from markdown_it import MarkdownIt
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token
from markdown_it.utils import EnvType, OptionsDict


DIAGRAM_LANGUAGE = 'mermaid'


def mermaid_html(code: str) -> str:
    # Unescaped: mermaid.js parses the text, and escaping would mangle arrows like -->.
    return f'<pre class="mermaid">{code.strip()}</pre>\n'


def mermaid_plugin(md: MarkdownIt) -> None:
    """Render ```mermaid fences as raw diagram source; defer every other fence."""
    default_fence = md.renderer.rules['fence']

    def fence(
        renderer: RendererHTML,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: EnvType,
    ) -> str:
        if tokens[idx].info.strip() == DIAGRAM_LANGUAGE:
            return mermaid_html(tokens[idx].content)
        return default_fence(tokens, idx, options, env)

    md.add_render_rule('fence', fence)
