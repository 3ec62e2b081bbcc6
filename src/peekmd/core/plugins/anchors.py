"""Heading ids and self-link anchors, GitHub style"""

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from peekmd.core.utils.slug import slugify
from peekmd.core.utils.tokens import inline_text


ANCHOR_ICON = (
    '<svg class="octicon octicon-link" viewBox="0 0 16 16" width="16" height="16" aria-hidden="true">'
    '<path d="m7.775 3.275 1.25-1.25a3.5 3.5 0 1 1 4.95 4.95l-2.5 2.5a3.5 3.5 0 0 1-4.95 0 '
    '.751.751 0 0 1 .018-1.042.751.751 0 0 1 1.042-.018 1.998 1.998 0 0 0 2.83 0l2.5-2.5a2.002 '
    '2.002 0 0 0-2.83-2.83l-1.25 1.25a.751.751 0 0 1-1.042-.018.751.751 0 0 1-.018-1.042Zm-4.69 '
    '9.64a1.998 1.998 0 0 0 2.83 0l1.25-1.25a.751.751 0 0 1 1.042.018.751.751 0 0 1 .018 '
    '1.042l-1.25 1.25a3.5 3.5 0 1 1-4.95-4.95l2.5-2.5a3.5 3.5 0 0 1 4.95 0 .751.751 0 0 1-.018 '
    '1.042.751.751 0 0 1-1.042.018 1.998 1.998 0 0 0-2.83 0l-2.5 2.5a1.998 1.998 0 0 0 0 2.83Z">'
    '</path></svg>'
)


def anchor_html(slug: str) -> str:
    return f'<a class="anchor" href="#{slug}">{ANCHOR_ICON}</a>'


def github_anchors(state: StateCore) -> None:
    """Set each heading's id from its text and prepend a link to it."""
    tokens = state.tokens
    for i, token in enumerate(tokens[:-1]):
        if token.type != 'heading_open':
            continue
        inline = tokens[i + 1]
        if inline.type != 'inline':
            continue

        slug = slugify(inline_text(inline.children))
        token.attrSet('id', slug)

        # Empty headings keep their id but get no link.
        if inline.children:
            anchor = Token('html_inline', '', 0, content=anchor_html(slug))
            inline.children.insert(0, anchor)


def anchors_plugin(md: MarkdownIt) -> None:
    """Run the anchor pass after every other core rule, before rendering."""
    md.core.ruler.push('github_anchors', github_anchors)
