"""GitHub task lists: `- [ ]` and `- [x]` items rendered as disabled checkboxes"""

import re

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from peekmd.core.utils.tokens import find_inline


TASK_RE = re.compile(r'^\[([ xX])\]\s*')

ITEM_CLASS = 'task-list-item'
LIST_CLASS = 'contains-task-list'
LIST_OPEN = ('bullet_list_open', 'ordered_list_open')
LIST_CLOSE = ('bullet_list_close', 'ordered_list_close')
# An item's own text ends where the item closes or a nested list begins.
ITEM_BOUNDARY = ('list_item_close', *LIST_OPEN)
CHECKBOX = '<input type="checkbox" class="task-list-item-checkbox"{checked} disabled>'


def checkbox_html(checked: bool) -> str:
    return CHECKBOX.format(checked=' checked' if checked else '')


def _convert_item(inline: Token) -> bool:
    """Strip a leading checkbox marker from inline's first text child; True if one was found."""
    if not inline.children:
        return False
    first = inline.children[0]
    if first.type != 'text':
        return False

    m = TASK_RE.match(first.content)
    if not m:
        return False

    first.content = first.content[m.end():]
    checked = m.group(1).lower() == 'x'
    inline.children.insert(0, Token('html_inline', '', 0, content=checkbox_html(checked)))
    return True


def _process_list(tokens: list[Token], list_idx: int) -> None:
    """Convert the direct items of the bullet list opened at list_idx."""
    has_task = False
    depth = 0

    for i in range(list_idx, len(tokens)):
        token = tokens[i]
        if token.type in LIST_OPEN:
            depth += 1
        elif token.type in LIST_CLOSE:
            depth -= 1
            if depth == 0:
                break

        if depth == 1 and token.type == 'list_item_open':
            inline_idx = find_inline(tokens, i, stop=ITEM_BOUNDARY)
            if inline_idx != -1 and _convert_item(tokens[inline_idx]):
                token.attrSet('class', ITEM_CLASS)
                has_task = True

    if has_task:
        tokens[list_idx].attrJoin('class', LIST_CLASS)


def task_lists(state: StateCore) -> None:
    for i, token in enumerate(state.tokens):
        if token.type == 'bullet_list_open':
            _process_list(state.tokens, i)


def task_list_plugin(md: MarkdownIt) -> None:
    """Rewrite task items once inline content has been tokenized."""
    md.core.ruler.after('inline', 'task_list', task_lists)
