"""Shared markdown-it token utilities"""

from markdown_it.token import Token


TEXT_TYPES = ('text', 'code_inline')


def inline_text(children: list[Token] | None) -> str:
    """Concatenate the text and inline-code content of an inline token's children."""
    return ''.join(t.content for t in children or [] if t.type in TEXT_TYPES)


def find_inline(tokens: list[Token], start: int, stop: tuple[str, ...]) -> int:
    """Return index of the first inline token after start, or -1 once a token in `stop` is reached."""
    for i in range(start + 1, len(tokens)):
        if tokens[i].type == 'inline':
            return i
        if tokens[i].type in stop:
            return -1
    return -1
