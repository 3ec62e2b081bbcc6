"""~~Strikethrough~~ as a delimiter scan followed by a matching pass.

The scan rule records every run of two or more tildes as a text token plus a
delimiter entry carrying the flanking flags. The matching pass runs after the
inline tokenizer has finished a run of content and turns eligible pairs into
``s_open``/``s_close`` tokens; anything left unmatched renders as the literal
tildes it was scanned from.

Runs longer than two tildes get an empty text slot on each side at scan time.
A matched opener moves its surplus tildes into the slot before it, a matched
closer into the slot after it, so the matching pass never has to splice the
token list and delimiter indices stay valid for the emphasis pass that
follows.
"""

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline
from markdown_it.rules_inline.state_inline import Delimiter
from markdown_it.token import Token


MARKER = 0x7E  # ~
TILDE = '~'
PAIR_LENGTH = 2


def tokenize(state: StateInline, silent: bool) -> bool:
    """Scan a run of tildes at state.pos into a text token and a delimiter."""
    start = state.pos
    src = state.src
    if src[start] != TILDE:
        return False
    if start + 1 >= state.posMax or src[start + 1] != TILDE:
        return False
    if silent:
        return False

    scanned = state.scanDelims(start, True)
    length = scanned.length
    surplus = length > PAIR_LENGTH

    if surplus:
        state.push('text', '', 0)
    token = state.push('text', '', 0)
    token.content = TILDE * length
    state.delimiters.append(Delimiter(
        marker=MARKER,
        length=length,
        token=len(state.tokens) - 1,
        end=-1,
        open=scanned.can_open,
        close=scanned.can_close,
    ))
    if surplus:
        state.push('text', '', 0)

    state.pos += length
    return True


def _retag(token: Token, nesting: int) -> None:
    token.type = 's_open' if nesting > 0 else 's_close'
    token.tag = 's'
    token.nesting = nesting
    token.markup = TILDE * PAIR_LENGTH
    token.content = ''


def _pair(tokens: list[Token], opener: Delimiter, closer: Delimiter) -> None:
    """Convert a matched opener/closer into strike tokens, keeping surplus tildes as text."""
    _retag(tokens[opener.token], 1)
    _retag(tokens[closer.token], -1)
    if opener.length > PAIR_LENGTH:
        tokens[opener.token - 1].content = TILDE * (opener.length - PAIR_LENGTH)
    if closer.length > PAIR_LENGTH:
        tokens[closer.token + 1].content = TILDE * (closer.length - PAIR_LENGTH)


def _match(tokens: list[Token], delimiters: list[Delimiter]) -> None:
    """Pair openers innermost-first with the nearest later unmatched closer."""
    matched: set[int] = set()
    for i in range(len(delimiters) - 1, -1, -1):
        opener = delimiters[i]
        if opener.marker != MARKER or not opener.open:
            continue

        for j in range(i + 1, len(delimiters)):
            closer = delimiters[j]
            if closer.marker != MARKER or not closer.close or j in matched:
                continue
            _pair(tokens, opener, closer)
            opener.end, closer.end = j, i
            matched.update((i, j))
            break


def post_process(state: StateInline) -> None:
    """Match tilde delimiters at the top level and inside link content."""
    _match(state.tokens, state.delimiters)
    for meta in state.tokens_meta:
        if meta and 'delimiters' in meta:
            _match(state.tokens, meta['delimiters'])


def strikethrough_plugin(md: MarkdownIt) -> None:
    """Replace the preset strikethrough rules with the tilde-run scanner above."""
    md.disable('strikethrough', ignoreInvalid=True)
    md.inline.ruler.before('emphasis', 'github_strikethrough', tokenize)
    md.inline.ruler2.before('emphasis', 'github_strikethrough', post_process)
