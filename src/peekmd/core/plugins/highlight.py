"""Pygments syntax highlighting for fenced code blocks"""

import logging

from markdown_it import MarkdownIt
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)

# Spans only; markdown-it supplies the surrounding <pre><code>.
FORMATTER = HtmlFormatter(nowrap=True)


def _guess(code: str) -> Lexer:
    """Detect a lexer from the code itself, or plain text when nothing fits."""
    try:
        return guess_lexer(code)
    except ClassNotFound:
        return TextLexer()


def highlight_code(code: str, language: str) -> str:
    """Return escaped, highlighted HTML spans for code.

    A recognised language name selects its lexer; an empty or unknown name,
    or a lexer that fails on the input, falls back to automatic detection.
    """
    if language:
        try:
            return highlight(code, get_lexer_by_name(language), FORMATTER)
        except ClassNotFound:
            logger.debug("Unknown language %r, guessing lexer", language)
        except Exception as e:
            logger.debug("Lexer %r failed (%s), guessing lexer", language, e)
    return highlight(code, _guess(code), FORMATTER)


def highlight_css(style: str = 'default', selector: str = '.markdown-body pre') -> str:
    """Return the stylesheet for a Pygments style, scoped to code blocks."""
    try:
        formatter = HtmlFormatter(style=style)
    except ClassNotFound as e:
        raise ValueError(f"Unknown highlight style: {style}") from e
    return formatter.get_style_defs(selector)


def _highlight_option(code: str, lang: str, attrs: str) -> str:
    return highlight_code(code, lang)


def highlight_plugin(md: MarkdownIt) -> None:
    """Install highlight_code as the parser's fence highlighter."""
    md.options['highlight'] = _highlight_option
