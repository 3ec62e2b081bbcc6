"""Parser assembly, Markdown-to-HTML rendering, and summary extraction"""

import logging
import re

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin

from peekmd.core.plugins.alerts import process_alerts
from peekmd.core.plugins.anchors import anchors_plugin
from peekmd.core.plugins.highlight import highlight_plugin
from peekmd.core.plugins.mermaid import mermaid_plugin
from peekmd.core.plugins.strikethrough import strikethrough_plugin
from peekmd.core.plugins.tasks import task_list_plugin


logger = logging.getLogger(__name__)

PRESET = 'gfm-like'
NO_DESCRIPTION = "No description provided."
DEFAULT_TOPICS = ("markdown", "preview", "documentation")

# Applied in this order. Anchors must stay a token pass (they set heading ids
# before serialization); alerts run on the HTML afterwards in render_markdown.
PLUGINS = (
    highlight_plugin,
    mermaid_plugin,
    task_list_plugin,
    strikethrough_plugin,
    footnote_plugin,
    anchors_plugin,
)


def create_parser(html: bool = True, linkify: bool = True, typographer: bool = False) -> MarkdownIt:
    """Build a GitHub-flavoured MarkdownIt instance with every preview extension installed."""
    md = MarkdownIt(PRESET, options_update={
        "html": html,
        "linkify": linkify,
        "typographer": typographer,
        "breaks": False,
    })
    for plugin in PLUGINS:
        md.use(plugin)
    return md


def render_markdown(content: str, html: bool = True, linkify: bool = True, typographer: bool = False) -> str:
    """Render Markdown text to an HTML fragment, alerts included."""
    md = create_parser(html=html, linkify=linkify, typographer=typographer)
    rendered = md.render(content)
    logger.debug("Rendered %d chars of markdown to %d chars of html", len(content), len(rendered))
    return process_alerts(rendered)


# --- description sniffing ---

SKIP_PREFIXES = ('#', '-', '*', '+', '`', '!', '|', '>', '[!', '<')
ORDERED_ITEM_RE = re.compile(r'^\d+[.)]')
REFERENCE_DEF_RE = re.compile(r'^\[.*\]:')

IMAGE_RE = re.compile(r'!\[([^\]]*)\]\([^)]+\)')
LINK_RE = re.compile(r'\[([^\]]+)\]\([^)]+\)')
BOLD_RE = re.compile(r'\*\*([^*]+)\*\*|(?<!\w)__([^_]+)__(?!\w)')
ITALIC_RE = re.compile(r'\*([^*]+)\*|(?<!\w)_([^_]+)_(?!\w)')
CODE_RE = re.compile(r'`([^`]+)`')


def _is_prose(line: str) -> bool:
    """True if a stripped line reads as paragraph text rather than block markup."""
    return bool(line) and not (
        line.startswith(SKIP_PREFIXES)
        or ORDERED_ITEM_RE.match(line)
        or REFERENCE_DEF_RE.match(line)
    )


def _plain_text(line: str) -> str:
    """Strip inline Markdown from a line, keeping link and emphasis text."""
    line = IMAGE_RE.sub('', line)
    line = LINK_RE.sub(r'\1', line)
    line = BOLD_RE.sub(lambda m: m.group(1) or m.group(2), line)
    line = ITALIC_RE.sub(lambda m: m.group(1) or m.group(2), line)
    line = CODE_RE.sub(r'\1', line)
    return re.sub(r'\s+', ' ', line).strip()


def extract_description(content: str) -> str:
    """Return the first prose line after the first heading, as plain text."""
    found_heading = False
    for line in content.split('\n'):
        stripped = line.strip()
        if stripped.startswith('#'):
            found_heading = True
            continue
        if not found_heading or not _is_prose(stripped):
            continue
        description = _plain_text(stripped)
        if description:
            return description
    return NO_DESCRIPTION


def extract_topics(name: str) -> list[str]:
    """Return the topic labels shown beside a document; fixed, whatever the name."""
    return list(DEFAULT_TOPICS)
