"""Pipeline step functions: read, render, and write preview pages"""

import logging
from pathlib import Path

from peekmd.config import Settings
from peekmd.core.models import RenderedDoc
from peekmd.core.parse import extract_description, extract_topics, render_markdown
from peekmd.core.plugins.highlight import highlight_css
from peekmd.core.template import render_page
from peekmd.core.utils.file_tree import file_tree


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.markdown', '.mdown'}
DEFAULT_TITLE = 'peekmd'


def is_markdown_file(path: Path) -> bool:
    return path.suffix.lower() in MD_EXTENSIONS


def read_markdown(path: Path) -> str:
    """Read a markdown file as UTF-8 text."""
    if not path.is_file():
        raise ValueError(f"File not found: {path}")
    if not is_markdown_file(path):
        logger.warning("File '%s' may not be a markdown file", path)
    try:
        return path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise ValueError(f"Not a UTF-8 text file: {path}") from e


def render_file(path: Path, settings: Settings) -> RenderedDoc:
    """Render a markdown file and collect the metadata shown around it."""
    path = path.resolve()
    content = read_markdown(path)
    title = path.parent.name or DEFAULT_TITLE
    logger.debug("Rendering %s", path)
    return RenderedDoc(
        path=path,
        filename=path.name,
        title=title,
        description=extract_description(content),
        html=render_markdown(content, **settings.parser_options()),
        topics=extract_topics(title),
        files=file_tree(path.parent),
    )


def write_page(doc: RenderedDoc, output_dir: Path, settings: Settings, fragment: bool = False) -> Path:
    """Write doc as a full HTML page (or the bare fragment) into output_dir. Returns the file path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    out_file = output_dir / f"{doc.path.stem}.html"
    if fragment:
        text = doc.html
    else:
        text = render_page(doc, highlight_css(settings.highlight_style))
    out_file.write_text(text, encoding='utf-8')
    logger.debug("Wrote %s", out_file)
    return out_file
