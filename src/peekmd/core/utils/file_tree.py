"""Directory listing for the repository-style file table"""

import logging
from html import escape
from pathlib import Path

from peekmd.core.models import FileNode


logger = logging.getLogger(__name__)

MAX_DEPTH = 3
MAX_ENTRIES = 20
KB = 1024
MB = KB * KB

FILE_ICON = (
    '<svg aria-hidden="true" focusable="false" class="octicon octicon-file color-fg-muted" '
    'viewBox="0 0 16 16" width="16" height="16" fill="currentColor"><path d="M2 1.75C2 .784 '
    '2.784 0 3.75 0h6.586c.464 0 .909.184 1.237.513l2.914 2.914c.329.328.513.773.513 '
    '1.237v9.586A1.75 1.75 0 0 1 13.25 16h-9.5A1.75 1.75 0 0 1 2 14.25Zm1.75-.25a.25.25 0 0 '
    '0-.25.25v12.5c0 .138.112.25.25.25h9.5a.25.25 0 0 0 .25-.25V6h-2.75A1.75 1.75 0 0 1 9 '
    '4.25V1.5Zm6.75.062V4.25c0 .138.112.25.25.25h2.688l-.011-.013-2.914-2.914-.013-.011Z">'
    '</path></svg>'
)
FOLDER_ICON = (
    '<svg aria-hidden="true" focusable="false" class="octicon octicon-file-directory-fill '
    'color-fg-muted" viewBox="0 0 16 16" width="16" height="16" fill="currentColor"><path '
    'd="M1.75 1A1.75 1.75 0 0 0 0 2.75v10.5C0 14.216.784 15 1.75 15h12.5A1.75 1.75 0 0 0 16 '
    '13.25v-8.5A1.75 1.75 0 0 0 14.25 3H7.5a.25.25 0 0 1-.2-.1l-.9-1.2C6.07 1.26 5.55 1 5 '
    '1H1.75Z"></path></svg>'
)

ROW = (
    '<tr class="directory-row">'
    '<td class="directory-name">{icon}<a title="{name}" href="#">{name}</a></td>'
    '<td class="directory-size">{size}</td>'
    '</tr>'
)
TABLE = (
    '<table class="directory-table" aria-label="Folders and files">\n'
    '<thead><tr><th>Name</th><th>Size</th></tr></thead>\n'
    '<tbody>\n{rows}\n</tbody>\n'
    '</table>'
)


def format_size(size: int) -> str:
    """Format a byte count as B, KB or MB with one decimal above bytes."""
    if size < KB:
        return f"{size} B"
    if size < MB:
        return f"{size / KB:.1f} KB"
    return f"{size / MB:.1f} MB"


def _node(path: Path, max_depth: int, depth: int) -> FileNode:
    stats = path.lstat()
    if path.is_dir() and not path.is_symlink():
        return FileNode(path.name, True, children=file_tree(path, max_depth, depth + 1))
    return FileNode(path.name, False, size=format_size(stats.st_size))


def file_tree(root: Path, max_depth: int = MAX_DEPTH, depth: int = 0) -> list[FileNode]:
    """List the first MAX_ENTRIES entries of root by name, recursing max_depth levels.

    The listing is decoration: unreadable directories and entries are left out.
    """
    if depth >= max_depth:
        return []
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)[:MAX_ENTRIES]
    except OSError as e:
        logger.debug("Cannot list %s: %s", root, e)
        return []

    nodes = []
    for entry in entries:
        try:
            nodes.append(_node(entry, max_depth, depth))
        except OSError as e:
            logger.debug("Skipping %s: %s", entry, e)
    return nodes


def render_file_tree(nodes: list[FileNode]) -> str:
    """Render the top-level nodes as a directory table; empty string for no nodes."""
    if not nodes:
        return ''
    rows = '\n'.join(
        ROW.format(
            icon=FOLDER_ICON if node.is_dir else FILE_ICON,
            name=escape(node.name),
            size=node.size,
        )
        for node in nodes
    )
    return TABLE.format(rows=rows)
