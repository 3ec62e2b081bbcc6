"""Data models for the render pipeline"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FileNode:
    """One entry of the directory listing shown above a document."""
    name:     str
    is_dir:   bool
    size:     str = ''              # human-readable, empty for folders
    children: list['FileNode'] = field(default_factory=list)


@dataclass
class RenderedDoc:
    """A rendered Markdown file plus the metadata shown around it."""
    path:        Path
    filename:    str
    title:       str            # parent directory name, shown like a repository name
    description: str
    html:        str            # fragment only; the page template wraps it
    topics:      list[str] = field(default_factory=list)
    files:       list[FileNode] = field(default_factory=list)
