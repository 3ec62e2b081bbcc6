"""Heading slug generation for anchor ids"""

import re


TAG_RE = re.compile(r'<[^>]*>')


def slugify(text: str) -> str:
    """Convert heading text to a GitHub-style anchor slug."""
    text = text.lower().strip()
    text = TAG_RE.sub('', text)
    text = re.sub(r'[^\w\s-]', '', text)
    return re.sub(r'\s+', '-', text)
