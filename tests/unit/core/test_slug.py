"""Unit tests for core/utils/slug.py"""

import pytest

from peekmd.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("hello world", "hello-world"),
    ("Hello! World?", "hello-world"),
    ("Hello <code>World</code>", "hello-world"),
    ("hello   world", "hello-world"),
    ("  hello world  ", "hello-world"),
    ("hello_world", "hello_world"),
    ("Version 2.0", "version-20"),
    ("", ""),
    ("!@#$%", ""),
])
def test_slugify_basic(text, expected):
    """slugify lowercases, drops punctuation and tags, and hyphenates whitespace."""
    assert slugify(text) == expected


def test_slugify_preserves_hyphens():
    """slugify keeps existing hyphens intact."""
    assert slugify("already-slugified") == "already-slugified"


def test_slugify_is_idempotent():
    """A slug is a fixed point of slugify."""
    slug = slugify("Getting Started: Install & Run")
    assert slugify(slug) == slug


def test_slugify_markup_stripped_first():
    """Tagged and untagged versions of the same heading text share a slug."""
    assert slugify("Use <em>render</em> now") == slugify("Use render now")
