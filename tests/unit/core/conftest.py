"""Shared fixtures for core unit tests"""

import pytest

from peekmd.core.parse import create_parser


SAMPLE_MD = """\
# Project Title

A paragraph with **bold**, ~~struck~~ and `code`.

## Tasks

- [ ] write docs
- [x] ship it
  - [ ] nested follow-up

> [!NOTE]
> Alerts are rewritten after rendering.

```python
print("hello")
```

```mermaid
graph TD
  A --> B
```

Here is a footnote[^1].

[^1]: The footnote text.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="parser")
def parser_fixture():
    return create_parser()


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)

