"""Static HTML page wrapped around a rendered fragment"""

from html import escape

from peekmd.core.models import RenderedDoc
from peekmd.core.utils.file_tree import render_file_tree


MERMAID_MARKER = '<pre class="mermaid">'
MERMAID_SCRIPT = (
    '<script type="module">\n'
    'import mermaid from "https://cdn.jsdelivr.net/npm/mermaid@11/dist/mermaid.esm.min.mjs";\n'
    'mermaid.initialize({ startOnLoad: true });\n'
    '</script>'
)

PAGE_CSS = """\
body { margin: 0; font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif; color: #1f2328; }
.repo-header { padding: 16px 32px; border-bottom: 1px solid #d1d9e0; }
.repo-header h1 { margin: 0; font-size: 20px; font-weight: 400; }
.topics { margin-top: 8px; }
.topic { display: inline-block; margin-right: 4px; padding: 0 10px; border-radius: 2em; background: #ddf4ff; color: #0969da; font-size: 12px; line-height: 22px; }
.file-box { max-width: 1012px; margin: 24px auto; border: 1px solid #d1d9e0; border-radius: 6px; }
.file-header { padding: 8px 16px; border-bottom: 1px solid #d1d9e0; background: #f6f8fa; font-weight: 600; }
.directory-table { width: 100%; border-collapse: collapse; font-size: 14px; }
.directory-table th { padding: 8px 16px; text-align: left; background: #f6f8fa; }
.directory-table td { padding: 8px 16px; border-top: 1px solid #d1d9e0; }
.directory-name svg { margin-right: 8px; vertical-align: text-bottom; color: #59636e; }
.directory-name a { color: #1f2328; text-decoration: none; }
.directory-size { color: #59636e; text-align: right; }
.markdown-body { padding: 32px; line-height: 1.5; }
.markdown-body .anchor { float: left; margin-left: -20px; padding-right: 4px; visibility: hidden; }
.markdown-body :is(h1, h2, h3, h4, h5, h6):hover .anchor { visibility: visible; }
.markdown-body pre { padding: 16px; overflow: auto; background: #f6f8fa; border-radius: 6px; }
.markdown-body blockquote { margin: 0; padding: 0 1em; color: #59636e; border-left: .25em solid #d1d9e0; }
.markdown-body .contains-task-list { list-style-type: none; padding-left: 0; }
.markdown-alert { margin-bottom: 16px; padding: .5rem 1rem; border-left: .25em solid #d1d9e0; }
.markdown-alert-title { display: flex; align-items: center; gap: 8px; font-weight: 500; }
.markdown-alert-note { border-left-color: #0969da; }
.markdown-alert-tip { border-left-color: #1a7f37; }
.markdown-alert-important { border-left-color: #8250df; }
.markdown-alert-warning { border-left-color: #9a6700; }
.markdown-alert-caution { border-left-color: #cf222e; }
"""

# Placeholders are filled with str.format; the CSS lives outside so its braces need no escaping.
PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<meta name="description" content="{description}">
<title>{filename} · {title}</title>
<style>
{css}{highlight_css}
</style>
</head>
<body>
<header class="repo-header">
<h1>{title}</h1>
<p>{description}</p>
<div class="topics">{topics}</div>
</header>
{files}
<div class="file-box">
<div class="file-header">{filename}</div>
<article class="markdown-body">
{content}
</article>
</div>
{scripts}
</body>
</html>
"""

FILES_BOX = '<div class="file-box">\n{table}\n</div>'


def render_page(doc: RenderedDoc, highlight_css: str = '') -> str:
    """Return a complete HTML page for doc; only the fragment and css are inserted unescaped."""
    topics = ''.join(f'<span class="topic">{escape(t)}</span>' for t in doc.topics)
    table = render_file_tree(doc.files)
    return PAGE.format(
        title=escape(doc.title),
        filename=escape(doc.filename),
        description=escape(doc.description),
        topics=topics,
        css=PAGE_CSS,
        highlight_css=highlight_css,
        files=FILES_BOX.format(table=table) if table else '',
        content=doc.html,
        scripts=MERMAID_SCRIPT if MERMAID_MARKER in doc.html else '',
    )
