"""Markdown/HTML document assembly — fixed header, one section per record, footer."""

from __future__ import annotations

from typing import Iterable

from .models import CommentBlock, FunctionRecord, RenderedDocument


def escape_html(text: str) -> str:
    """Escape &, < and > (ampersand first so entities are never double-escaped)."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


_STYLE = """<style>
body { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; margin: 2em auto; max-width: 60em; color: #24292f; }
h2 { border-bottom: 1px solid #d0d7de; padding-bottom: .3em; }
pre { background: #f6f8fa; padding: 1em; overflow-x: auto; border-radius: 6px; }
.source { color: #57606a; }
.toggle { cursor: pointer; margin-bottom: .5em; }
</style>"""

_TOGGLE_SCRIPT = """<script>
function toggleHelp(id) {
  var el = document.getElementById(id);
  el.style.display = (el.style.display === "none") ? "block" : "none";
}
</script>"""


class MarkdownDocument:
    """Accumulates Markdown sections under a level-1 title."""

    def __init__(self, title: str, fence_language: str = "") -> None:
        self.fence_language = fence_language
        self._parts: list[str] = [f"# {title}\n"]

    def _fence(self, text: str) -> str:
        body = f"{text}\n" if text else ""
        return f"```{self.fence_language}\n{body}```\n"

    def add_comment_block(self, block: CommentBlock) -> None:
        fenced = self._fence("\n".join(block.lines))
        self._parts.append(f"\n## {block.source.name}\n\n{fenced}")

    def add_function(self, record: FunctionRecord) -> None:
        self._parts.append(
            f"\n## {record.name}\n\n*From: {record.source_file.name}*\n\n"
            f"{self._fence(record.help_text)}"
        )

    def render(self) -> str:
        return "".join(self._parts)


class HtmlDocument:
    """Accumulates HTML sections; collapsible=True embeds the disclosure toggle script."""

    def __init__(self, title: str, collapsible: bool = False) -> None:
        self.collapsible = collapsible
        self._count = 0
        head = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{escape_html(title)}</title>",
            _STYLE,
        ]
        if collapsible:
            head.append(_TOGGLE_SCRIPT)
        head += ["</head>", "<body>", f"<h1>{escape_html(title)}</h1>"]
        self._parts: list[str] = ["\n".join(head) + "\n"]

    def add_comment_block(self, block: CommentBlock) -> None:
        code = escape_html("\n".join(block.lines))
        self._parts.append(
            f"<h2>{escape_html(block.source.name)}</h2>\n<pre><code>{code}</code></pre>\n"
        )
        self._count += 1

    def add_function(self, record: FunctionRecord) -> None:
        self._count += 1
        help_id = f"help-{self._count}"
        self._parts.append(
            f"<h2>{escape_html(record.name)}</h2>\n"
            f'<p class="source"><em>From: {escape_html(record.source_file.name)}</em></p>\n'
            f'<button class="toggle" type="button" onclick="toggleHelp(\'{help_id}\')">Show/Hide help</button>\n'
            f'<div id="{help_id}" style="display:none">\n'
            f"<pre><code>{escape_html(record.help_text)}</code></pre>\n"
            "</div>\n"
        )

    def render(self) -> str:
        return "".join(self._parts) + "</body>\n</html>\n"


def render_comment_blocks(blocks: Iterable[CommentBlock], title: str, fence_language: str = "") -> RenderedDocument:
    md = MarkdownDocument(title, fence_language)
    html = HtmlDocument(title)
    for block in blocks:
        md.add_comment_block(block)
        html.add_comment_block(block)
    return RenderedDocument(markdown=md.render(), html=html.render())


def render_functions(records: Iterable[FunctionRecord], title: str, fence_language: str = "") -> RenderedDocument:
    md = MarkdownDocument(title, fence_language)
    html = HtmlDocument(title, collapsible=True)
    for record in records:
        md.add_function(record)
        html.add_function(record)
    return RenderedDocument(markdown=md.render(), html=html.render())
