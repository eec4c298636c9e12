"""Renderer implementations for song sheet output formats."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from songchord.song_models import LineType, SongSheet


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _key_label(sheet: SongSheet) -> str | None:
    """'Key: D (transposed from C)', 'Key: C', or None when no key is known."""
    if sheet.display_key is None:
        return None
    if sheet.is_transposed:
        return f"Key: {sheet.display_key} (transposed from {sheet.original_key})"
    return f"Key: {sheet.display_key}"


class SongRenderer(ABC):
    """Abstract song sheet renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, *, sheet: SongSheet) -> str:
        """Render a song sheet into a file content string."""


class PlainTextRenderer(SongRenderer):
    """Render a song sheet as plain text, chord lines kept in their columns."""

    @property
    def default_extension(self) -> str:
        return ".txt"

    def render(self, *, sheet: SongSheet) -> str:
        header = [sheet.title, sheet.artist]
        details = [text for text in (_key_label(sheet), sheet.category) if text]
        if details:
            header.append("  |  ".join(details))

        body = [line.content for line in sheet.lines]
        return "\n".join(header + [""] + body) + "\n"


class HtmlRenderer(SongRenderer):
    """
    Render a song sheet as a self-contained HTML page.

    Every lyric line becomes a ``.line`` div in a monospace block with
    ``white-space: pre`` so chords stay aligned over the words. Chord lines
    additionally carry the ``chord`` class; empty lines become fixed-height
    spacers.
    """

    @property
    def default_extension(self) -> str:
        return ".html"

    def render(self, *, sheet: SongSheet) -> str:
        title_safe = _escape_html(sheet.title)
        badges = self._render_badges(sheet)
        lines = "\n".join(self._render_line(line.type, line.content) for line in sheet.lines)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title_safe}</title>
  <style>
    *, *::before, *::after {{ box-sizing: border-box; }}
    body {{
      font-family: Georgia, serif;
      background: #f0f0f0;
      margin: 0;
      padding: 2rem;
    }}
    .song {{
      background: #fff;
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.15);
      margin: 0 auto;
      max-width: 860px;
      padding: 1.5rem 2rem;
    }}
    h1 {{
      font-size: 1.8rem;
      margin: 0 0 0.25rem;
      color: #222;
    }}
    .artist {{
      font-size: 1.2rem;
      color: #555;
      margin: 0 0 1rem;
    }}
    .badge {{
      display: inline-block;
      font-size: 0.85rem;
      padding: 0.2rem 0.6rem;
      margin-right: 0.5rem;
      border-radius: 4px;
      background: #eee;
      color: #333;
    }}
    .badge.key {{
      background: #dbeafe;
      color: #1e40af;
    }}
    .lyrics {{
      font-family: "Courier New", monospace;
      white-space: pre;
      overflow-x: auto;
      margin-top: 1.5rem;
      padding: 1rem;
      background: #fafafa;
    }}
    .line.chord {{
      color: #2563eb;
      font-weight: bold;
    }}
    .line.empty {{
      height: 1rem;
    }}
    @media print {{
      body {{
        background: #fff;
        padding: 0;
      }}
      .song {{
        box-shadow: none;
        max-width: 100%;
      }}
    }}
  </style>
</head>
<body>
  <div class="song">
    <h1>{title_safe}</h1>
    <p class="artist">{_escape_html(sheet.artist)}</p>
{badges}    <div class="lyrics">
{lines}
    </div>
  </div>
</body>
</html>"""

    def _render_badges(self, sheet: SongSheet) -> str:
        badges: list[str] = []
        key_label = _key_label(sheet)
        if key_label:
            badges.append(f'<span class="badge key">{_escape_html(key_label)}</span>')
        if sheet.category:
            badges.append(f'<span class="badge">{_escape_html(sheet.category)}</span>')
        if not badges:
            return ""
        return f'    <div class="badges">{"".join(badges)}</div>\n'

    def _render_line(self, line_type: LineType, content: str) -> str:
        if line_type is LineType.EMPTY:
            return '      <div class="line empty"></div>'
        return f'      <div class="line {line_type.value}">{_escape_html(content)}</div>'


class MarkdownRenderer(SongRenderer):
    """
    Render a song sheet as Markdown.

    The lyrics go into a fenced block so chord columns survive Markdown
    rendering. The fence is one backtick longer than any backtick run in the
    lyrics.
    """

    @property
    def default_extension(self) -> str:
        return ".md"

    def render(self, *, sheet: SongSheet) -> str:
        details = [f"**{sheet.artist}**"]
        key_label = _key_label(sheet)
        if key_label:
            details.append(key_label)
        if sheet.category:
            details.append(sheet.category)

        summary = " · ".join(details)
        lyrics = "\n".join(line.content for line in sheet.lines)
        longest_run = max((len(run) for run in re.findall(r"`+", lyrics)), default=2)
        fence = "`" * (longest_run + 1)

        return f"""# {sheet.title}

{summary}

{fence}text
{lyrics}
{fence}
"""
