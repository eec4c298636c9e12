"""SongExporter: renders song sheets and writes them to disk."""

from __future__ import annotations

from typing import Final

from songchord.song_models import SongSheet
from songchord.song_renderers import (
    HtmlRenderer,
    MarkdownRenderer,
    PlainTextRenderer,
    SongRenderer,
)

SUPPORTED_FORMATS: Final[set[str]] = {"text", "html", "md"}


class SongExporter:
    """
    Write a song sheet via a pluggable renderer.

    Supported formats:
    - ``text``: plain text, chord lines kept in their original columns.
    - ``html``: self-contained HTML page with highlighted chord lines.
    - ``md``: Markdown with the lyrics in a fenced block.
    """

    def __init__(self, output_format: str = "text") -> None:
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.output_format = normalized
        self.renderer = self._build_renderer(normalized)

    def _build_renderer(self, output_format: str) -> SongRenderer:
        if output_format == "html":
            return HtmlRenderer()
        if output_format == "md":
            return MarkdownRenderer()
        return PlainTextRenderer()

    @property
    def default_extension(self) -> str:
        return self.renderer.default_extension

    def render(self, sheet: SongSheet) -> str:
        return self.renderer.render(sheet=sheet)

    def export(self, sheet: SongSheet, output_path: str) -> None:
        """
        Render *sheet* in the selected format and write it to *output_path*.

        Raises:
            OSError: If the output file cannot be written.
        """
        content = self.render(sheet)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
