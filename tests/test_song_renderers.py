"""Unit tests for the song sheet renderers."""

from songchord.song_models import LineType, LyricLine, SongSheet
from songchord.song_renderers import HtmlRenderer, MarkdownRenderer, PlainTextRenderer


def _sample_sheet(**overrides: object) -> SongSheet:
    fields: dict[str, object] = {
        "title": "Amazing Grace",
        "artist": "John Newton",
        "category": "Hymn",
        "original_key": "G",
        "display_key": "A",
        "lines": [
            LyricLine(type=LineType.CHORD, content="    A        D"),
            LyricLine(type=LineType.TEXT, content="Amazing grace"),
            LyricLine(type=LineType.EMPTY, content=""),
            LyricLine(type=LineType.TEXT, content="How sweet the sound"),
        ],
    }
    fields.update(overrides)
    return SongSheet(**fields)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------

def test_text_renderer_header() -> None:
    content = PlainTextRenderer().render(sheet=_sample_sheet())
    assert content.splitlines()[:3] == [
        "Amazing Grace",
        "John Newton",
        "Key: A (transposed from G)  |  Hymn",
    ]


def test_text_renderer_keeps_chord_columns() -> None:
    content = PlainTextRenderer().render(sheet=_sample_sheet())
    assert "\n    A        D\nAmazing grace\n\nHow sweet the sound\n" in content


def test_text_renderer_without_key_or_category() -> None:
    sheet = _sample_sheet(category=None, original_key=None, display_key=None)
    content = PlainTextRenderer().render(sheet=sheet)
    assert content.splitlines()[:3] == ["Amazing Grace", "John Newton", ""]


def test_text_renderer_untransposed_key() -> None:
    content = PlainTextRenderer().render(sheet=_sample_sheet(display_key="G"))
    assert "Key: G  |  Hymn" in content
    assert "transposed" not in content


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def test_html_renderer_is_valid_html_skeleton() -> None:
    html = HtmlRenderer().render(sheet=_sample_sheet())
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Amazing Grace</title>" in html
    assert "<h1>Amazing Grace</h1>" in html
    assert "</html>" in html


def test_html_renderer_marks_chord_lines() -> None:
    html = HtmlRenderer().render(sheet=_sample_sheet())
    assert '<div class="line chord">    A        D</div>' in html
    assert '<div class="line text">Amazing grace</div>' in html


def test_html_renderer_empty_line_spacer() -> None:
    html = HtmlRenderer().render(sheet=_sample_sheet())
    assert html.count('<div class="line empty"></div>') == 1


def test_html_renderer_key_badge() -> None:
    html = HtmlRenderer().render(sheet=_sample_sheet())
    assert '<span class="badge key">Key: A (transposed from G)</span>' in html
    assert '<span class="badge">Hymn</span>' in html


def test_html_renderer_no_badges_without_key_or_category() -> None:
    sheet = _sample_sheet(category=None, original_key=None, display_key=None)
    html = HtmlRenderer().render(sheet=sheet)
    assert 'class="badges"' not in html


def test_html_renderer_escapes_content() -> None:
    sheet = _sample_sheet(
        title="Fur & Feathers",
        lines=[LyricLine(type=LineType.TEXT, content="<b>loud</b>")],
    )
    html = HtmlRenderer().render(sheet=sheet)
    assert "Fur &amp; Feathers" in html
    assert "&lt;b&gt;loud&lt;/b&gt;" in html
    assert "<b>loud</b>" not in html


def test_html_renderer_preserves_whitespace_in_lyrics() -> None:
    html = HtmlRenderer().render(sheet=_sample_sheet())
    assert "white-space: pre" in html


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

def test_markdown_renderer_has_heading() -> None:
    content = MarkdownRenderer().render(sheet=_sample_sheet())
    assert content.startswith("# Amazing Grace")


def test_markdown_renderer_metadata_line() -> None:
    content = MarkdownRenderer().render(sheet=_sample_sheet())
    assert "**John Newton** · Key: A (transposed from G) · Hymn" in content


def test_markdown_renderer_fences_lyrics() -> None:
    content = MarkdownRenderer().render(sheet=_sample_sheet())
    assert "```text\n    A        D\nAmazing grace\n\nHow sweet the sound\n```" in content


def test_markdown_renderer_lengthens_fence_around_backticks() -> None:
    sheet = _sample_sheet(lines=[LyricLine(type=LineType.TEXT, content="```")])
    content = MarkdownRenderer().render(sheet=sheet)
    assert "````text\n```\n````" in content


def test_markdown_renderer_fence_outgrows_longest_backtick_run() -> None:
    sheet = _sample_sheet(
        lines=[
            LyricLine(type=LineType.TEXT, content="``"),
            LyricLine(type=LineType.TEXT, content="````"),
        ]
    )
    content = MarkdownRenderer().render(sheet=sheet)
    assert content.endswith("`````text\n``\n````\n`````\n")


def test_markdown_renderer_is_plain_markdown() -> None:
    content = MarkdownRenderer().render(sheet=_sample_sheet())
    assert "<script" not in content
    assert content.endswith("How sweet the sound\n```\n")


def test_default_extensions() -> None:
    assert PlainTextRenderer().default_extension == ".txt"
    assert HtmlRenderer().default_extension == ".html"
    assert MarkdownRenderer().default_extension == ".md"
