"""songchord CLI entry point."""

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from songchord import __version__
from songchord.chord_transposer import calculate_interval, root_index
from songchord.lyric_parser import detect_original_key, parse_lyrics
from songchord.song_exporter import SUPPORTED_FORMATS, SongExporter
from songchord.song_models import LineType, Song, SongSheet
from songchord.song_requests import MAX_SEMITONES, MIN_SEMITONES, SongCreateRequest
from songchord.song_service import SongService

DEFAULT_ARTIST = "Unknown"

SEMITONES = click.IntRange(MIN_SEMITONES, MAX_SEMITONES)


def _read_lyrics(lyrics_file: str) -> str:
    return Path(lyrics_file).read_text(encoding="utf-8")


def _title_from_path(lyrics_file: str) -> str:
    return Path(lyrics_file).stem.replace("_", " ")


def _load_song(
    service: SongService,
    lyrics_file: str,
    title: str | None,
    artist: str | None,
    key: str | None,
) -> Song:
    """Store the lyrics file as a song record, exiting on invalid input."""
    try:
        request = SongCreateRequest(
            title=title if title is not None else _title_from_path(lyrics_file),
            artist=artist if artist is not None else DEFAULT_ARTIST,
            lyrics=_read_lyrics(lyrics_file),
            original_key=key,
        )
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        click.echo(f"  ERROR: Invalid song — {errors}", err=True)
        sys.exit(1)
    return service.create(request)


def _default_output(lyrics_file: str, exporter: SongExporter) -> str:
    """Input path with the format's extension, never the input file itself."""
    lyrics_path = Path(lyrics_file)
    candidate = lyrics_path.with_suffix(exporter.default_extension)
    if candidate == lyrics_path:
        candidate = lyrics_path.with_name(f"{lyrics_path.stem}_sheet{exporter.default_extension}")
    return str(candidate)


def _build_sheet(service: SongService, song: Song, semitones: int) -> SongSheet:
    if semitones == 0:
        return SongSheet.from_detail(service.get_detail(song.id))
    return SongSheet.from_transposed(service.transpose(song.id, semitones))


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="songchord")
@click.option("--verbose", "-v", is_flag=True, help="Log song service activity to stderr.")
def main(verbose: bool) -> None:
    """songchord — song lyrics with chords, formatting and transposition."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


# ── show subcommand ────────────────────────────────────────────────────────────

@main.command()
@click.argument("lyrics_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option("--color/--no-color", default=True, show_default=True, help="Highlight chord lines.")
def show(lyrics_file: str, color: bool) -> None:
    """
    Print a lyrics file with chord lines highlighted.

    \b
    Examples:
      songchord show amazing_grace.txt
      songchord show amazing_grace.txt --no-color
    """
    for line in parse_lyrics(_read_lyrics(lyrics_file)):
        if line.type is LineType.CHORD and color:
            click.echo(click.style(line.content, fg="blue", bold=True))
        else:
            click.echo(line.content)


# ── key subcommand ─────────────────────────────────────────────────────────────

@main.command()
@click.argument("lyrics_file", type=click.Path(exists=True, dir_okay=False, readable=True))
def key(lyrics_file: str) -> None:
    """Print the key guessed from the first chord of a lyrics file."""
    detected = detect_original_key(_read_lyrics(lyrics_file))
    if detected is None:
        click.echo("  WARNING: No chord line found.", err=True)
        sys.exit(1)
    click.echo(detected)


# ── interval subcommand ────────────────────────────────────────────────────────

@main.command()
@click.argument("from_key")
@click.argument("to_key")
def interval(from_key: str, to_key: str) -> None:
    """
    Print how many semitones up from FROM_KEY lands on TO_KEY (0-11).

    \b
    Examples:
      songchord interval C D      # 2
      songchord interval G E      # 9
    """
    for name in (from_key, to_key):
        if root_index(name) is None:
            click.echo(f"  WARNING: '{name}' is not a recognized key.", err=True)
    click.echo(calculate_interval(from_key, to_key))


# ── transpose subcommand ───────────────────────────────────────────────────────

@main.command()
@click.argument("lyrics_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option(
    "--semitones",
    "-s",
    type=SEMITONES,
    required=True,
    help=f"Semitones to shift every chord by ({MIN_SEMITONES} to {MAX_SEMITONES}).",
)
@click.option(
    "--key",
    "original_key",
    default=None,
    metavar="KEY",
    help="Original key of the song. Detected from the first chord line if omitted.",
)
@click.option("--title", default=None, metavar="TEXT", help="Song title. Defaults to the filename stem.")
@click.option("--artist", default=None, metavar="TEXT", help=f"Song artist. Defaults to '{DEFAULT_ARTIST}'.")
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Write the transposed lyrics here instead of printing them.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full transposed song as JSON.")
def transpose(
    lyrics_file: str,
    semitones: int,
    original_key: str | None,
    title: str | None,
    artist: str | None,
    output: str | None,
    as_json: bool,
) -> None:
    """
    Transpose every chord in a lyrics file.

    LYRICS_FILE is a UTF-8 text file with chord lines above the lyric lines.

    \b
    Examples:
      songchord transpose amazing_grace.txt -s 2
      songchord transpose amazing_grace.txt -s -3 --key G -o in_e.txt
      songchord transpose amazing_grace.txt -s 5 --json
    """
    service = SongService()
    song = _load_song(service, lyrics_file, title, artist, original_key)
    result = service.transpose(song.id, semitones)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    if output is None:
        click.echo(result.lyrics)
        return

    click.echo(f"songchord v{__version__}")
    click.echo(f"  Song   : {result.title}")
    click.echo(f"  Key    : {result.original_key or '?'} → {result.transposed_key or '?'}  ({semitones:+d})")
    click.echo(f"  Output : {output}")
    try:
        Path(output).write_text(result.lyrics, encoding="utf-8")
    except OSError as exc:
        click.echo(f"  ERROR: Could not write lyrics file — {exc}", err=True)
        sys.exit(1)
    click.echo()
    click.echo(f"Done!  Transposed lyrics written to '{output}'.")


# ── export subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.argument("lyrics_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(SUPPORTED_FORMATS), case_sensitive=False),
    default="html",
    show_default=True,
    help="Sheet output format: plain text, self-contained HTML, or Markdown.",
)
@click.option(
    "--semitones",
    "-s",
    type=SEMITONES,
    default=0,
    show_default=True,
    help="Transpose the song before rendering.",
)
@click.option("--key", "original_key", default=None, metavar="KEY", help="Original key of the song.")
@click.option("--title", default=None, metavar="TEXT", help="Song title. Defaults to the filename stem.")
@click.option("--artist", default=None, metavar="TEXT", help=f"Song artist. Defaults to '{DEFAULT_ARTIST}'.")
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file path. Defaults to an extension based on --format.",
)
def export(
    lyrics_file: str,
    output_format: str,
    semitones: int,
    original_key: str | None,
    title: str | None,
    artist: str | None,
    output: str | None,
) -> None:
    """
    Render a lyrics file as a song sheet (text, HTML or Markdown).

    \b
    Examples:
      songchord export amazing_grace.txt
      songchord export amazing_grace.txt --format md -o grace.md
      songchord export amazing_grace.txt -s 2 --key G --artist "John Newton"
    """
    exporter = SongExporter(output_format=output_format)
    resolved_output = output if output is not None else _default_output(lyrics_file, exporter)

    service = SongService()
    song = _load_song(service, lyrics_file, title, artist, original_key)

    click.echo(f"songchord v{__version__}")
    click.echo(f"  Lyrics : {lyrics_file}")
    click.echo(f"  Format : {exporter.output_format}")
    click.echo(f"  Title  : {song.title}")
    click.echo(f"  Output : {resolved_output}")
    click.echo()

    sheet = _build_sheet(service, song, semitones)
    try:
        exporter.export(sheet, resolved_output)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)

    click.echo(f"Done!  Song sheet written to '{resolved_output}'.")
