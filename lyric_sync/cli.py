from __future__ import annotations

from dataclasses import replace
from pathlib import PurePath

import typer

from lyric_sync.app import PlaybackClock, build_presenter, run_player
from lyric_sync.config import load_config
from lyric_sync.errors import SourceUnavailable
from lyric_sync.logging_setup import setup_logging
from lyric_sync.lrc.parse import parse_lrc_with_stats
from lyric_sync.render.ansi import AnsiRenderer
from lyric_sync.sources.service import LyricsLoader
from lyric_sync.sync.resolver import NO_LINE, resolve_active_line


app = typer.Typer(no_args_is_help=True, add_completion=False)


def _fmt_ms(ms: int) -> str:
    m, rem = divmod(ms, 60_000)
    s, ms2 = divmod(rem, 1_000)
    return f"{m:02d}:{s:02d}.{ms2:03d}"


@app.command()
def parse(
    location: str = typer.Argument(..., help="LRC file path or http(s) URL"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print stats"),
):
    """Parse LRC and print stats and the resulting timeline."""
    loader = LyricsLoader(load_config())
    try:
        text = loader.fetch_text(location)
    except SourceUnavailable as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    timeline, stats = parse_lrc_with_stats(text)
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"lines_with_timestamps={stats.lines_with_timestamps}")
    typer.echo(f"lines_ignored={stats.lines_ignored}")
    typer.echo(f"lines_blank={stats.lines_blank}")
    typer.echo(f"events_total={stats.events_total}")
    if not quiet:
        for line in timeline:
            typer.echo(f"[{_fmt_ms(line.t_ms)}] {line.text}")


@app.command()
def resolve(
    location: str = typer.Argument(..., help="LRC file path or http(s) URL"),
    position_ms: int = typer.Argument(..., help="Playback position in milliseconds"),
):
    """Print the line active at a playback position."""
    loader = LyricsLoader(load_config())
    try:
        timeline = loader.load(location)
    except SourceUnavailable as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    idx = resolve_active_line(timeline, position_ms)
    if idx == NO_LINE:
        typer.echo("none")
    else:
        typer.echo(f"{idx}\t[{_fmt_ms(timeline[idx].t_ms)}] {timeline[idx].text}")


@app.command()
def play(
    location: str = typer.Argument(..., help="LRC file path or http(s) URL"),
    start_ms: int = typer.Option(0, "--start-ms", help="Start position (ms)"),
    speed: float = typer.Option(1.0, "--speed", help="Playback speed multiplier"),
    duration_ms: int | None = typer.Option(None, "--duration-ms", help="Stop at this position (default: last line + 5s)"),
    line_spacing: float | None = typer.Option(None, "--line-spacing", help="Scroll units per line"),
    damping: float | None = typer.Option(None, "--damping", help="Fraction of remaining distance per tick (0..1)"),
    epsilon: float | None = typer.Option(None, "--epsilon", help="Distance at which scrolling settles"),
    refresh_hz: float | None = typer.Option(None, "--refresh-hz", help="Redraw frequency (Hz)"),
    no_alt_screen: bool = typer.Option(False, "--no-alt-screen", help="Do not use alternate screen buffer"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Play lyrics against a simulated playback clock with smooth scrolling.
    """
    cfg = load_config()
    overrides = {
        "line_spacing": line_spacing,
        "damping": damping,
        "epsilon": epsilon,
        "refresh_hz": refresh_hz,
    }
    cfg = replace(cfg, **{k: v for k, v in overrides.items() if v is not None})
    if no_alt_screen:
        cfg = replace(cfg, use_alt_screen=False)

    setup_logging(debug)
    timeline = LyricsLoader(cfg).load_or_empty(location)
    renderer = AnsiRenderer(
        use_alt_screen=cfg.use_alt_screen,
        rows_per_line=cfg.rows_per_line,
        placeholder=cfg.placeholder,
    )
    try:
        presenter = build_presenter(cfg)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    clock = PlaybackClock(start_ms=start_ms, speed=speed)
    code = run_player(
        cfg,
        presenter,
        timeline,
        clock,
        renderer,
        title=PurePath(location).stem or location,
        duration_ms=duration_ms,
    )
    raise typer.Exit(code=code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
