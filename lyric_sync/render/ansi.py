from __future__ import annotations

import shutil
import signal
import sys
from dataclasses import dataclass
from typing import Callable

import colorama

from lyric_sync.sync.presenter import RenderState

CSI = "\x1b["


def _sgr(*codes: int) -> str:
    return CSI + ";".join(str(c) for c in codes) + "m"


@dataclass(frozen=True, slots=True)
class Theme:
    title: str = _sgr(36, 1)  # cyan bold
    current: str = _sgr(97, 1)  # bright white bold
    dim: str = _sgr(90)  # bright black
    placeholder: str = _sgr(90, 3)  # dim italic
    reset: str = _sgr(0)


class AnsiRenderer:
    """
    Terminal surface for RenderState: the focus row sits in the middle of
    the screen and every line is painted at its scroll-adjusted row.
    """

    def __init__(
        self,
        use_alt_screen: bool = True,
        theme: Theme | None = None,
        *,
        rows_per_line: int = 1,
        placeholder: str = "No lyrics",
    ):
        self.use_alt_screen = use_alt_screen
        self.theme = theme or Theme()
        self.rows_per_line = max(rows_per_line, 1)
        self.placeholder = placeholder
        self._entered = False
        self._resize_handler: Callable[..., None] | None = None
        self._last_render_args: tuple[str, RenderState] | None = None

    def __enter__(self):
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exit()

    def enter(self) -> None:
        if self._entered:
            return
        colorama.just_fix_windows_console()
        if self.use_alt_screen:
            sys.stdout.write(CSI + "?1049h")  # alt screen
        sys.stdout.write(CSI + "?25l")  # hide cursor
        sys.stdout.write(CSI + "H" + CSI + "2J")  # home + clear
        sys.stdout.flush()
        self._entered = True

        def _on_resize(signum=None, frame=None):
            if self._last_render_args:
                self.render(*self._last_render_args)

        self._resize_handler = _on_resize
        if hasattr(signal, "SIGWINCH"):
            signal.signal(signal.SIGWINCH, _on_resize)

    def exit(self) -> None:
        if not self._entered:
            return
        if self._resize_handler and hasattr(signal, "SIGWINCH"):
            signal.signal(signal.SIGWINCH, signal.SIG_DFL)
        self._resize_handler = None
        sys.stdout.write(self.theme.reset)
        sys.stdout.write(CSI + "?25h")  # show cursor
        if self.use_alt_screen:
            sys.stdout.write(CSI + "?1049l")  # normal screen
        sys.stdout.flush()
        self._entered = False
        self._last_render_args = None

    def frame(self, title: str, state: RenderState, cols: int, rows: int) -> list[str]:
        # reserve 1 line for title
        body_rows = max(rows - 1, 1)
        focus = body_rows // 2
        body = [""] * body_rows

        if not state.has_lyrics:
            body[focus] = self._center(self.placeholder, cols, self.theme.placeholder)
        else:
            # round the scroll once so lines stay exactly rows_per_line apart
            shift = round(state.scroll_offset / state.line_spacing * self.rows_per_line)
            for i, line in enumerate(state.lines):
                row = focus + i * self.rows_per_line - shift
                if not 0 <= row < body_rows:
                    continue
                style = self.theme.current if state.is_active(i) else self.theme.dim
                body[row] = self._center(line.text, cols, style)

        header = f"{self.theme.title}♫ {title[: max(cols - 4, 0)]} ♫{self.theme.reset}"
        return [header, *body]

    def _center(self, text: str, cols: int, style: str) -> str:
        text = text[:cols]
        pad = max((cols - len(text)) // 2, 0)
        return " " * pad + f"{style}{text}{self.theme.reset}"

    def render(self, title: str, state: RenderState) -> None:
        # Store args for SIGWINCH redraw
        self._last_render_args = (title, state)

        cols, rows = shutil.get_terminal_size(fallback=(80, 24))
        out = self.frame(title, state, cols, rows)

        # move home + clear, then print full frame
        sys.stdout.write(CSI + "H" + CSI + "2J")
        sys.stdout.write("\n".join(out))
        sys.stdout.write(self.theme.reset)
        sys.stdout.flush()
