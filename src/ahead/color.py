import os
import sys

from click import style

COLOR_MODES = ('auto', 'always', 'never')


def should_use_color(color_option: str, stream=None) -> bool:
    """Resolve a `--color` mode for `stream` (default: stdout).

    'auto' colors only a TTY, and honors a non-empty $NO_COLOR. Resolve before
    a `Pager` swaps out stdout.
    """
    if color_option not in COLOR_MODES:
        raise ValueError(f"Unknown color mode {color_option!r}; expected one of {COLOR_MODES}")
    if color_option != 'auto':
        return color_option == 'always'
    if os.environ.get('NO_COLOR'):
        return False
    return (stream or sys.stdout).isatty()


def paint(text: str, fg: str, use_color: bool) -> str:
    """Wrap `text` in ANSI color codes (reset afterwards), if `use_color`."""
    return style(text, fg=fg) if use_color else text
