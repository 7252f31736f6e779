"""Terminal color & style helpers.

Decisions:
- Truecolor preferred; falls back to the 256-color cube if unsupported.
- Disabled when stdout is not a TTY unless FORCE_COLOR=1.
- NO_COLOR disables colors completely.
- Palette overrides come from the environment or the project .env file
  (real environment wins).
"""
from __future__ import annotations
import os, sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

ENV_FILE = Path(__file__).resolve().parent.parent / '.env'

# Default palette
PALETTE_DEFAULTS: Dict[str, str] = {
    'KANBAN_PRIMARY': '#476EAE',
    'KANBAN_TODO': '#48B3AF',
    'KANBAN_INPROGRESS': '#F6FF99',
    'KANBAN_DONE': '#A7E399',
    'KANBAN_DANGER': '#8B0000',
}


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"


def load_env_overrides(path: Path = ENV_FILE) -> Dict[str, str]:
    """Read KANBAN_* palette entries from a .env file; bad lines are skipped."""
    overrides: Dict[str, str] = {}
    if not path.exists():
        return overrides
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k, v = k.strip(), v.strip()
        if k in PALETTE_DEFAULTS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides


@dataclass
class Theme:
    enabled: bool
    truecolor: bool = False
    hex_palette: Dict[str, str] = field(default_factory=lambda: dict(PALETTE_DEFAULTS))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 isatty: Optional[bool] = None, env_file: Path = ENV_FILE) -> "Theme":
        env = os.environ if environ is None else environ
        tty = sys.stdout.isatty() if isatty is None else isatty
        force = env.get('FORCE_COLOR', '').lower() in {'1', 'true', 'yes', 'on'}
        enabled = (force or tty) and env.get('NO_COLOR') is None
        truecolor = enabled and any(tok in env.get('COLORTERM', '').lower() for tok in ('truecolor', '24bit'))
        file_overrides = load_env_overrides(env_file)
        palette = {}
        for key, default in PALETTE_DEFAULTS.items():
            value = env.get(key) or file_overrides.get(key, default)
            palette[key] = value if _is_hex(value) else default
        return cls(enabled=enabled, truecolor=truecolor, hex_palette=palette)

    # ---- escape sequences ----
    def code(self, part: str) -> str:
        return f"\033[{part}m" if self.enabled else ''

    def fg(self, key: str) -> str:
        if not self.enabled:
            return ''
        r, g, b = _hex_to_rgb(self.hex_palette[key])
        return _fg_truecolor(r, g, b) if self.truecolor else _fg_256(r, g, b)

    @property
    def reset(self) -> str:
        return self.code('0')

    @property
    def bold(self) -> str:
        return self.code('1')

    @property
    def dim(self) -> str:
        return self.code('2')

    @property
    def status_colors(self) -> Dict[str, str]:
        return {
            'todo': self.fg('KANBAN_TODO'),
            'in-progress': self.fg('KANBAN_INPROGRESS'),
            'done': self.fg('KANBAN_DONE'),
        }

    @property
    def header(self) -> str:
        return self.fg('KANBAN_PRIMARY')

    @property
    def danger(self) -> str:
        return self.fg('KANBAN_DANGER')

    def color(self, text: str, *styles: str) -> str:
        """Apply ANSI styles to a given text."""
        if not self.enabled:
            return text
        return ''.join(styles) + text + self.reset
