"""Terminal host: runs a render callback once per command line.

Each cycle clears the screen, draws the frame the callback produced and
reads one line. A line naming a button key (``3>``, ``3x``, ``add``) becomes
that button's click in the next frame; ``add <text>`` or any other text is
submitted to the focused text input.
"""
from __future__ import annotations
import logging
import re
import shutil
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from frame import DANGER, TextInputResponse, Ui
from theme import Theme

logger = logging.getLogger(__name__)

MIN_COL_WIDTH = 18
SEP = " | "
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
BUTTON_LIKE_RE = re.compile(r"^\d+\S$")

# --- terminal control helpers ---
# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home); 3J first
# is more reliable in some terminals.


def _clear_screen() -> None:  # pragma: no cover
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:  # pragma: no cover
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:  # pragma: no cover
    print("\033[?1049l", end="", flush=True)


def visible_len(s: str) -> int:
    return len(ANSI_RE.sub('', s))


@dataclass
class FrameState:
    """What happened between two frames, and what the last frame drew."""
    click: Optional[str] = None
    submit_key: Optional[str] = None
    submit_text: str = ""
    focus: Optional[str] = None
    buttons: Dict[str, str] = field(default_factory=dict)
    inputs: List[str] = field(default_factory=list)

    def begin_frame(self) -> None:
        self.buttons = {}
        self.inputs = []

    def end_frame(self) -> None:
        self.click = None
        self.submit_key = None
        self.submit_text = ""

    def input_target(self) -> Optional[str]:
        if self.focus in self.inputs:
            return self.focus
        return self.inputs[0] if self.inputs else None


Token = Tuple[str, int]  # (styled text, visible width)


class TerminalUi(Ui):
    def __init__(self, state: FrameState, theme: Theme, kind: str = "root"):
        self.state = state
        self.theme = theme
        self.kind = kind
        self.nodes: List[tuple] = []

    # ---- static widgets ----
    def heading(self, text: str) -> None:
        self.nodes.append(("heading", text))

    def label(self, text: str, tone: Optional[str] = None) -> None:
        self.nodes.append(("label", text, tone))

    def separator(self) -> None:
        self.nodes.append(("separator",))

    def add_space(self, amount: float) -> None:
        self.nodes.append(("space",))

    # ---- interactive widgets ----
    def text_input(self, key: str, value: str, hint: str = "") -> TextInputResponse:
        self.state.inputs.append(key)
        if self.state.submit_key == key:
            response = TextInputResponse(self.state.submit_text, submitted=True)
        else:
            response = TextInputResponse(value)
        self.nodes.append(("input", key, response.value, hint))
        return response

    def button(self, key: str, label: str, fill: Optional[str] = None,
               min_width: Optional[int] = None) -> bool:
        self.state.buttons[key] = label
        self.nodes.append(("button", key, fill))
        return self.state.click == key

    def request_focus(self, key: str) -> None:
        self.state.focus = key

    # ---- layout ----
    def _child(self, kind: str) -> "TerminalUi":
        child = TerminalUi(self.state, self.theme, kind)
        self.nodes.append(("child", child))
        return child

    def _close_child(self, child: Ui) -> None:
        pass

    # -------------------- rendering --------------------
    def render(self, width: int) -> List[str]:
        if self.kind == "columns":
            return self._render_columns(width)
        if self.kind == "horizontal":
            return self._fill(self._inline_tokens(), width)
        lines: List[str] = []
        for node in self.nodes:
            lines.extend(self._render_node(node, width))
        return lines

    def _render_node(self, node: tuple, width: int) -> List[str]:
        t = self.theme
        kind = node[0]
        if kind == "heading":
            return [t.color(node[1], t.header, t.bold)]
        if kind == "separator":
            return [t.color('-' * width, t.header)]
        if kind == "space":
            return ['']
        if kind == "child":
            return node[1].render(width)
        return self._fill(self._node_tokens(node), width)

    def _node_tokens(self, node: tuple) -> List[Token]:
        t = self.theme
        kind = node[0]
        if kind in ("heading", "label"):
            if kind == "heading":
                style = t.bold
            else:
                style = t.status_colors.get(node[2], '') if node[2] else ''
            return [(t.color(w, style) if style else w, len(w)) for w in node[1].split()] or [('', 0)]
        if kind == "button":
            text = f"[{node[1]}]"
            return [(t.color(text, t.danger if node[2] == DANGER else t.header, t.bold), len(text))]
        if kind == "input":
            _, key, value, hint = node
            shown = value if value else t.color(hint or '...', t.dim)
            text = f"> {shown}_"
            return [(text, visible_len(text))]
        if kind == "child":
            return node[1]._inline_tokens()
        return []

    def _inline_tokens(self) -> List[Token]:
        tokens: List[Token] = []
        for node in self.nodes:
            tokens.extend(self._node_tokens(node))
        return tokens

    @staticmethod
    def _fill(tokens: List[Token], width: int) -> List[str]:
        """Greedy word wrap over styled tokens."""
        lines: List[str] = []
        current, current_len = '', 0
        for text, size in tokens:
            candidate_len = size if not current_len else current_len + 1 + size
            if current_len and candidate_len > width:
                lines.append(current)
                current, current_len = text, size
            else:
                current = text if not current_len else current + ' ' + text
                current_len = candidate_len
        if current_len or not lines:
            lines.append(current)
        return lines

    def _render_columns(self, width: int) -> List[str]:
        cols = [node[1] for node in self.nodes if node[0] == "child"]
        if not cols:
            return []
        sep_total = len(SEP) * (len(cols) - 1)
        col_width = max(MIN_COL_WIDTH, (width - sep_total) // len(cols))
        rendered = [col.render(col_width) for col in cols]
        rows = max(len(r) for r in rendered)
        out: List[str] = []
        for r in range(rows):
            cells: List[str] = []
            for col_lines in rendered:
                line = col_lines[r] if r < len(col_lines) else ''
                pad = col_width - visible_len(line)
                cells.append(line + ' ' * pad if pad > 0 else line)
            out.append(SEP.join(cells).rstrip())
        return out


class TerminalHost:
    def __init__(self, app, theme: Theme, alt_screen: bool = True,
                 input_fn: Callable[[str], str] = input):
        self.app = app
        self.theme = theme
        self.alt_screen = alt_screen
        self.input_fn = input_fn
        self.state = FrameState()
        self.message: Optional[str] = None

    def _pass(self) -> TerminalUi:
        self.state.begin_frame()
        root = TerminalUi(self.state, self.theme)
        try:
            self.app.update(root)
        finally:
            self.state.end_frame()
        return root

    def frame(self, width: int) -> List[str]:
        """Run the callback and return the drawn lines.

        A pass that consumed a click or a submission drew the state from
        before its own actions were applied, so it is followed by a clean
        pass whose output is what gets shown.
        """
        had_input = self.state.click is not None or self.state.submit_key is not None
        root = self._pass()
        if had_input:
            root = self._pass()
        return root.render(width)

    def handle_line(self, line: str) -> bool:
        """Queue the line for the next frame; False means quit."""
        stripped = line.strip()
        lower = stripped.lower()
        if lower in ('exit', 'quit', ':q'):
            return False
        if not stripped:
            return True
        if stripped in self.state.buttons:
            self.state.click = stripped
            return True
        if lower.startswith('add '):
            line = stripped[4:]
        elif BUTTON_LIKE_RE.match(stripped):
            self.message = f"No button {stripped}. Type 'help' for instructions."
            return True
        target = self.state.input_target()
        if target is None:
            self.message = "Nothing to type into."
            return True
        self.state.submit_key = target
        self.state.submit_text = line
        return True

    def _help(self) -> None:
        print("Commands:")
        print("  <text>              Type text into the input and press Enter")
        print("  add <text>          Same, for text that looks like a button")
        for key, label in self.state.buttons.items():
            print(f"  {key:<19} Click {label}")
        print("  help                Show this help (press Enter to return)")
        print("  exit                Quit")

    def run(self) -> int:
        """Main loop; the board is cleared and redrawn each cycle."""
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                width = shutil.get_terminal_size((120, 30)).columns
                lines = self.frame(width)
                _clear_screen()
                print(self.app.title)
                for line in lines:
                    print(line)
                if self.message:
                    print(f"\n{self.message}")
                    self.message = None
                line = self.input_fn("\n: ")
                if line.strip().lower() == 'help':
                    _clear_screen()
                    self._help()
                    self.input_fn("\nPress Enter to return...")
                    continue
                if not self.handle_line(line):
                    exit_message = "Goodbye."
                    break
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)
        logger.debug("Terminal host for %s stopped", self.app.title)
        return 0
