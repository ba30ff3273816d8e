"""A character display controller modelled at the level of command and data bytes."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

WIDTH = 16
LINES = 2
LINE_ADDRESSES = (0x00, 0x40, 0x14, 0x54)
DDRAM_LINE_LENGTH = 40
DDRAM_SINGLE_LINE_LENGTH = 80
PROGRESS_PIXELS_PER_CHAR = 6

CMD_CLEAR = 0x01
CMD_HOME = 0x02
CMD_ENTRY_MODE = 0x04
CMD_DISPLAY_CONTROL = 0x08
CMD_SHIFT = 0x10
CMD_FUNCTION_SET = 0x20
CMD_SET_CGRAM = 0x40
CMD_SET_DDRAM = 0x80

CMD_SHIFT_DISPLAY_RIGHT = 0x1E
CMD_SHIFT_DISPLAY_LEFT = 0x18
CMD_CURSOR_ON = 0x0E
CMD_CURSOR_BLINK = 0x0F
CMD_CURSOR_OFF = 0x0C
CMD_BLANK = 0x08
CMD_VISIBLE = 0x0C
CMD_CURSOR_LEFT = 0x10
CMD_CURSOR_RIGHT = 0x14

CUSTOM_CHARS: tuple[tuple[int, ...], ...] = (
    (0x00, 0x1F, 0x00, 0x00, 0x00, 0x00, 0x1F, 0x00),  # empty progress block
    (0x00, 0x1F, 0x10, 0x10, 0x10, 0x10, 0x1F, 0x00),  # 1/5 progress block
    (0x00, 0x1F, 0x18, 0x18, 0x18, 0x18, 0x1F, 0x00),  # 2/5 progress block
    (0x00, 0x1F, 0x1C, 0x1C, 0x1C, 0x1C, 0x1F, 0x00),  # 3/5 progress block
    (0x00, 0x1F, 0x1E, 0x1E, 0x1E, 0x1E, 0x1F, 0x00),  # 4/5 progress block
    (0x00, 0x1F, 0x1F, 0x1F, 0x1F, 0x1F, 0x1F, 0x00),  # full progress block
    (0x03, 0x07, 0x0F, 0x1F, 0x0F, 0x07, 0x03, 0x00),  # rewind arrow
    (0x18, 0x1C, 0x1E, 0x1F, 0x1E, 0x1C, 0x18, 0x00),  # fast-forward arrow
)


class Transfer(Enum):
    """Kind of byte sent to the controller."""

    COMMAND = "command"
    DATA = "data"


def _byte(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def _to_bytes(data: str | bytes | Iterable[int]) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(f"text cannot be shown on the display: {data!r}") from exc
    return bytes(data)


class Lcd:
    """A two-line, sixteen-column character display with its own memory."""

    def __init__(self) -> None:
        self.ddram = bytearray(b" " * 128)
        self.cgram = bytearray(64)
        self.address = 0
        self._in_cgram = False
        self.increment = True
        self.entry_shift = False
        self.display_on = False
        self.cursor = False
        self.blink = False
        self.eight_bit = True
        self.two_lines = False
        self.large_font = False
        self.shift = 0
        self.sent: list[tuple[Transfer, int]] = []

    # -- controller ---------------------------------------------------------

    def _step(self, delta: int) -> None:
        a = self.address
        if self._in_cgram:
            self.address = (a + delta) & 0x3F
        elif self.two_lines:
            if delta > 0:
                if a == 0x27:
                    a = 0x40
                elif a == 0x67:
                    a = 0x00
                else:
                    a = (a + 1) & 0x7F
            else:
                if a == 0x00:
                    a = 0x67
                elif a == 0x40:
                    a = 0x27
                else:
                    a = (a - 1) & 0x7F
            self.address = a
        elif a < DDRAM_SINGLE_LINE_LENGTH:
            self.address = (a + delta) % DDRAM_SINGLE_LINE_LENGTH
        else:
            self.address = (a + delta) & 0x7F

    def send_command(self, cmd: int) -> None:
        """Send an instruction byte and apply its effect."""
        cmd = _byte(cmd)
        self.sent.append((Transfer.COMMAND, cmd))
        if cmd & CMD_SET_DDRAM:
            self._in_cgram = False
            self.address = cmd & 0x7F
        elif cmd & CMD_SET_CGRAM:
            self._in_cgram = True
            self.address = cmd & 0x3F
        elif cmd & CMD_FUNCTION_SET:
            self.eight_bit = bool(cmd & 0x10)
            self.two_lines = bool(cmd & 0x08)
            self.large_font = bool(cmd & 0x04)
        elif cmd & CMD_SHIFT:
            right = bool(cmd & 0x04)
            if cmd & 0x08:
                self.shift += -1 if right else 1
            else:
                self._step(1 if right else -1)
        elif cmd & CMD_DISPLAY_CONTROL:
            self.display_on = bool(cmd & 0x04)
            self.cursor = bool(cmd & 0x02)
            self.blink = bool(cmd & 0x01)
        elif cmd & CMD_ENTRY_MODE:
            self.increment = bool(cmd & 0x02)
            self.entry_shift = bool(cmd & 0x01)
        elif cmd & CMD_HOME:
            self._in_cgram = False
            self.address = 0
            self.shift = 0
        elif cmd & CMD_CLEAR:
            self.ddram[:] = b" " * len(self.ddram)
            self._in_cgram = False
            self.address = 0
            self.shift = 0
            self.increment = True

    def send_char(self, ch: int) -> None:
        """Send a data byte to the memory the address counter points at."""
        ch = _byte(ch)
        self.sent.append((Transfer.DATA, ch))
        if self._in_cgram:
            self.cgram[self.address] = ch
        else:
            self.ddram[self.address] = ch
            if self.entry_shift:
                self.shift += 1 if self.increment else -1
        self._step(1 if self.increment else -1)

    # -- driver operations --------------------------------------------------

    def init(self) -> None:
        """Bring the display to 4-bit, two-line mode and load the custom glyphs."""
        self.send_command(0x30)
        self.send_command(0x30)
        self.send_command(0x20)
        self.send_command(0x28)
        self.send_command(CMD_CURSOR_OFF)
        for code, pattern in enumerate(CUSTOM_CHARS):
            self.define_char(pattern, code)

    def clear(self) -> None:
        self.send_command(CMD_CLEAR)

    def home(self) -> None:
        self.send_command(CMD_HOME)

    def write(self, data: str | bytes | Iterable[int] | None) -> None:
        """Write every character of data at the cursor; None writes nothing."""
        if data is None:
            return
        for b in _to_bytes(data):
            self.send_char(b)

    def goto_xy(self, x: int, y: int) -> None:
        """Move the cursor to column x of line y; unknown lines map to line 0."""
        base = LINE_ADDRESSES[y] if 0 <= y < len(LINE_ADDRESSES) else LINE_ADDRESSES[0]
        self.send_command(CMD_SET_DDRAM | ((base + x) & 0x7F))

    def copy_string(self, text: str | bytes | Iterable[int], x: int, y: int) -> None:
        """Write text at (x, y), stopping at the first NUL character."""
        self.goto_xy(x, y)
        for b in _to_bytes(text).split(b"\0", 1)[0]:
            self.send_char(b)

    def define_char(self, pattern: Iterable[int], char_code: int) -> None:
        """Store an eight-row glyph pattern under a custom character code."""
        rows = bytes(pattern)
        if len(rows) != 8:
            raise ValueError("a glyph pattern has exactly 8 rows")
        address = ((int(char_code) << 3) | CMD_SET_CGRAM) & 0xFF
        for row in rows:
            self.send_command(address)
            self.send_char(row)
            address = (address + 1) & 0xFF

    def shift_left(self, n: int) -> None:
        for _ in range(n):
            self.send_command(CMD_SHIFT_DISPLAY_RIGHT)

    def shift_right(self, n: int) -> None:
        for _ in range(n):
            self.send_command(CMD_SHIFT_DISPLAY_LEFT)

    def cursor_on(self) -> None:
        self.send_command(CMD_CURSOR_ON)

    def cursor_on_blink(self) -> None:
        self.send_command(CMD_CURSOR_BLINK)

    def cursor_off(self) -> None:
        self.send_command(CMD_CURSOR_OFF)

    def blank(self) -> None:
        self.send_command(CMD_BLANK)

    def visible(self) -> None:
        self.send_command(CMD_VISIBLE)

    def cursor_left(self, n: int) -> None:
        for _ in range(n):
            self.send_command(CMD_CURSOR_LEFT)

    def cursor_right(self, n: int) -> None:
        for _ in range(n):
            self.send_command(CMD_CURSOR_RIGHT)

    def progress_bar(self, progress: int, maxprogress: int, length: int) -> None:
        """Draw a bar of length cells showing progress out of maxprogress."""
        if maxprogress <= 0:
            raise ValueError("maxprogress must be positive")
        pixels = (progress * (length * PROGRESS_PIXELS_PER_CHAR)) // maxprogress
        for i in range(length):
            start = i * PROGRESS_PIXELS_PER_CHAR
            if start + 5 > pixels:
                code = 0 if start > pixels else pixels % PROGRESS_PIXELS_PER_CHAR
            else:
                code = 5
            self.send_char(code)

    # -- inspection ---------------------------------------------------------

    def line(self, y: int) -> str:
        """Return the sixteen characters currently visible on line y."""
        rows = LINES if self.two_lines else 1
        if not 0 <= y < rows:
            raise IndexError(f"line {y} is not shown")
        if self.two_lines:
            base, span = LINE_ADDRESSES[y], DDRAM_LINE_LENGTH
        else:
            base, span = 0, DDRAM_SINGLE_LINE_LENGTH
        return "".join(
            chr(self.ddram[base + (i + self.shift) % span]) for i in range(WIDTH)
        )

    def lines(self) -> tuple[str, ...]:
        """Return every visible line."""
        rows = LINES if self.two_lines else 1
        return tuple(self.line(y) for y in range(rows))