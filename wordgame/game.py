"""The letter-guessing game: a state machine driven by a periodic tick."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum, auto

from wordgame.dictionary import WORD_LEN, Dictionary
from wordgame.lcd import WIDTH, Lcd

TIME_SHOW_WORD = 2000
TIME_FINAL = 5000
MAX_ERRORS = 3
MAX_DIGITS = 3
MIN_DIGITS = 2

START_KEY = "*"
ENTER_KEY = "#"

IDLE_LINE_0 = "Presione * para"
IDLE_LINE_1 = "    iniciar..."
VICTORY_TEXT = "VICTORIA!"
DEFEAT_TEXT = "DERROTA!"

_CLOCK_MASK = 0xFFFFFFFF
_STATUS_BUFFER = 15


class State(Enum):
    """Phases of a game."""

    IDLE = auto()
    SHOW_WORD = auto()
    TYPING = auto()
    CHECK = auto()
    VICTORY = auto()
    DEFEAT = auto()


def digits_to_ascii(digits: Sequence[int]) -> int:
    """Combine decimal digits into a character code; codes above 127 become 0."""
    value = 0
    for digit in digits:
        value = value * 10 + digit
    return value if value <= 127 else 0


def _is_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


class Game:
    """Shows a secret word, then lets the player enter it letter by letter as ASCII codes.

    ``keypad`` is called with no arguments and returns the key currently held,
    or ``None``; ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        lcd: Lcd,
        keypad: Callable[[], str | None],
        clock: Callable[[], int],
        dictionary: Dictionary | None = None,
    ) -> None:
        self.lcd = lcd
        self.keypad = keypad
        self.clock = clock
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self._secret = ""
        self._typed: list[str] = []
        self._idx = 0
        self._errors = 0
        self._digits: list[int] = []
        self._t_ref = 0
        self._last_key: str | None = None
        self._last_char = "\0"
        self._last_sec = 255
        self.reset()

    # -- inspection ---------------------------------------------------------

    @property
    def state(self) -> State:
        return self._state

    @property
    def secret_word(self) -> str:
        return self._secret

    @property
    def typed_word(self) -> str:
        """The letters guessed correctly so far."""
        return "".join(self._typed[: self._idx])

    @property
    def errors(self) -> int:
        return self._errors

    @property
    def position(self) -> int:
        """Index of the next letter to guess."""
        return self._idx

    @property
    def pending_digits(self) -> tuple[int, ...]:
        return tuple(self._digits)

    # -- control ------------------------------------------------------------

    def reset(self) -> None:
        """Return to the idle screen on the next tick."""
        self._state = State.IDLE
        self._first = True

    def tick(self) -> None:
        """Advance the state machine by one step."""
        now = int(self.clock()) & _CLOCK_MASK
        handler = {
            State.IDLE: self._idle,
            State.SHOW_WORD: self._show_word,
            State.TYPING: self._typing,
            State.CHECK: self._check,
            State.VICTORY: self._victory,
            State.DEFEAT: self._defeat,
        }[self._state]
        handler(now)

    # -- helpers ------------------------------------------------------------

    def _elapsed(self, now: int) -> int:
        return (now - self._t_ref) & _CLOCK_MASK

    def _enter(self, state: State) -> None:
        self._state = state
        self._first = True

    def _clear_line(self, y: int) -> None:
        self.lcd.goto_xy(0, y)
        self.lcd.write(" " * WIDTH)
        self.lcd.goto_xy(0, y)

    def _banner(self, text: str, now: int) -> None:
        self.lcd.clear()
        self.lcd.goto_xy(0, 0)
        self.lcd.write(text)
        self._t_ref = now

    def _record_error(self) -> bool:
        """Count a mistake; return True when the game is lost."""
        self._errors += 1
        if self._errors >= MAX_ERRORS:
            self._enter(State.DEFEAT)
            return True
        return False

    # -- states -------------------------------------------------------------

    def _idle(self, now: int) -> None:
        if self._first:
            self._first = False
            self.lcd.clear()
            self.lcd.goto_xy(0, 0)
            self.lcd.write(IDLE_LINE_0)
            self.lcd.goto_xy(0, 1)
            self.lcd.write(IDLE_LINE_1)
            self._idx = 0
            self._errors = 0
            self._digits = []
        if self.keypad() == START_KEY:
            self.dictionary.seed(now)
            self._secret = self.dictionary.random_word()
            self._typed = [""] * WORD_LEN
            self._enter(State.SHOW_WORD)

    def _show_word(self, now: int) -> None:
        if self._first:
            self._first = False
            self.lcd.clear()
            self.lcd.goto_xy(0, 0)
            self.lcd.write(self._secret)
            self._t_ref = now
        if self._elapsed(now) >= TIME_SHOW_WORD:
            self.lcd.clear()
            self.lcd.goto_xy(0, 1)
            self._t_ref = now
            self._state = State.TYPING
            self._last_key = None
            self._digits = []

    def _typing(self, now: int) -> None:
        key = self.keypad()
        if not key:
            self._last_key = None
            return
        if key == self._last_key:
            return
        self._last_key = key

        if key == ENTER_KEY:
            count = len(self._digits)
            if count >= MIN_DIGITS:
                self._last_char = chr(digits_to_ascii(self._digits))
                self._digits = []
                self._clear_line(1)
                self._enter(State.CHECK)
            else:
                self._digits = []
                self._clear_line(1)
                self._record_error()
            return

        if "0" <= key <= "9" and len(self._digits) < MAX_DIGITS:
            self._digits.append(ord(key) - ord("0"))
            self.lcd.send_char(ord(key))

    def _check(self, now: int) -> None:
        self._first = False
        ch = self._last_char
        if _is_letter(ch) and ch == self._secret[self._idx]:
            self._typed[self._idx] = ch
            self.lcd.goto_xy(self._idx, 0)
            self.lcd.send_char(ord(ch))
            self._idx += 1
            if self._idx == WORD_LEN:
                self._enter(State.VICTORY)
                return
        elif self._record_error():
            return
        self._clear_line(1)
        self._state = State.TYPING

    def _victory(self, now: int) -> None:
        if self._first:
            self._first = False
            self._banner(VICTORY_TEXT, now)
        elapsed = self._elapsed(now)
        sec = (elapsed // 1000) & 0xFF
        if sec != self._last_sec:
            self._last_sec = sec
            text = f"Tiempo: {sec} s"[:_STATUS_BUFFER]
            self._clear_line(1)
            self.lcd.write(text)
        if elapsed >= TIME_FINAL:
            self._enter(State.IDLE)

    def _defeat(self, now: int) -> None:
        if self._first:
            self._first = False
            self._banner(DEFEAT_TEXT, now)
        if self._elapsed(now) >= TIME_FINAL:
            self._enter(State.IDLE)