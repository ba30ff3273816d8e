import pytest

from wordgame.dictionary import Dictionary
from wordgame.game import (
    DEFEAT_TEXT,
    IDLE_LINE_0,
    IDLE_LINE_1,
    TIME_FINAL,
    TIME_SHOW_WORD,
    VICTORY_TEXT,
    Game,
    State,
    digits_to_ascii,
)
from wordgame.lcd import Lcd


class FakeKeypad:
    def __init__(self):
        self.held = None

    def __call__(self):
        return self.held


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


def make_game(words=("Arbol",)):
    lcd = Lcd()
    lcd.init()
    keypad = FakeKeypad()
    clock = FakeClock()
    game = Game(lcd, keypad, clock, Dictionary(words))
    return game, lcd, keypad, clock


def press(game, keypad, key):
    keypad.held = key
    game.tick()
    keypad.held = None
    game.tick()


def start_typing(game, keypad, clock):
    game.tick()
    press(game, keypad, "*")
    clock.now += TIME_SHOW_WORD
    game.tick()
    assert game.state is State.TYPING


def enter_code(game, keypad, code):
    for digit in str(code):
        press(game, keypad, digit)
    press(game, keypad, "#")


@pytest.mark.parametrize(
    "digits, expected",
    [([6, 5], ord("A")), ([1, 2, 7], 127), ([1, 2, 8], 0), ([0, 9, 7], ord("a"))],
)
def test_digits_to_ascii(digits, expected):
    assert digits_to_ascii(digits) == expected


def test_idle_screen():
    game, lcd, _, _ = make_game()
    game.tick()
    assert game.state is State.IDLE
    assert lcd.line(0).rstrip() == IDLE_LINE_0
    assert lcd.line(1).rstrip() == IDLE_LINE_1


def test_other_keys_do_not_start():
    game, _, keypad, _ = make_game()
    keypad.held = "5"
    game.tick()
    game.tick()
    assert game.state is State.IDLE


def test_show_word_duration():
    game, lcd, keypad, clock = make_game()
    game.tick()
    press(game, keypad, "*")
    assert game.state is State.SHOW_WORD
    assert lcd.line(0).rstrip() == "Arbol"
    clock.now += TIME_SHOW_WORD - 1
    game.tick()
    assert game.state is State.SHOW_WORD
    clock.now += 1
    game.tick()
    assert game.state is State.TYPING
    assert lcd.line(0).strip() == ""


def test_seed_comes_from_clock():
    game, _, keypad, clock = make_game(words=Dictionary().words)
    clock.now = 1234
    game.tick()
    keypad.held = "*"
    game.tick()
    reference = Dictionary()
    reference.seed(1234)
    assert game.secret_word == reference.random_word()
    assert game.secret_word in Dictionary()


def test_digits_are_echoed():
    game, lcd, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    press(game, keypad, "6")
    press(game, keypad, "5")
    assert lcd.line(1).startswith("65")
    assert game.pending_digits == (6, 5)


def test_held_key_counts_once():
    game, _, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    keypad.held = "7"
    game.tick()
    game.tick()
    game.tick()
    assert game.pending_digits == (7,)


def test_at_most_three_digits():
    game, lcd, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    for digit in "1234":
        press(game, keypad, digit)
    assert game.pending_digits == (1, 2, 3)
    assert lcd.line(1).rstrip() == "123"


def test_correct_letter_revealed():
    game, lcd, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    enter_code(game, keypad, ord("A"))
    assert game.state is State.TYPING
    assert game.position == 1
    assert game.typed_word == "A"
    assert lcd.line(0)[0] == "A"
    assert lcd.line(1).strip() == ""


def test_too_few_digits_is_error():
    game, _, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    press(game, keypad, "6")
    press(game, keypad, "#")
    assert game.errors == 1
    assert game.state is State.TYPING
    assert game.pending_digits == ()


def test_non_letter_is_error():
    game, _, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    enter_code(game, keypad, ord("0"))
    assert game.errors == 1
    assert game.position == 0


def test_out_of_range_code_is_error():
    game, _, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    enter_code(game, keypad, 200)
    assert game.errors == 1


def test_case_matters():
    game, _, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    enter_code(game, keypad, ord("a"))
    assert game.errors == 1
    assert game.position == 0


def test_victory_and_return_to_idle():
    game, lcd, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    for letter in "Arbol":
        enter_code(game, keypad, ord(letter))
    assert game.state is State.VICTORY
    assert game.typed_word == "Arbol"
    game.tick()
    assert lcd.line(0).rstrip() == VICTORY_TEXT
    assert lcd.line(1).rstrip() == "Tiempo: 0 s"
    clock.now += TIME_FINAL - 1
    game.tick()
    assert game.state is State.VICTORY
    clock.now += 1
    game.tick()
    assert game.state is State.IDLE
    game.tick()
    assert lcd.line(0).rstrip() == IDLE_LINE_0
    assert game.errors == 0
    assert game.position == 0


def test_defeat_after_three_errors():
    game, lcd, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    for _ in range(3):
        enter_code(game, keypad, ord("Z"))
    assert game.errors == 3
    assert game.state is State.DEFEAT
    game.tick()
    assert lcd.line(0).rstrip() == DEFEAT_TEXT
    clock.now += TIME_FINAL
    game.tick()
    assert game.state is State.IDLE


def test_errors_mix_of_kinds_lose():
    game, _, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    press(game, keypad, "#")
    enter_code(game, keypad, ord("Z"))
    press(game, keypad, "1")
    press(game, keypad, "#")
    assert game.state is State.DEFEAT


def test_reset_returns_to_idle():
    game, lcd, keypad, clock = make_game()
    start_typing(game, keypad, clock)
    game.reset()
    assert game.state is State.IDLE
    game.tick()
    assert lcd.line(1).rstrip() == IDLE_LINE_1