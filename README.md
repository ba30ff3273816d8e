# wordgame

wordgame is a small spelling game for a 16x2 character display and a numeric keypad.
The game picks a secret five-letter word and shows it for two seconds, then hides it.
The player enters the word one letter at a time, typing each letter as its decimal
ASCII code and confirming it with `#`. For example, `6`, `5`, `#` enters `A`.

- A correct letter appears in its place on the top line.
- A wrong letter, a non-letter code, or `#` pressed with fewer than two digits counts
  as a mistake.
- Three mistakes lose the game. Spelling the whole word wins it.

## Modules

### `wordgame.dictionary`

`Dictionary(words=None)` holds five-letter words. With no argument it uses the
built-in list `DEFAULT_WORDS`. A word of any other length, or an empty list, raises
`ValueError`.

Methods and members:

- `seed(value)` reseeds the picker.
- `random_word()` returns one of the words.
- `len()` returns the number of words.
- `in` tests whether a word is in the list.
- Iterating over the dictionary yields the words.
- The `words` property returns them as a tuple.

### `wordgame.lcd`

`Lcd` is a model of an HD44780-style character display. It works at the level of
command and data bytes:

- `send_command(cmd)` and `send_char(ch)` apply the byte to the display's memory and
  state.
- Every byte sent is recorded in `sent`, as a `(Transfer, value)` pair.

Higher-level operations:

- `init()` sets 4-bit, two-line mode and loads the eight custom glyphs in
  `CUSTOM_CHARS`.
- `clear()` and `home()` clear the display and return the cursor home.
- `write(data)` writes text at the cursor.
- `goto_xy(x, y)` moves the cursor.
- `copy_string(text, x, y)` writes text at a position, stopping at the first NUL.
- `define_char(pattern, char_code)` stores an eight-row glyph.
- `shift_left(n)` and `shift_right(n)` shift the display.
- `cursor_on()`, `cursor_on_blink()`, `cursor_off()`, `blank()`, `visible()`,
  `cursor_left(n)` and `cursor_right(n)` control the cursor and display.
- `progress_bar(progress, maxprogress, length)` draws a bar using the progress
  glyphs.

To read back what is on screen, call `line(y)` or `lines()`. Each line is 16
characters. Line 1 is only visible after two-line mode has been set, for example by
`init()`.

### `wordgame.game`

`Game(lcd, keypad, clock, dictionary=None)` is the game's state machine. `State`
lists its phases: `IDLE`, `SHOW_WORD`, `TYPING`, `CHECK`, `VICTORY` and `DEFEAT`.

The two callables you pass in:

- `keypad` is called with no arguments. It returns the key currently held, such as
  `"*"`, `"#"` or `"0"` to `"9"`, or `None` when no key is held. Holding a key down
  counts as a single press.
- `clock` returns the current time in milliseconds.

Driving the game:

- Call `tick()` repeatedly to advance the game.
- `reset()` returns the game to its start screen.
- The `state`, `secret_word`, `typed_word`, `errors`, `position` and
  `pending_digits` properties expose its progress.

`digits_to_ascii(digits)` combines decimal digits into a character code. Any value
above 127 becomes 0.

## Usage

```python
from wordgame.dictionary import Dictionary
from wordgame.game import Game, State
from wordgame.lcd import Lcd

now = 0
held = None

lcd = Lcd()
lcd.init()
game = Game(lcd, lambda: held, lambda: now, Dictionary(["Arbol"]))

def press(key):
    global held
    held = key
    game.tick()
    held = None
    game.tick()

game.tick()                      # start screen: "Presione * para"
press("*")                       # pick a word
game.tick()                      # show it
now = 2000
game.tick()                      # hide it and wait for input

for code in ("65", "114", "98", "111", "108"):   # A r b o l
    for digit in code:
        press(digit)
    press("#")

game.tick()
assert game.state is State.VICTORY
print(lcd.lines())               # ('VICTORIA!       ', 'Tiempo: 0 s     ')
```

Screens and timing:

- Press `*` on the start screen to begin a round.
- The secret word stays up for two seconds.
- After a win, the screen counts elapsed seconds. After a win or a loss, the result
  screen stays up for five seconds, then the game goes back to its start screen.

## What it does not do

The package has no hardware code: no keypad scanning, no timer interrupt and no
display driver. It also has no command-line program. Input comes from the `keypad`
and `clock` callables you supply, and output goes to the simulated `Lcd`.

## Tests

```
pip install -e .[test]
pytest
```