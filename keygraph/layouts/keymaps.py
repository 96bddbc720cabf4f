# layouts/keymaps.py
"""
Keyboard layout tables.
Contains the literal layout data fed to the connector:
  - Row text for each named layout
  - Shifted characters of the US punctuation and number row keys
A leading GAP on a row shifts it one column right, which gives the
stagger of the alphanumeric rows.
"""
from keygraph.layouts.grammar import GAP

#----------------------------#
# Alphanumeric layout rows   #
#----------------------------#
QWERTY_US_ROWS = "\n".join([
    "` 1 2 3 4 5 6 7 8 9 0 - =",
    f"{GAP} q w e r t y u i o p [ ] \\",
    f"{GAP} a s d f g h j k l ; '",
    f"{GAP} z x c v b n m , . /",
])

DVORAK_ROWS = "\n".join([
    "` 1 2 3 4 5 6 7 8 9 0 [ ]",
    f"{GAP} ' , . p y f g c r l / = \\",
    f"{GAP} a o e u i d h t n s -",
    f"{GAP} ; q j k x b m w v z",
])

#----------------------------#
# Numpad layout rows         #
#----------------------------#
STANDARD_NUMPAD_ROWS = "\n".join([
    f"{GAP} / * -",
    "7 8 9 +",
    "4 5 6",
    "1 2 3",
    f"{GAP} 0 .",
])

MAC_NUMPAD_ROWS = "\n".join([
    f"{GAP} = / *",
    "7 8 9 -",
    "4 5 6 +",
    "1 2 3",
    f"{GAP} 0 .",
])

#------------------------------------------#
# Non-alphabetic keys and their shift map  #
#------------------------------------------#
# Same physical keys on US QWERTY and Dvorak, only placed differently
US_SHIFTED_KEYS = {
    '`': '~',
    '1': '!', '2': '@', '3': '#', '4': '$', '5': '%',
    '6': '^', '7': '&', '8': '*', '9': '(', '0': ')',
    '-': '_', '=': '+',
    '[': '{', ']': '}', '\\': '|',
    ';': ':', "'": '"',
    ',': '<', '.': '>', '/': '?',
}
