"""Keyboard layout conversion maps.

Each table maps the character typed on a US QWERTY key to the character the
same physical key produces under another layout. Reverse tables are built
with :func:`invert_table`, which refuses ambiguous data.
"""

from __future__ import annotations

from layoutfix.core.tables import compose_tables, invert_table

ENG_TO_UKR: dict[str, str] = {
    "q": "й", "w": "ц", "e": "у", "r": "к", "t": "е", "y": "н", "u": "г",
    "i": "ш", "o": "щ", "p": "з", "[": "х", "]": "ї", "\\": "ґ",
    "a": "ф", "s": "і", "d": "в", "f": "а", "g": "п", "h": "р",
    "j": "о", "k": "л", "l": "д", ";": "ж", "'": "є",
    "z": "я", "x": "ч", "c": "с", "v": "м", "b": "и", "n": "т",
    "m": "ь", ",": "б", ".": "ю", "/": ".", "`": "'",
    # Uppercase
    "Q": "Й", "W": "Ц", "E": "У", "R": "К", "T": "Е", "Y": "Н", "U": "Г",
    "I": "Ш", "O": "Щ", "P": "З", "{": "Х", "}": "Ї", "|": "Ґ",
    "A": "Ф", "S": "І", "D": "В", "F": "А", "G": "П", "H": "Р",
    "J": "О", "K": "Л", "L": "Д", ":": "Ж", '"': "Є",
    "Z": "Я", "X": "Ч", "C": "С", "V": "М", "B": "И", "N": "Т",
    "M": "Ь", "<": "Б", ">": "Ю", "?": ",", "~": "₴",
    # Shifted digit row; digits themselves stay unchanged
    "@": '"', "#": "№", "$": ";", "^": ":", "&": "?",
}

ENG_TO_RUS: dict[str, str] = {
    "q": "й", "w": "ц", "e": "у", "r": "к", "t": "е", "y": "н", "u": "г",
    "i": "ш", "o": "щ", "p": "з", "[": "х", "]": "ъ",
    "a": "ф", "s": "ы", "d": "в", "f": "а", "g": "п", "h": "р",
    "j": "о", "k": "л", "l": "д", ";": "ж", "'": "э",
    "z": "я", "x": "ч", "c": "с", "v": "м", "b": "и", "n": "т",
    "m": "ь", ",": "б", ".": "ю", "/": ".", "`": "ё",
    # Uppercase
    "Q": "Й", "W": "Ц", "E": "У", "R": "К", "T": "Е", "Y": "Н", "U": "Г",
    "I": "Ш", "O": "Щ", "P": "З", "{": "Х", "}": "Ъ",
    "A": "Ф", "S": "Ы", "D": "В", "F": "А", "G": "П", "H": "Р",
    "J": "О", "K": "Л", "L": "Д", ":": "Ж", '"': "Э",
    "Z": "Я", "X": "Ч", "C": "С", "V": "М", "B": "И", "N": "Т",
    "M": "Ь", "<": "Б", ">": "Ю", "?": ",", "~": "Ё",
    "@": '"', "#": "№", "$": ";", "^": ":", "&": "?",
}

UKR_TO_ENG: dict[str, str] = invert_table(ENG_TO_UKR)
RUS_TO_ENG: dict[str, str] = invert_table(ENG_TO_RUS)

# Cyrillic pair goes through the shared QWERTY key positions
UKR_TO_RUS: dict[str, str] = compose_tables(UKR_TO_ENG, ENG_TO_RUS)
RUS_TO_UKR: dict[str, str] = invert_table(UKR_TO_RUS)
