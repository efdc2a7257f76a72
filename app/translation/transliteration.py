"""Deterministic Cyrillic to Latin transliteration used when translation fails."""

import re

TRANSLITERATION_MAP = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo", "ж": "zh",
    "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m", "н": "n", "о": "o",
    "п": "p", "р": "r", "с": "s", "т": "t", "у": "u", "ф": "f", "х": "kh", "ц": "ts",
    "ч": "ch", "ш": "sh", "щ": "shch", "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu",
    "я": "ya",
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ё": "Yo", "Ж": "Zh",
    "З": "Z", "И": "I", "Й": "Y", "К": "K", "Л": "L", "М": "M", "Н": "N", "О": "O",
    "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U", "Ф": "F", "Х": "Kh", "Ц": "Ts",
    "Ч": "Ch", "Ш": "Sh", "Щ": "Shch", "Ъ": "", "Ы": "Y", "Ь": "", "Э": "E", "Ю": "Yu",
    "Я": "Ya",
}

_WHITESPACE_RE = re.compile(r"\s+")


def transliterate(text: str) -> str:
    """
    Transliterate a city name character by character.

    Unmapped characters (Latin letters, digits, hyphens) pass through. Runs of
    whitespace collapse to a single space and the result is trimmed.
    """
    converted = "".join(TRANSLITERATION_MAP.get(char, char) for char in text)
    return _WHITESPACE_RE.sub(" ", converted).strip()
