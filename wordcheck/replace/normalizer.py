from __future__ import annotations

# Languages whose dotted and dotless i pairs fold differently.
DOTLESS_I_LANGUAGES = {"tr", "az"}


def _language(locale: str) -> str:
    return locale.replace("_", "-").split("-", 1)[0].lower()


def lower_case(word: str, locale: str) -> str:
    if _language(locale) in DOTLESS_I_LANGUAGES:
        word = word.replace("I", "ı").replace("İ", "i")
    return word.lower()


def upper_case_first(word: str, locale: str) -> str:
    if not word:
        return word
    first = word[0]
    if _language(locale) in DOTLESS_I_LANGUAGES:
        if first == "i":
            return "İ" + word[1:]
        if first == "ı":
            return "I" + word[1:]
    upper = first.upper()
    # Characters such as "ß" expand when uppercased; those stay as they are.
    if len(upper) != 1:
        return word
    return upper + word[1:]


def starts_with_uppercase(word: str) -> bool:
    return bool(word) and word[0].isupper()


class Normalizer:
    def __init__(self, *, case_sensitive: bool, locale: str) -> None:
        self.case_sensitive = case_sensitive
        self.locale = locale

    def normalize(self, word: str) -> str:
        if self.case_sensitive:
            return word
        return lower_case(word, self.locale)
