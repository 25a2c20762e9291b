import locale as _locale
from dataclasses import dataclass, field


def _default_locale() -> str:
    try:
        language, _ = _locale.getlocale()
    except ValueError:
        return "en"
    if not language or language == "C":
        return "en"
    return language.replace("_", "-")


@dataclass(frozen=True)
class Token:
    text: str
    start: int
    lemmas: tuple[str | None, ...] = ()
    immunized: bool = False
    ignored_by_speller: bool = False
    tagged: bool = False

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class Match:
    start: int
    end: int
    message: str
    short_message: str
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class RuleConfig:
    case_sensitive: bool = True
    locale: str = field(default_factory=_default_locale)
    check_lemmas: bool = True
    ignore_tagged_words: bool = False
