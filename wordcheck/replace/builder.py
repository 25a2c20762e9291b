from __future__ import annotations

from typing import Callable, Sequence

from wordcheck.replace.models import Match, Token
from wordcheck.replace.normalizer import starts_with_uppercase, upper_case_first

MessageFormatter = Callable[[str, Sequence[str]], str]

DEFAULT_SHORT_MESSAGE = "Wrong word"


def default_message(raw: str, replacements: Sequence[str]) -> str:
    return f"{raw} is not valid. Use: {', '.join(replacements)}."


class MatchBuilder:
    def __init__(
        self,
        *,
        case_sensitive: bool,
        locale: str,
        message: MessageFormatter = default_message,
        short_message: str = DEFAULT_SHORT_MESSAGE,
    ) -> None:
        self.case_sensitive = case_sensitive
        self.locale = locale
        self.message = message
        self.short_message = short_message

    def suggestions(self, raw: str, replacements: Sequence[str]) -> tuple[str, ...]:
        if not self.case_sensitive and starts_with_uppercase(raw):
            return tuple(upper_case_first(replacement, self.locale) for replacement in replacements)
        return tuple(replacements)

    def build(self, token: Token, replacements: Sequence[str]) -> Match:
        raw = token.text
        start = token.start
        # The message lists the replacements as stored, before case adjustment.
        return Match(
            start=start,
            end=start + len(raw),
            message=self.message(raw, replacements),
            short_message=self.short_message,
            suggestions=self.suggestions(raw, replacements),
        )
