from __future__ import annotations

from typing import Callable

from wordcheck.replace.models import Token

TaggedPredicate = Callable[[Token], bool]


def is_tagged(token: Token) -> bool:
    return token.tagged


class EligibilityClassifier:
    def __init__(self, *, ignore_tagged_words: bool, is_tagged: TaggedPredicate = is_tagged) -> None:
        self.ignore_tagged_words = ignore_tagged_words
        self.is_tagged = is_tagged

    def is_eligible(self, token: Token) -> bool:
        # Immunized and speller-ignored tokens are never checked.
        if token.immunized or token.ignored_by_speller:
            return False
        if self.ignore_tagged_words and self.is_tagged(token):
            return False
        return True
