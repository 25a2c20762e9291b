from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from wordcheck.replace.builder import DEFAULT_SHORT_MESSAGE, MatchBuilder, MessageFormatter, default_message
from wordcheck.replace.dictionary import DictionaryProvider, WrongWordDictionary
from wordcheck.replace.eligibility import EligibilityClassifier, TaggedPredicate
from wordcheck.replace.eligibility import is_tagged as default_is_tagged
from wordcheck.replace.models import Match, RuleConfig, Token
from wordcheck.replace.normalizer import Normalizer


class SimpleReplaceRule:
    """Flags tokens listed in a wrong-word dictionary and suggests replacements.

    The rule keeps no state between calls; one instance can serve concurrent
    callers once its dictionary provider is set up.
    """

    def __init__(
        self,
        provider: DictionaryProvider,
        config: RuleConfig | None = None,
        *,
        is_tagged: TaggedPredicate | None = None,
        message: MessageFormatter | None = None,
        short_message: str = DEFAULT_SHORT_MESSAGE,
    ) -> None:
        self.provider = provider
        self.config = config or RuleConfig()
        self._is_tagged = is_tagged or default_is_tagged
        self._message = message or default_message
        self._short_message = short_message

        self.normalizer = Normalizer(case_sensitive=self.config.case_sensitive, locale=self.config.locale)
        self.classifier = EligibilityClassifier(
            ignore_tagged_words=self.config.ignore_tagged_words,
            is_tagged=self._is_tagged,
        )
        self.builder = MatchBuilder(
            case_sensitive=self.config.case_sensitive,
            locale=self.config.locale,
            message=self._message,
            short_message=self._short_message,
        )

    @property
    def wrong_words(self) -> WrongWordDictionary:
        return self.provider.get_wrong_words()

    def reconfigure(self, **changes: Any) -> SimpleReplaceRule:
        return SimpleReplaceRule(
            self.provider,
            dataclasses.replace(self.config, **changes),
            is_tagged=self._is_tagged,
            message=self._message,
            short_message=self._short_message,
        )

    def _lookup_key(self, token: Token, wrong_words: WrongWordDictionary) -> str:
        key = self.normalizer.normalize(token.text)
        if key in wrong_words or not self.config.check_lemmas:
            return key
        for lemma in token.lemmas:
            if lemma is None:
                continue
            normalized_lemma = self.normalizer.normalize(lemma)
            if normalized_lemma in wrong_words:
                return normalized_lemma
        return key

    def _replacements(self, token: Token, wrong_words: WrongWordDictionary) -> list[str] | None:
        raw = token.text
        key = self._lookup_key(token, wrong_words)

        # The literal surface form takes precedence over the normalized or lemma key.
        possible = wrong_words.lookup(raw)
        if possible is None:
            possible = wrong_words.lookup(key)
        if not possible:
            return None

        replacements = [replacement for replacement in possible if replacement != raw]
        return replacements or None

    def replacements_for(self, token: Token) -> list[str] | None:
        return self._replacements(token, self.wrong_words)

    def match(self, tokens: Iterable[Token]) -> list[Match]:
        wrong_words = self.wrong_words
        matches: list[Match] = []
        for token in tokens:
            if not self.classifier.is_eligible(token):
                continue
            replacements = self._replacements(token, wrong_words)
            if replacements:
                matches.append(self.builder.build(token, replacements))
        return matches
