import logging
from functools import lru_cache
from typing import Protocol

import nltk
from nltk.tokenize import WordPunctTokenizer

from wordcheck.common.config import settings
from wordcheck.replace.models import Token

logger = logging.getLogger(__name__)

# WordNet parts of speech tried for lemmas, in order.
LEMMA_POS = ("n", "v", "a")

_tokenizer = WordPunctTokenizer()


class Lexicon(Protocol):
    def lemmas(self, word: str) -> tuple[str, ...]:
        ...

    def is_known(self, word: str) -> bool:
        ...


class EmptyLexicon:
    def lemmas(self, word: str) -> tuple[str, ...]:
        return ()

    def is_known(self, word: str) -> bool:
        return False


class WordNetLexicon:
    def __init__(self) -> None:
        from nltk.corpus import wordnet

        self._wordnet = wordnet

    def lemmas(self, word: str) -> tuple[str, ...]:
        # Words WordNet cannot analyze have no lemmas.
        lemmas: list[str] = []
        for pos in LEMMA_POS:
            for lemma in self._wordnet._morphy(word.lower(), pos):
                if lemma not in lemmas:
                    lemmas.append(lemma)
        return tuple(lemmas)

    def is_known(self, word: str) -> bool:
        return bool(self._wordnet.synsets(word.lower()))


@lru_cache(maxsize=None)
def _wordnet_available(download: bool) -> bool:
    try:
        nltk.data.find("corpora/wordnet")
        return True
    except LookupError:
        if not download:
            logger.info("wordnet corpus unavailable; tokens carry no lemmas")
            return False

    try:
        return bool(nltk.download("wordnet", quiet=True))
    except Exception:
        logger.exception("failed to download the wordnet corpus")
        return False


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    if _wordnet_available(settings.nltk_download):
        return WordNetLexicon()
    return EmptyLexicon()


def analyze(text: str, lexicon: Lexicon | None = None) -> list[Token]:
    lexicon = lexicon or default_lexicon()
    tokens: list[Token] = []
    for start, end in _tokenizer.span_tokenize(text or ""):
        word = text[start:end]
        if not any(ch.isalpha() for ch in word):
            tokens.append(Token(text=word, start=start))
            continue
        tokens.append(
            Token(
                text=word,
                start=start,
                lemmas=lexicon.lemmas(word),
                tagged=lexicon.is_known(word),
            )
        )
    return tokens
