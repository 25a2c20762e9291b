from .builder import DEFAULT_SHORT_MESSAGE, MatchBuilder, MessageFormatter, default_message
from .dictionary import (
    DEFAULT_DICTIONARY_PATH,
    DictionaryProvider,
    FileDictionaryProvider,
    LoadError,
    WrongWordDictionary,
    load_dictionary,
    parse_dictionary,
)
from .eligibility import EligibilityClassifier, TaggedPredicate, is_tagged
from .models import Match, RuleConfig, Token
from .normalizer import Normalizer, lower_case, starts_with_uppercase, upper_case_first
from .rule import SimpleReplaceRule

__all__ = [
    "DEFAULT_DICTIONARY_PATH",
    "DEFAULT_SHORT_MESSAGE",
    "DictionaryProvider",
    "EligibilityClassifier",
    "FileDictionaryProvider",
    "LoadError",
    "Match",
    "MatchBuilder",
    "MessageFormatter",
    "Normalizer",
    "RuleConfig",
    "SimpleReplaceRule",
    "TaggedPredicate",
    "Token",
    "WrongWordDictionary",
    "default_message",
    "is_tagged",
    "load_dictionary",
    "lower_case",
    "parse_dictionary",
    "starts_with_uppercase",
    "upper_case_first",
]
