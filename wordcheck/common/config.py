import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from wordcheck.replace.dictionary import DEFAULT_DICTIONARY_PATH
from wordcheck.replace.models import RuleConfig

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    dictionary_path: Path = Path(os.getenv("WORDCHECK_DICTIONARY_PATH", str(DEFAULT_DICTIONARY_PATH)))
    case_sensitive: bool = _env_flag("WORDCHECK_CASE_SENSITIVE", False)
    locale: str = os.getenv("WORDCHECK_LOCALE", "en")
    check_lemmas: bool = _env_flag("WORDCHECK_CHECK_LEMMAS", True)
    ignore_tagged_words: bool = _env_flag("WORDCHECK_IGNORE_TAGGED_WORDS", False)
    nltk_download: bool = _env_flag("WORDCHECK_NLTK_DOWNLOAD", False)
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def rule_config(self) -> RuleConfig:
        return RuleConfig(
            case_sensitive=self.case_sensitive,
            locale=self.locale,
            check_lemmas=self.check_lemmas,
            ignore_tagged_words=self.ignore_tagged_words,
        )


settings = Settings()
