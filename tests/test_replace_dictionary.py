from __future__ import annotations

import threading
from pathlib import Path

import pytest

from wordcheck.replace import dictionary as dictionary_module
from wordcheck.replace.dictionary import (
    DEFAULT_DICTIONARY_PATH,
    FileDictionaryProvider,
    LoadError,
    WrongWordDictionary,
    load_dictionary,
    parse_dictionary,
)


def test_parse_dictionary_skips_comments_and_blank_lines() -> None:
    wrong_words = parse_dictionary(
        [
            "# comment",
            "",
            "   ",
            " teh = the ",
            "recieve|recive=receive",
            "alot=a lot|lots",
        ]
    )

    assert len(wrong_words) == 4
    assert wrong_words.lookup("teh") == ("the",)
    assert wrong_words.lookup("recieve") == ("receive",)
    assert wrong_words.lookup("recive") == ("receive",)
    assert wrong_words.lookup("alot") == ("a lot", "lots")


def test_parse_dictionary_last_duplicate_wins() -> None:
    wrong_words = parse_dictionary(["teh=the", "teh=tea|the"])

    assert wrong_words.lookup("teh") == ("tea", "the")


def test_lookup_does_not_normalize() -> None:
    wrong_words = WrongWordDictionary({"teh": ["the"]})

    assert wrong_words.lookup("Teh") is None
    assert "Teh" not in wrong_words


@pytest.mark.parametrize(
    "line",
    [
        "teh",
        "teh=the=tea",
        "=the",
        "teh|=the",
        "teh=",
        "teh=the|",
    ],
)
def test_parse_dictionary_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(LoadError) as excinfo:
        parse_dictionary(["ok=fine", line], source="replace.txt")

    assert excinfo.value.source == "replace.txt"
    assert excinfo.value.line_number == 2
    assert str(excinfo.value).startswith("replace.txt:2:")


def test_dictionary_is_immutable() -> None:
    entries = {"teh": ["the"]}
    wrong_words = WrongWordDictionary(entries)
    entries["teh"].append("tea")
    entries["adn"] = ["and"]

    assert wrong_words.lookup("teh") == ("the",)
    assert "adn" not in wrong_words
    with pytest.raises(TypeError):
        wrong_words["adn"] = ("and",)  # type: ignore[index]


def test_dictionary_rejects_empty_replacements() -> None:
    with pytest.raises(LoadError) as excinfo:
        WrongWordDictionary({"teh": []})

    assert excinfo.value.source == "<mapping>"


def test_load_dictionary_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "replace.txt"
    path.write_text("# wrong words\nteh=the\nadn=and\n", encoding="utf-8")

    wrong_words = load_dictionary(path)

    assert dict(wrong_words) == {"teh": ("the",), "adn": ("and",)}


def test_load_dictionary_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError) as excinfo:
        load_dictionary(tmp_path / "missing.txt")

    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_dictionary_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "replace.txt"
    path.write_bytes(b"teh=\xff\xfe\n")

    with pytest.raises(LoadError):
        load_dictionary(path)


def test_bundled_dictionary_loads() -> None:
    wrong_words = load_dictionary(DEFAULT_DICTIONARY_PATH)

    assert wrong_words.lookup("teh") == ("the",)
    assert len(wrong_words) > 10


def test_file_provider_loads_once(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "replace.txt"
    path.write_text("teh=the\n", encoding="utf-8")
    calls: list[Path] = []
    original = dictionary_module.load_dictionary

    def _counting_load(p):
        calls.append(p)
        return original(p)

    monkeypatch.setattr(dictionary_module, "load_dictionary", _counting_load)
    provider = FileDictionaryProvider(path)
    barrier = threading.Barrier(8)
    results: list[WrongWordDictionary] = []

    def _get() -> None:
        barrier.wait()
        results.append(provider.get_wrong_words())

    threads = [threading.Thread(target=_get) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert provider.loaded
    assert all(result is results[0] for result in results)


def test_file_provider_publishes_nothing_on_failure(tmp_path: Path) -> None:
    path = tmp_path / "replace.txt"
    path.write_text("broken line\n", encoding="utf-8")
    provider = FileDictionaryProvider(path)

    with pytest.raises(LoadError):
        provider.get_wrong_words()

    assert not provider.loaded


def test_file_provider_loads_again_after_failure(tmp_path: Path) -> None:
    path = tmp_path / "replace.txt"
    path.write_text("broken line\n", encoding="utf-8")
    provider = FileDictionaryProvider(path)

    with pytest.raises(LoadError):
        provider.get_wrong_words()

    path.write_text("teh=the\n", encoding="utf-8")
    wrong_words = provider.get_wrong_words()

    assert provider.loaded
    assert wrong_words.lookup("teh") == ("the",)
    assert provider.get_wrong_words() is wrong_words


def test_dictionary_acts_as_its_own_provider() -> None:
    wrong_words = WrongWordDictionary({"teh": ["the"]})

    assert wrong_words.get_wrong_words() is wrong_words
