"""Tests for display helpers."""

from tourism_helper.models import PhraseEntry
from tourism_helper.services import PronunciationController
from tourism_helper.utils import (
    format_percentage,
    format_rating,
    group_phrases_by_category,
    phrase_speech_text,
    truncate,
)


def phrase(id, category):
    return PhraseEntry(id=id, category=category, azerbaijani=id, local_language=id)


def test_group_keeps_first_appearance_order():
    phrases = [phrase("1", "salamlaşma"), phrase("2", "restoran"), phrase("3", "salamlaşma")]

    groups = group_phrases_by_category(phrases)

    assert list(groups) == ["salamlaşma", "restoran"]
    assert [p.id for p in groups["salamlaşma"]] == ["1", "3"]


def test_group_empty():
    assert group_phrases_by_category([]) == {}


def test_speech_text_is_the_local_phrase():
    entry = PhraseEntry(id="l1", category="salamlaşma", azerbaijani="Salam",
                        local_language="Merhaba", pronunciation="mer-ha-ba")

    assert phrase_speech_text(entry) == "Merhaba"


def test_spoken_phrase_is_the_one_marked(context, speech):
    context.load.selected_country_code = "TR"
    phrases = [
        PhraseEntry(id="l1", category="salamlaşma", azerbaijani="Salam", local_language="Merhaba"),
        PhraseEntry(id="l2", category="restoran", azerbaijani="Hesab", local_language="Hesap"),
        PhraseEntry(id="l3", category="salamlaşma", azerbaijani="Sağ ol", local_language="Teşekkürler"),
    ]
    controller = PronunciationController(context, speech)

    controller.speak(phrase_speech_text(phrases[2]))
    speech.last["on_start"]()

    marked = [
        p.id
        for entries in group_phrases_by_category(phrases).values()
        for p in entries
        if controller.is_speaking(phrase_speech_text(p))
    ]
    assert marked == ["l3"]
    assert speech.last["text"] == "Teşekkürler"


def test_format_rating():
    assert format_rating(4.0) == "4"
    assert format_rating(4.7) == "4.7"


def test_format_percentage_clamps():
    assert format_percentage(42.5) == "42.5%"
    assert format_percentage(120) == "100%"
    assert format_percentage(-3) == "0%"


def test_truncate():
    assert truncate("short") == "short"
    assert truncate("x" * 50, max_len=10) == "xxxxxxx..."
