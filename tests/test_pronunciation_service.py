"""Tests for pronunciation playback and speaking-state tracking."""

import pytest

from tests.conftest import FakeSpeechService
from tourism_helper.errors import SpeechError
from tourism_helper.services import PronunciationController, UtterancePhase


def select(context, code):
    context.load.selected_country_code = code


@pytest.fixture
def controller(context, speech):
    select(context, "TR")
    return PronunciationController(context, speech)


class TestLocale:

    @pytest.mark.parametrize("code, locale", [
        ("TR", "tr-TR"),
        ("GE", "ka-GE"),
        ("RU", "ru-RU"),
        ("AE", "ar-SA"),
        ("XX", "en-US"),
    ])
    def test_locale_follows_selection(self, context, controller, speech, code, locale):
        select(context, code)

        controller.speak("Merhaba")

        assert speech.last["locale"] == locale

    def test_locale_is_read_at_call_time(self, context, controller, speech):
        controller.speak("Merhaba")
        select(context, "RU")
        controller.speak("Привет")

        assert [r["locale"] for r in speech.requests] == ["tr-TR", "ru-RU"]

    def test_rate_and_pitch(self, controller, speech):
        controller.speak("Merhaba")

        assert speech.last["rate"] == pytest.approx(0.8)
        assert speech.last["pitch"] == pytest.approx(1.0)


class TestSpeakingState:

    def test_start_then_end(self, controller, speech, context):
        assert controller.speak("Merhaba") is True
        assert controller.phase is UtterancePhase.REQUESTED
        assert context.speech.speaking_text is None
        assert not controller.is_speaking("Merhaba")

        speech.last["on_start"]()
        assert context.speech.speaking_text == "Merhaba"
        assert controller.is_speaking("Merhaba")
        assert controller.phase is UtterancePhase.SPEAKING

        speech.last["on_end"]()
        assert context.speech.speaking_text is None
        assert controller.phase is UtterancePhase.IDLE

    def test_error_while_speaking_clears_text(self, controller, speech, context):
        controller.speak("Merhaba")
        speech.last["on_start"]()

        speech.last["on_error"](SpeechError("device lost"))

        assert context.speech.speaking_text is None
        assert controller.phase is UtterancePhase.IDLE

    def test_immediate_error_goes_back_to_idle(self, controller, speech, context):
        controller.speak("Merhaba")

        speech.last["on_error"](SpeechError("no voice"))

        assert context.speech.speaking_text is None
        assert controller.phase is UtterancePhase.IDLE

    def test_start_after_error_is_ignored(self, controller, speech, context):
        controller.speak("Merhaba")
        speech.last["on_error"](None)

        speech.last["on_start"]()

        assert context.speech.speaking_text is None

    def test_text_cleared_exactly_once(self, controller, speech, context):
        cleared = []
        context.subscribe(lambda topic: cleared.append(context.speech.speaking_text))
        controller.speak("Merhaba")
        speech.last["on_start"]()

        speech.last["on_end"]()
        speech.last["on_error"](None)

        assert cleared == ["Merhaba", None]

    def test_schedule_failure_reports_error(self, context):
        class BrokenSpeech(FakeSpeechService):
            def speak(self, *args, **kwargs):
                raise SpeechError("no event loop")

        controller = PronunciationController(context, BrokenSpeech())

        assert controller.speak("Merhaba") is True
        assert context.speech.speaking_text is None
        assert controller.phase is UtterancePhase.IDLE


class TestPreemption:

    def test_new_request_cancels_old_one(self, controller, speech, context):
        controller.speak("a")
        first = speech.last
        first["on_start"]()

        controller.speak("b")

        assert first["cancelled"] is True
        assert speech.cancel_count == 2
        # The preempted phrase is no longer marked
        assert context.speech.speaking_text is None

        speech.last["on_start"]()
        assert context.speech.speaking_text == "b"
        assert not controller.is_speaking("a")

    def test_late_callbacks_of_preempted_utterance_are_ignored(self, controller, speech, context):
        controller.speak("a")
        first = speech.last
        controller.speak("b")
        speech.last["on_start"]()

        first["on_start"]()
        assert context.speech.speaking_text == "b"
        first["on_end"]()
        first["on_error"](None)
        assert context.speech.speaking_text == "b"

        speech.last["on_end"]()
        assert context.speech.speaking_text is None

    def test_cancels_even_when_idle(self, controller, speech):
        controller.speak("a")

        assert speech.cancel_count == 1

    def test_stop_clears_and_ignores_pending_callbacks(self, controller, speech, context):
        controller.speak("a")
        speech.last["on_start"]()

        controller.stop()
        speech.last["on_end"]()

        assert context.speech.speaking_text is None
        assert speech.last["cancelled"] is True


class TestNoOp:

    def test_audio_disabled(self, controller, speech, context):
        controller.set_audio_enabled(False)

        assert controller.speak("Merhaba") is False
        assert speech.requests == []
        assert speech.cancel_count == 0

    def test_service_missing(self, context):
        controller = PronunciationController(context, None)

        assert controller.speak("Merhaba") is False
        assert context.speech.speaking_text is None

    def test_service_unavailable(self, context):
        speech = FakeSpeechService(available=False)
        controller = PronunciationController(context, speech)

        assert controller.speak("Merhaba") is False
        assert speech.requests == []

    def test_blank_text_is_passed_through(self, controller, speech, context):
        assert controller.speak("   ") is True
        assert speech.last["text"] == "   "

        speech.last["on_error"](SpeechError("no audio"))
        assert context.speech.speaking_text is None

    def test_toggle_audio(self, controller, context):
        assert controller.toggle_audio() is False
        assert context.speech.audio_enabled is False
        assert controller.toggle_audio() is True

    def test_disabling_leaves_current_playback(self, controller, speech, context):
        controller.speak("Merhaba")
        speech.last["on_start"]()

        controller.set_audio_enabled(False)

        assert context.speech.speaking_text == "Merhaba"
        assert speech.last["cancelled"] is False
