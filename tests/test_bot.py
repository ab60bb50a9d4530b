"""
Tests for the full turn: engine.resolve -> composer -> CollegeBot session.
"""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
from bot import CollegeBot, build_parser
from composer import ResponseComposer, TipCategory, classify_tip_category
from config import env_float
from engine import IntentEngine, ResolutionKind
from knowledge.data import KNS_KNOWLEDGE
from transcript import TranscriptLogger


@pytest.fixture(scope="module")
def engine():
    return IntentEngine()


class TestResolve:
    """One turn through the engine"""

    def test_programme(self, engine):
        resolution = engine.resolve("do you offer a cybersecurity course")
        assert resolution.kind == ResolutionKind.PROGRAMME
        assert resolution.programme.name == "Diploma in Cybersecurity"
        assert resolution.matched

    def test_programme_not_found(self, engine):
        resolution = engine.resolve("do you have a course in underwater basket weaving")
        assert resolution.kind == ResolutionKind.PROGRAMME_NOT_FOUND
        assert resolution.attempted_query == "underwater basket weaving"
        assert not resolution.matched

    def test_faq(self, engine):
        resolution = engine.resolve("what are your fees")
        assert resolution.kind == ResolutionKind.FAQ
        assert resolution.faq.question == "What are the fees?"

    @pytest.mark.parametrize("message", ["", "   ", None, "qwertyuiop zxcvbnm"])
    def test_no_match(self, engine, message):
        assert engine.resolve(message).kind == ResolutionKind.NONE


class TestTipCategory:

    @pytest.mark.parametrize("question, expected", [
        ("How do I apply for admission?", TipCategory.ADMISSIONS),
        ("What programmes do you offer?", TipCategory.PROGRAMME),
        ("What certificate programmes are available?", TipCategory.PROGRAMME),
        ("What are the fees?", TipCategory.FEES),
        ("Greeting", None),
        ("Where is KNS College located?", None),
    ])
    def test_bundled_entries(self, question, expected):
        assert classify_tip_category(KNS_KNOWLEDGE.get_faq(question)) == expected

    def test_fee_question_is_fee_related(self, engine):
        assert classify_tip_category(engine.resolve_faq("what are your fees")) == TipCategory.FEES

    def test_no_entry(self):
        assert classify_tip_category(None) is None


class TestComposer:

    def setup_method(self):
        self.engine = IntentEngine()
        self.composer = ResponseComposer(KNS_KNOWLEDGE)

    def compose(self, message):
        return self.composer.compose(self.engine.resolve(message))

    def test_programme_found(self):
        messages = self.compose("do you offer a cybersecurity course")
        assert messages[0].text.startswith("Yes! We offer Diploma in Cybersecurity.")
        assert "Diploma programme" in messages[0].text
        assert "2 Years" in messages[0].text
        assert "Online / Hybrid" in messages[0].text
        assert len(messages) == 2

    def test_programme_not_found_lists_catalog(self):
        messages = self.compose("do you have a course in underwater basket weaving")
        assert '"underwater basket weaving"' in messages[0].text
        assert "Cybersecurity, Telecommunications" in messages[1].text
        assert "Data Analyst" in messages[2].text
        assert "+232 79 422 442" in messages[3].text

    def test_faq_with_tip(self):
        messages = self.compose("what are your fees")
        assert messages[0].text == KNS_KNOWLEDGE.get_faq("What are the fees?").answer
        assert messages[1].text.startswith("💡 Tip: For detailed fee information")
        assert messages[1].delay > 0

    def test_faq_without_tip(self):
        messages = self.compose("hi there")
        assert len(messages) == 1

    def test_no_match_help_menu_then_contact(self):
        messages = self.compose("qwertyuiop zxcvbnm")
        assert messages[0].text.startswith("I'm sorry")
        assert "• Admissions and how to apply" in messages[1].text
        assert "admission@kns.edu.sl" in messages[2].text
        assert messages[-1].quick_questions


class TestCollegeBot:

    def test_empty_message(self):
        result = CollegeBot().process("   ")
        assert result["messages"] == []
        assert result["matched"] is False

    def test_process(self):
        bot = CollegeBot()
        result = bot.process("hi there")
        assert result["kind"] == "faq"
        assert result["matched"] is True
        assert result["messages"][0].text.startswith("Hello!")
        assert result["session_id"] == bot.session_id
        assert len(bot.history) == 1

    def test_start(self):
        messages = CollegeBot().start()
        assert "KNS College" in messages[0].text
        assert messages[1].quick_questions

    def test_reset(self):
        bot = CollegeBot()
        bot.process("hi")
        old_session = bot.session_id
        bot.reset()
        assert bot.session_id != old_session
        assert bot.history == []

    def test_transcript(self, tmp_path):
        transcript = TranscriptLogger(tmp_path / "chat.jsonl")
        bot = CollegeBot(transcript=transcript)
        bot.start()
        bot.process("what are your fees")

        records = transcript.read_session(bot.session_id)
        assert [r["sender"] for r in records] == ["bot", "user", "bot", "bot"]
        assert records[1]["message"] == "what are your fees"

        lines = (tmp_path / "chat.jsonl").read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[0])["session_id"] == bot.session_id


class TestTranscriptLogger:

    def test_disabled(self, tmp_path):
        logger = TranscriptLogger(None)
        assert not logger.enabled
        logger.log("s1", "user", "hello")
        assert logger.read_session("s1") == []

    def test_write_failure_is_swallowed(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        logger = TranscriptLogger(blocker / "chat.jsonl")
        logger.log("s1", "user", "hello")

    def test_sessions_are_separate(self, tmp_path):
        logger = TranscriptLogger(tmp_path / "chat.jsonl")
        logger.log("s1", "user", "hello")
        logger.log("s2", "user", "bye")
        assert [r["message"] for r in logger.read_session("s2")] == ["bye"]


class TestCommandLine:

    def test_log_level_is_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.no_delay is False
        assert args.log_level == args.log_level.upper()


class TestEnvFloat:

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("KNS_BOT_TEST_DELAY", raising=False)
        assert env_float("KNS_BOT_TEST_DELAY", 0.5) == 0.5

    def test_valid(self, monkeypatch):
        monkeypatch.setenv("KNS_BOT_TEST_DELAY", " 1.25 ")
        assert env_float("KNS_BOT_TEST_DELAY", 0.5) == 1.25

    def test_invalid_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("KNS_BOT_TEST_DELAY", "fast")
        assert env_float("KNS_BOT_TEST_DELAY", 0.5) == 0.5
