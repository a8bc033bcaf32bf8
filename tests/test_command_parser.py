# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/22 14:10
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Tests for message classification
"""
import pytest

from models import BroadcastCommand, NoOp, PromptCommand, TranslateCommand
from taobot.services.command_parser import COMMAND_PRIORITY, parse_command


class TestPromptCommand:
    def test_prompt_is_trimmed_remainder(self):
        assert parse_command(".tao what is 2+2?") == PromptCommand(prompt="what is 2+2?")

    def test_prefix_is_case_insensitive_and_prompt_keeps_case(self):
        assert parse_command(".TAO   Tell me About Python  ") == PromptCommand(
            prompt="Tell me About Python"
        )

    @pytest.mark.parametrize("body", [".tao", ".tao   ", ".tao\n\t"])
    def test_empty_prompt(self, body):
        assert parse_command(body) == PromptCommand(prompt="")

    def test_prompt_wins_over_other_keywords(self):
        command = parse_command(".tao .tagall and translate to french")
        assert command == PromptCommand(prompt=".tagall and translate to french")

    def test_prefix_must_start_the_body(self):
        assert parse_command("hey .tao hi") == NoOp()


class TestBroadcastCommand:
    @pytest.mark.parametrize("body", [".tagall", "please .TAGALL now", "x.tagally"])
    def test_substring_match(self, body):
        assert parse_command(body) == BroadcastCommand()

    def test_broadcast_wins_over_translate(self):
        assert parse_command(".tagall translate to german") == BroadcastCommand()


class TestTranslateCommand:
    def test_language_and_source_text(self):
        assert parse_command("hello translate to spanish") == TranslateCommand(
            source_text="hello", target_language="spanish"
        )

    def test_body_is_lowered(self):
        command = parse_command("Good Morning Translate To French")
        assert command.target_language == "french"
        assert command.source_text == "good morning"

    def test_source_excludes_keyword_and_language(self):
        command = parse_command("how are you translate to   japanese  ")
        assert command.target_language == "japanese"
        assert "translate to" not in command.source_text
        assert "japanese" not in command.source_text

    def test_language_stops_at_next_occurrence(self):
        command = parse_command("a translate to b translate to c")
        assert command.target_language == "b"
        assert command.source_text == "a translate to c"

    def test_missing_source_text(self):
        assert parse_command("translate to german") == TranslateCommand(
            source_text="", target_language="german"
        )


@pytest.mark.parametrize("body", ["", "hello there", "tao", "translate this"])
def test_unrelated_text_is_noop(body):
    assert parse_command(body) == NoOp()


def test_priority_names_match_their_command_type():
    samples = {"prompt": ".tao hi", "broadcast": ".tagall", "translate": "hi translate to de"}

    assert [name for name, _ in COMMAND_PRIORITY] == ["prompt", "broadcast", "translate"]
    for name, matcher in COMMAND_PRIORITY:
        body = samples[name]
        assert matcher(body, body.lower()).type.value == name
