"""Tests for command correction."""

from __future__ import annotations

import pytest

from shark.core.models import ReasonText
from shark.magic.commands import ACCEPT_THRESHOLD, fuse_confidence, suggest_command
from shark.magic.hints import KNOWN_COMMANDS
from shark.magic.metrics import MAX_DISTANCE


class TestSuggestCommandSelection:
    def test_picks_closest_candidate(self):
        suggestion, reason = suggest_command("cpy", ["copy", "move"])

        assert suggestion == "copy"
        assert reason.input == "cpy"
        assert reason.suggested == "copy"
        assert reason.edit_distance == 1
        assert reason.jaccard_index == 75
        assert reason.prefix_match is False

    def test_confidence_is_clipped_to_one(self):
        """1 - 1/4 + 75/200 exceeds 1 before clipping."""
        _, reason = suggest_command("cpy", ["copy", "move"])
        assert reason.confidence == 1.0
        assert reason.reason == ReasonText.STRONG

    def test_later_prefix_match_overrides_closer_candidate(self):
        """'do' is one edit away but 'copy' starts with the input."""
        suggestion, reason = suggest_command("co", ["do", "copy"])

        assert suggestion == "copy"
        assert reason.prefix_match is True
        assert reason.edit_distance == 2
        # 1 - 2/4 + 50/200 + 0.15
        assert reason.confidence == pytest.approx(0.9)

    def test_distance_tie_broken_by_higher_jaccard(self):
        _, reason = suggest_command("ab", ["xy", "ba"])
        assert reason.suggested == "ba"
        assert reason.jaccard_index == 100

    def test_exact_tie_keeps_first_candidate(self):
        _, reason = suggest_command("ab", ["ax", "xb"])
        assert reason.suggested == "ax"

    def test_suffix_match_flag(self):
        suggestion, reason = suggest_command("ove", ["move"])
        assert suggestion == "move"
        assert reason.suffix_match is True
        assert reason.prefix_match is False

    def test_none_candidates_are_skipped(self):
        suggestion, _ = suggest_command("cpy", [None, "copy"])
        assert suggestion == "copy"


class TestSuggestCommandAcceptance:
    def test_low_confidence_returns_no_suggestion_but_full_reason(self):
        """'ba' wins the scan but 1 - 2/2 + 100/200 = 0.5 is below the gate."""
        suggestion, reason = suggest_command("ab", ["xy", "ba"])

        assert suggestion is None
        assert reason.suggested == "ba"
        assert reason.confidence == pytest.approx(0.5)
        assert reason.reason == ReasonText.LOW

    def test_close_semantic_match(self):
        # 1 - 4/10 + 42/200 = 0.81
        suggestion, reason = suggest_command("abcdefXYZW", ["abcdefghij"])

        assert suggestion == "abcdefghij"
        assert reason.jaccard_index == 42
        assert reason.confidence == pytest.approx(0.81)
        assert reason.reason == ReasonText.CLOSE

    def test_confidence_exactly_at_gate_is_accepted(self):
        # 1 - 2/4 + 40/200 == 0.70: {a,b,x} vs {a,b,c,d} shares 2 of 5
        suggestion, reason = suggest_command("abxx", ["abcd"])

        assert reason.edit_distance == 2
        assert reason.jaccard_index == 40
        assert reason.confidence == pytest.approx(ACCEPT_THRESHOLD)
        assert suggestion == "abcd"
        assert reason.reason == ReasonText.CLOSE

    def test_prefix_reason_below_gate(self):
        suggestion, reason = suggest_command("c", ["copyright"])

        assert suggestion is None
        assert reason.prefix_match is True
        assert reason.reason == ReasonText.PREFIX

    def test_case_insensitive_reason_below_gate(self):
        suggestion, reason = suggest_command("COPY", ["copy", "move"])

        assert suggestion is None
        assert reason.suggested == "copy"
        assert reason.case_insensitive is True
        assert reason.confidence == pytest.approx(0.05)
        assert reason.reason == ReasonText.CASE_INSENSITIVE

    def test_empty_candidates(self):
        suggestion, reason = suggest_command("copy", [])

        assert suggestion is None
        assert reason.suggested is None
        assert reason.edit_distance == MAX_DISTANCE
        assert reason.confidence == 0.0
        assert reason.reason == ReasonText.LOW

    def test_absent_input(self):
        suggestion, reason = suggest_command(None, ["copy"])
        assert suggestion is None
        assert reason.input is None

    @pytest.mark.parametrize(
        "token",
        ["remov", "cpoy", "shw", "serch", "zzzz", "ARCHIVE", "v", "summary", "x" * 40],
    )
    def test_confidence_bounds_over_known_commands(self, token: str):
        suggestion, reason = suggest_command(token, KNOWN_COMMANDS)

        assert 0.0 <= reason.confidence <= 1.0
        assert reason.reason in ReasonText.ALL
        if suggestion is not None:
            assert reason.confidence >= ACCEPT_THRESHOLD
            assert reason.accepted

    def test_typo_of_known_command(self):
        suggestion, _ = suggest_command("remov", KNOWN_COMMANDS)
        assert suggestion == "remove"


class TestFuseConfidence:
    def test_bonuses_accumulate(self):
        base = fuse_confidence(4, 8, 0, False, False, False)
        assert base == pytest.approx(0.5)
        assert fuse_confidence(4, 8, 0, True, False, False) == pytest.approx(0.65)
        assert fuse_confidence(4, 8, 0, False, True, False) == pytest.approx(0.60)
        assert fuse_confidence(4, 8, 0, False, False, True) == pytest.approx(0.55)

    def test_clipped_at_zero(self):
        assert fuse_confidence(10, 2, 0, False, False, False) == 0.0

    def test_empty_candidate_does_not_divide_by_zero(self):
        assert fuse_confidence(0, 0, 0, False, False, False) == 1.0
