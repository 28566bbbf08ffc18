from unittest import mock

import pytest

from dicerules.row import RuleRow, format_rows, rows_for
from dicerules.rulesets import InvalidHand, yahtzee_rules
from dicerules.rulesets import yahtzee as rules


class TestRuleRow:
    def test_unclaimed(self):
        row = RuleRow(rules.full_house)
        assert not row.claimed
        assert row.score is None
        assert row.state == "active"
        assert row.display == rules.full_house.description

    def test_claim(self):
        row = RuleRow(rules.full_house)
        assert row.claim([2, 2, 3, 3, 3]) == 25
        assert row.claimed
        assert row.state == "disabled"
        assert row.display == "25"

    def test_claim_zero(self):
        row = RuleRow(rules.yahtzee)
        assert row.claim([1, 2, 3, 4, 5]) == 0
        assert row.claimed
        assert row.display == "0"

    def test_second_claim_is_noop(self):
        row = RuleRow(rules.yahtzee)
        assert row.claim([6, 6, 6, 6, 6]) == 50
        assert row.claim([1, 2, 3, 4, 5]) == 50
        assert row.score == 50

    def test_evaluates_once(self):
        row = RuleRow(rules.chance)
        with mock.patch("dicerules.row.evaluate", return_value=17) as evaluate:
            row.claim([1, 2, 3, 5, 6])
            row.claim([1, 2, 3, 5, 6])
            row.claim([6, 6, 6, 6, 6])
        assert evaluate.call_count == 1
        assert row.score == 17

    def test_invalid_hand_leaves_row_open(self):
        row = RuleRow(rules.chance)
        with pytest.raises(InvalidHand):
            row.claim([1, 2, 3])
        assert not row.claimed
        assert row.claim([1, 2, 3, 4, 5]) == 15


class TestFormatRows:
    def test_one_row_per_rule(self):
        rows = rows_for(yahtzee_rules)
        assert [row.rule for row in rows] == list(yahtzee_rules)

    def test_display(self):
        rows = rows_for(yahtzee_rules)
        rows[0].claim([1, 1, 2, 3, 4])
        out = format_rows(rows)
        lines = out.split("\n")

        assert " Ones" in lines[2]
        assert lines[2].endswith("| 2")
        assert " Twos" in lines[3]
        assert lines[3].endswith("| " + rules.twos.description)
        assert " Three Of A Kind" in out
