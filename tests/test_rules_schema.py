import pytest
from pydantic import ValidationError

from euchre.rules_schema import RuleSet


def test_defaults():
    rules = RuleSet()

    assert rules.winning_score == 10
    assert (rules.march_points, rules.euchre_points, rules.made_points) == (2, 2, 1)
    assert rules.gone_once_on_redeal == "reset"
    assert rules.max_redeals is None


def test_from_mapping_validates():
    rules = RuleSet.from_mapping({"winning_score": 5, "gone_once_on_redeal": "carry"})
    assert rules.winning_score == 5
    assert rules.gone_once_on_redeal == "carry"

    with pytest.raises(ValidationError):
        RuleSet.from_mapping({"gone_once_on_redeal": "sometimes"})
    with pytest.raises(ValidationError):
        RuleSet.from_mapping({"winning_score": 0})


def test_euchre_must_not_score_below_made_hand():
    with pytest.raises(ValidationError):
        RuleSet(made_points=2, euchre_points=1)
