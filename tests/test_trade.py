import json

import pytest

from gridiron.trade import (
    Fairness,
    TradePlayer,
    TradeValidationError,
    analyze_trade,
    classify_fairness,
    trade_confidence,
)


def _item(position, points, **extra):
    payload = {"name": f"{position} {points}", "position": position, "projectedPoints": points}
    payload.update(extra)
    return payload


def test_small_gap_is_fair():
    result = analyze_trade([_item("QB", 20.5)], [_item("QB", 21.2)])

    assert result.fairness is Fairness.FAIR
    assert result.value_gap == pytest.approx(0.7)
    assert result.giving_value == pytest.approx(20.5)
    assert result.receiving_value == pytest.approx(21.2)
    assert result.positional_impact == {"QB": pytest.approx(0.7)}
    assert result.recommendations[0].startswith("Balanced trade")


def test_large_gain_is_favorable():
    result = analyze_trade([_item("WR", 10)], [_item("WR", 20)])

    assert result.fairness is Fairness.FAVORABLE
    assert result.value_gap == pytest.approx(10.0)
    assert result.recommendations[0] == "Trade favors you: you gain 10.0 projected points"


def test_large_loss_is_unfavorable():
    result = analyze_trade([_item("WR", 20)], [_item("WR", 10)])

    assert result.fairness is Fairness.UNFAVORABLE
    assert result.value_gap == pytest.approx(-10.0)
    assert "Ask for an additional piece to close the value gap" in result.recommendations


@pytest.mark.parametrize(
    "gap,expected",
    [
        (0.0, Fairness.FAIR),
        (4.99, Fairness.FAIR),
        (-4.99, Fairness.FAIR),
        (5.0, Fairness.FAVORABLE),
        (-5.0, Fairness.UNFAVORABLE),
    ],
)
def test_fairness_threshold(gap, expected):
    assert classify_fairness(gap) is expected


def test_positional_impact_covers_both_sides():
    result = analyze_trade([_item("RB", 15), _item("WR", 12)], [_item("RB", 18)])

    assert result.positional_impact == {"RB": pytest.approx(3.0), "WR": pytest.approx(-12.0)}
    assert result.fairness is Fairness.UNFAVORABLE
    assert "Biggest positional loss at WR (-12.0 points)" in result.recommendations
    assert any(note.startswith("Consolidation trade") for note in result.recommendations)


def test_depth_trade_note():
    result = analyze_trade([_item("RB", 18)], [_item("RB", 9), _item("WR", 9)])
    assert any(note.startswith("Depth trade") for note in result.recommendations)


def test_confidence_bounds_and_ordering():
    assert trade_confidence(20.0, 1, 1) == pytest.approx(0.95)
    assert trade_confidence(0.0, 1, 1) == pytest.approx(0.7)
    assert trade_confidence(0.0, 3, 1) == pytest.approx(0.47)
    assert trade_confidence(0.0, 8, 1) >= 0.1

    clear = analyze_trade([_item("WR", 5)], [_item("WR", 25)])
    murky = analyze_trade([_item("WR", 5), _item("RB", 5), _item("TE", 5)], [_item("QB", 16)])
    assert 0.0 <= murky.confidence < clear.confidence <= 1.0


def test_accepts_models_and_snake_case_keys():
    giving = [TradePlayer(position="QB", projected_points=18, id=12)]
    receiving = [{"position": "def", "projected_points": "9.5"}, _item("K", 8)]

    result = analyze_trade(giving, receiving)

    assert giving[0].id == "12"
    assert result.receiving_value == pytest.approx(17.5)
    assert set(result.positional_impact) == {"QB", "DST", "K"}


def test_empty_side_is_rejected():
    with pytest.raises(TradeValidationError) as excinfo:
        analyze_trade([], [_item("QB", 10)])

    assert excinfo.value.details[0]["loc"] == ["giving"]


def test_missing_side_is_rejected():
    with pytest.raises(TradeValidationError) as excinfo:
        analyze_trade([_item("QB", 10)], None)

    assert excinfo.value.details[0]["loc"] == ["receiving"]


@pytest.mark.parametrize("bad", ["abc", float("nan"), float("inf"), True, None])
def test_non_numeric_projection_is_rejected(bad):
    with pytest.raises(TradeValidationError) as excinfo:
        analyze_trade([_item("QB", bad)], [_item("QB", 10)])

    loc = excinfo.value.details[0]["loc"]
    assert loc[:2] == ["giving", "0"]
    assert loc[-1] in {"projectedPoints", "projected_points"}


def test_unknown_position_is_rejected():
    with pytest.raises(TradeValidationError):
        analyze_trade([_item("LB", 10)], [_item("QB", 10)])


def test_non_iterable_side_is_rejected():
    with pytest.raises(TradeValidationError) as excinfo:
        analyze_trade(5, [_item("QB", 10)])  # type: ignore[arg-type]

    assert excinfo.value.details[0]["type"] == "type_error"


def test_validation_error_details_are_json_safe():
    with pytest.raises(TradeValidationError) as excinfo:
        analyze_trade([_item("QB", "abc")], [])

    assert len(excinfo.value.details) == 2
    json.dumps(excinfo.value.details)
    assert isinstance(excinfo.value, ValueError)


def test_fairness_uses_unrounded_gap():
    just_inside = analyze_trade([_item("QB", 10.004)], [_item("QB", 15.0)])
    assert just_inside.fairness is Fairness.FAIR
    assert just_inside.value_gap == pytest.approx(5.0)

    just_outside = analyze_trade([_item("QB", 10.0)], [_item("QB", 15.004)])
    assert just_outside.fairness is Fairness.FAVORABLE
    assert just_outside.value_gap == pytest.approx(5.0)
