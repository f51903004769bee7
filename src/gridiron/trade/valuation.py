"""Value comparison and fairness classification for trade proposals.

Unlike the analytics calculators, trade input is validated strictly: a
proposal with an empty side or a non-numeric projection is rejected with a
:class:`TradeValidationError` instead of being valued at zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from gridiron.config.scoring import TRADE_RULES
from gridiron.models import Position
from gridiron.numeric import clamp


logger = logging.getLogger(__name__)


class Fairness(str, Enum):
    FAIR = "fair"
    FAVORABLE = "favorable"
    UNFAVORABLE = "unfavorable"


class TradePlayer(BaseModel):
    id: Optional[str] = None
    name: str = ""
    position: Position
    team: Optional[str] = None
    projected_points: float = Field(..., allow_inf_nan=False)
    current_value: Optional[float] = Field(default=None, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("position", mode="before")
    @classmethod
    def _parse_position(cls, value: Any) -> Position:
        return Position.parse(value)

    @field_validator("projected_points", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("projectedPoints must be a number")
        return value


class TradeProposal(BaseModel):
    giving: List[TradePlayer] = Field(..., min_length=1)
    receiving: List[TradePlayer] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


class TradeValidationError(ValueError):
    """Malformed trade input; ``details`` is JSON-safe for a 400 payload."""

    def __init__(self, message: str, details: Sequence[Mapping[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.details: List[Dict[str, Any]] = [dict(item) for item in details or ()]

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "TradeValidationError":
        details = [
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": error.get("msg", ""),
                "type": error.get("type", ""),
            }
            for error in exc.errors()
        ]
        return cls("Invalid trade proposal", details)


@dataclass(frozen=True)
class TradeAnalysis:
    giving_value: float
    receiving_value: float
    value_gap: float
    fairness: Fairness
    positional_impact: Mapping[str, float]
    recommendations: Tuple[str, ...]
    confidence: float


PlayerInput = Union[TradePlayer, Mapping[str, Any]]


def build_proposal(
    giving: Optional[Iterable[PlayerInput]],
    receiving: Optional[Iterable[PlayerInput]],
) -> TradeProposal:
    """Validate both sides, converting pydantic errors to TradeValidationError."""

    try:
        return TradeProposal(
            giving=list(giving) if giving is not None else None,  # type: ignore[arg-type]
            receiving=list(receiving) if receiving is not None else None,  # type: ignore[arg-type]
        )
    except ValidationError as exc:
        raise TradeValidationError.from_validation_error(exc) from exc
    except TypeError as exc:
        raise TradeValidationError(
            "Invalid trade proposal",
            [{"loc": [], "msg": str(exc), "type": "type_error"}],
        ) from exc


def classify_fairness(value_gap: float) -> Fairness:
    threshold = TRADE_RULES.fairness_threshold
    if abs(value_gap) < threshold:
        return Fairness.FAIR
    if value_gap > 0:
        return Fairness.FAVORABLE
    return Fairness.UNFAVORABLE


def positional_impact(
    giving: Sequence[TradePlayer],
    receiving: Sequence[TradePlayer],
) -> Dict[str, float]:
    """Receiving minus giving projected points, per position on either side."""

    totals: Dict[str, float] = {}
    for player in giving:
        key = player.position.value
        totals[key] = totals.get(key, 0.0) - player.projected_points
    for player in receiving:
        key = player.position.value
        totals[key] = totals.get(key, 0.0) + player.projected_points
    return {position: round(value, 2) for position, value in totals.items()}


def trade_confidence(value_gap: float, giving_count: int, receiving_count: int) -> float:
    """0-1 confidence; big gaps on small, symmetric trades are the clearest calls."""

    rules = TRADE_RULES
    gap_term = min(abs(value_gap) / rules.confidence_gap_saturation, 1.0)
    symmetry = min(giving_count, receiving_count) / max(giving_count, receiving_count)
    extra_players = max(0, giving_count + receiving_count - 2)
    confidence = (
        rules.confidence_base
        + rules.confidence_gap_weight * gap_term
        + rules.confidence_symmetry_weight * symmetry
        - rules.confidence_per_extra_player * extra_players
    )
    return round(clamp(confidence, rules.confidence_floor, rules.confidence_ceiling), 2)


def _recommendations(
    fairness: Fairness,
    value_gap: float,
    impact: Mapping[str, float],
    giving_count: int,
    receiving_count: int,
) -> List[str]:
    gap = abs(value_gap)
    if fairness is Fairness.FAIR:
        notes = [f"Balanced trade: the {gap:.1f}-point value difference is within the fair range"]
    elif fairness is Fairness.FAVORABLE:
        notes = [f"Trade favors you: you gain {gap:.1f} projected points"]
    else:
        notes = [
            f"Trade works against you: you give up {gap:.1f} projected points",
            "Ask for an additional piece to close the value gap",
        ]

    if impact:
        position, swing = max(impact.items(), key=lambda item: abs(item[1]))
        if swing > 0:
            notes.append(f"Biggest positional gain at {position} (+{swing:.1f} points)")
        elif swing < 0:
            notes.append(f"Biggest positional loss at {position} ({swing:.1f} points)")

    if receiving_count < giving_count:
        notes.append(
            f"Consolidation trade: {receiving_count} player(s) in for {giving_count}; "
            "make sure you can fill the open roster spot"
        )
    elif receiving_count > giving_count:
        notes.append(
            f"Depth trade: {receiving_count} player(s) in for {giving_count}; "
            "check roster space before accepting"
        )
    return notes


def analyze_trade(
    giving: Optional[Iterable[PlayerInput]],
    receiving: Optional[Iterable[PlayerInput]],
) -> TradeAnalysis:
    proposal = build_proposal(giving, receiving)

    giving_total = sum(player.projected_points for player in proposal.giving)
    receiving_total = sum(player.projected_points for player in proposal.receiving)
    # Classify on the exact gap; rounding is for display only.
    raw_gap = receiving_total - giving_total
    fairness = classify_fairness(raw_gap)
    giving_value = round(giving_total, 2)
    receiving_value = round(receiving_total, 2)
    value_gap = round(raw_gap, 2)
    impact = positional_impact(proposal.giving, proposal.receiving)

    logger.debug(
        "Trade %s-for-%s valued %.2f vs %.2f (%s)",
        len(proposal.giving),
        len(proposal.receiving),
        giving_value,
        receiving_value,
        fairness.value,
    )

    return TradeAnalysis(
        giving_value=giving_value,
        receiving_value=receiving_value,
        value_gap=value_gap,
        fairness=fairness,
        positional_impact=impact,
        recommendations=tuple(
            _recommendations(
                fairness,
                value_gap,
                impact,
                len(proposal.giving),
                len(proposal.receiving),
            )
        ),
        confidence=trade_confidence(raw_gap, len(proposal.giving), len(proposal.receiving)),
    )


__all__ = [
    "Fairness",
    "TradeAnalysis",
    "TradePlayer",
    "TradeProposal",
    "TradeValidationError",
    "analyze_trade",
    "build_proposal",
    "classify_fairness",
    "positional_impact",
    "trade_confidence",
]
