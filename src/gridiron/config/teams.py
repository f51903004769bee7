"""The 32-team universe and the simple tier tables behind schedule difficulty."""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from gridiron.models import Position
from gridiron.numeric import clamp, to_safe_number


SEASON_WEEKS = 18
FANTASY_PLAYOFF_WEEKS: Tuple[int, ...] = (15, 16, 17)

NFL_TEAMS: Mapping[str, str] = {
    "ARI": "Arizona Cardinals",
    "ATL": "Atlanta Falcons",
    "BAL": "Baltimore Ravens",
    "BUF": "Buffalo Bills",
    "CAR": "Carolina Panthers",
    "CHI": "Chicago Bears",
    "CIN": "Cincinnati Bengals",
    "CLE": "Cleveland Browns",
    "DAL": "Dallas Cowboys",
    "DEN": "Denver Broncos",
    "DET": "Detroit Lions",
    "GB": "Green Bay Packers",
    "HOU": "Houston Texans",
    "IND": "Indianapolis Colts",
    "JAX": "Jacksonville Jaguars",
    "KC": "Kansas City Chiefs",
    "LAC": "Los Angeles Chargers",
    "LAR": "Los Angeles Rams",
    "LV": "Las Vegas Raiders",
    "MIA": "Miami Dolphins",
    "MIN": "Minnesota Vikings",
    "NE": "New England Patriots",
    "NO": "New Orleans Saints",
    "NYG": "New York Giants",
    "NYJ": "New York Jets",
    "PHI": "Philadelphia Eagles",
    "PIT": "Pittsburgh Steelers",
    "SEA": "Seattle Seahawks",
    "SF": "San Francisco 49ers",
    "TB": "Tampa Bay Buccaneers",
    "TEN": "Tennessee Titans",
    "WAS": "Washington Commanders",
}

TEAM_CODES: Tuple[str, ...] = tuple(NFL_TEAMS)

HIGH_POWERED_OFFENSES = frozenset({"KC", "BUF", "MIA", "PHI", "SF", "DAL", "DET", "CIN"})

# Overall defensive strength, toughest first.
DEFAULT_DEFENSE_TIERS: Tuple[str, ...] = (
    "SF", "BAL", "CLE", "NYJ", "BUF", "DAL", "PIT", "KC",
    "NO", "PHI", "MIA", "JAX", "DEN", "NE", "MIN", "HOU",
    "GB", "TB", "CIN", "LAC", "DET", "SEA", "IND", "ATL",
    "LV", "TEN", "CHI", "NYG", "LAR", "CAR", "ARI", "WAS",
)

# Rotates the overall order so each position gets its own 1..32 ranking.
POSITION_TIER_OFFSETS: Dict[Position, int] = {
    Position.QB: 0,
    Position.RB: 3,
    Position.WR: 7,
    Position.TE: 11,
    Position.K: 17,
    Position.DST: 23,
}

CORE_POSITIONS: Tuple[Position, ...] = tuple(POSITION_TIER_OFFSETS)

_NAME_INDEX = {name.lower(): code for code, name in NFL_TEAMS.items()}


def team_code_for_name(name: str | None) -> str | None:
    """Resolve a full franchise name ("Kansas City Chiefs") to its code."""

    if not name:
        return None
    return _NAME_INDEX.get(name.strip().lower())


def normalize_week(week: object) -> int:
    """Coerce a week argument into 1..SEASON_WEEKS; junk becomes week 1."""

    return int(clamp(int(to_safe_number(week, 1)), 1, SEASON_WEEKS))
