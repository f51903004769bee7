"""Persist and load custom defensive tier tables."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from gridiron.config.teams import DEFAULT_DEFENSE_TIERS, TEAM_CODES


@dataclass
class DefenseTierProfile:
    tiers: Tuple[str, ...] = DEFAULT_DEFENSE_TIERS

    def __post_init__(self) -> None:
        self.tiers = tuple(code.strip().upper() for code in self.tiers)
        unknown = sorted(set(self.tiers) - set(TEAM_CODES))
        if unknown:
            raise ValueError(f"Unknown team codes in tier profile: {', '.join(unknown)}")
        if len(self.tiers) != len(TEAM_CODES) or len(set(self.tiers)) != len(TEAM_CODES):
            raise ValueError("Tier profile must rank each of the 32 teams exactly once")

    @classmethod
    def load(cls, path: Path) -> "DefenseTierProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(tiers=tuple(data.get("tiers", DEFAULT_DEFENSE_TIERS)))

    def save(self, path: Path) -> None:
        payload = {"tiers": list(self.tiers)}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
