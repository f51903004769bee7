"""Command-line interface for running the analytics engine on JSON files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from gridiron.config_loader import DefenseTierProfile
from gridiron.engine import AnalyticsEngine
from gridiron.schedule import ScheduleService
from gridiron.schemas import PlayerScheduleResponse, TeamSOSResponse
from gridiron.settings import EngineSettings
from gridiron.trade import TradeValidationError


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fantasy football player analytics")
    parser.add_argument("--tiers", type=Path, default=None, help="Defense tier profile JSON")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=None,
        help="Logging level (defaults to GRIDIRON_LOG_LEVEL or WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    enrich = commands.add_parser("enrich", help="Enrich a JSON list of player snapshots")
    enrich.add_argument("players", type=Path, help="Path to players JSON")
    enrich.add_argument("--week", type=int, default=None, help="Current week (1-18)")

    breakouts = commands.add_parser("breakouts", help="Rank breakout candidates")
    breakouts.add_argument("players", type=Path, help="Path to players JSON")
    breakouts.add_argument("--week", type=int, default=None, help="Current week (1-18)")
    breakouts.add_argument("--limit", type=int, default=None, help="Maximum candidates to list")

    schedule = commands.add_parser("schedule", help="Upcoming schedule for one player")
    schedule.add_argument("--player-id", required=True)
    schedule.add_argument("--name", required=True)
    schedule.add_argument("--team", required=True)
    schedule.add_argument("--position", required=True)
    schedule.add_argument("--week", type=int, default=None)

    sos = commands.add_parser("sos", help="Strength of schedule for one team")
    sos.add_argument("--team-id", required=True)
    sos.add_argument("--team-name", default="")
    sos.add_argument("--week", type=int, default=None)

    position_sos = commands.add_parser("position-sos", help="SOS against a position for all teams")
    position_sos.add_argument("--position", required=True)
    position_sos.add_argument("--week", type=int, default=None)

    trade = commands.add_parser("trade", help="Analyze a trade request JSON body")
    trade.add_argument("proposal", type=Path, help="Path to trade JSON")

    return parser.parse_args(argv)


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _emit(payload: Any, output: Path | None) -> None:
    text = json.dumps(payload, indent=2)
    if output:
        output.write_text(text, encoding="utf-8")
        print(f"Wrote {output}")
    else:
        print(text)


def _build_engine(args: argparse.Namespace, settings: EngineSettings) -> AnalyticsEngine:
    tiers = DefenseTierProfile.load(args.tiers).tiers if args.tiers else None
    return AnalyticsEngine(schedule_service=ScheduleService(tiers=tiers), settings=settings)


def _run(args: argparse.Namespace, engine: AnalyticsEngine) -> Any:
    if args.command == "enrich":
        players = engine.enrich_players(_read_json(args.players), args.week)
        return [player.model_dump(mode="json", by_alias=True) for player in players]

    if args.command == "breakouts":
        body = {"players": _read_json(args.players), "limit": args.limit}
        if args.week is not None:
            body["currentWeek"] = args.week
        return engine.handle_breakout_request(body).to_payload()

    if args.command == "schedule":
        result = engine.upcoming_schedule(
            args.player_id, args.name, args.team, args.position, args.week
        )
        return PlayerScheduleResponse.from_schedule(result).to_payload()

    if args.command == "sos":
        result = engine.calculate_sos(args.team_id, args.team_name, args.week)
        return TeamSOSResponse.from_sos(result).to_payload()

    if args.command == "position-sos":
        return dict(engine.get_position_sos(args.position, args.week))

    return engine.handle_trade_request(_read_json(args.proposal)).to_payload()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = EngineSettings.from_env()
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = _build_engine(args, settings)
        payload = _run(args, engine)
    except TradeValidationError as exc:
        print(f"{exc.message}:", file=sys.stderr)
        for detail in exc.details:
            location = ".".join(detail["loc"]) or "<body>"
            print(f"  {location}: {detail['msg']}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    _emit(payload, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
