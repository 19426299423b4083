"""Courtside console.

Run a seeded simulated tournament, replay a recorded match, or score a match
point by point from the terminal::

    python -m courtside.cli simulate --players 8 --mode short --seed 7
    python -m courtside.cli replay --file match.json
    python -m courtside.cli score --mode standard --team-a P1 P2 --team-b P3 P4
"""

# Courtside
# Copyright (C) 2025  Courtside developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from courtside.constants import SAVE_FILE_EXTENSION
from courtside.controllers.scoring import (
    get_match_display,
    new_match_state,
    score_point,
    summarize_match,
)
from courtside.exceptions import CourtsideException
from courtside.models.enums import MatchMode, Side
from courtside.models.scoring import MatchDisplay, MatchState, PointEvent, TeamPlayers
from courtside.testing.simulator import SimulationConfig, TournamentSimulator
from courtside.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


SCORE_COMMANDS = ["a", "b", "undo", "quit"]


def format_display(display: MatchDisplay) -> str:
    """One-line scoreboard for a match display."""
    parts = []
    if display.sets is not None:
        parts.append(f"Sets {display.sets.a}-{display.sets.b}")
        parts.append(f"Set {display.current_set}")
    parts.append(f"Games {display.games.a}-{display.games.b}")
    if display.total_games:
        parts.append(f"Game {display.game_number}/{display.total_games}")
    else:
        parts.append(f"Game {display.game_number}")
    parts.append(f"Points {display.points.a}-{display.points.b}")
    if display.server:
        parts.append(f"Server {display.server}")
    if display.is_tie_break:
        parts.append("Tie-break")
    return " | ".join(parts)


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run the simulate command."""
    config = SimulationConfig(
        num_players=args.players,
        mode=MatchMode(args.mode),
        seed=args.seed,
        side_a_bias=args.bias,
    )

    print(f"\n{Colors.BOLD}Simulating tournament...{Colors.ENDC}")
    try:
        result = TournamentSimulator(config).run()
    except CourtsideException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1
    tournament = result.tournament
    teams = {team.id: team for team in tournament.teams}

    def team_label(team_id: Optional[str]) -> str:
        team = teams.get(team_id or "")
        if team is None:
            return "TBD"
        return f"Team {team.team_number} ({team.player1_id}/{team.player2_id})"

    print(f"\n{Colors.BOLD}Standings:{Colors.ENDC}")
    for standing in tournament.standings:
        print(
            f"  {standing.rank:2}. {team_label(standing.team_id):28} "
            f"P{standing.played} W{standing.won} L{standing.lost} "
            f"Pts {standing.points}"
        )

    print(f"\n{Colors.BOLD}Knockout:{Colors.ENDC}")
    for match in tournament.knockout_matches:
        winner = team_label(match.winner_team_id) if match.completed else "-"
        print(
            f"  {match.stage.value:6} {team_label(match.team_a_id)} vs "
            f"{team_label(match.team_b_id)} -> {winner}"
        )

    print(
        f"\n{Colors.OKGREEN}Champion: {team_label(tournament.winner)}{Colors.ENDC}"
    )

    if args.output:
        output_path = Path(args.output)
        if not output_path.suffix:
            output_path = output_path.with_suffix(SAVE_FILE_EXTENSION)
        output_path.write_text(result.export_json_format(), encoding="utf-8")
        print(f"{Colors.OKGREEN}Simulation saved to: {output_path}{Colors.ENDC}")

    return 0


def _load_replay_source(data: Dict[str, Any], match_id: Optional[str]) -> Dict[str, Any]:
    # A simulation snapshot holds many matches; pick one out of it
    if "matches" not in data:
        return data
    if not match_id:
        raise CourtsideException(
            "simulation file holds several matches, choose one with --match"
        )
    if match_id not in data["matches"]:
        raise CourtsideException(f"match not found in file: {match_id}")
    source = dict(data["matches"][match_id])
    source["mode"] = data["config"]["mode"]
    return source


def run_replay_command(args: argparse.Namespace) -> int:
    """Run the replay command."""
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"{Colors.FAIL}Error: File not found: {file_path}{Colors.ENDC}")
        return 1

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        source = _load_replay_source(data, args.match)
        events = [PointEvent.from_dict(e) for e in source.get("events", [])]
        summary = summarize_match(
            source["mode"],
            TeamPlayers.from_dict(source["players"]),
            events,
            source.get("servers"),
        )
    except json.JSONDecodeError as e:
        print(f"{Colors.FAIL}Error: {file_path} is not valid JSON: {e}{Colors.ENDC}")
        return 1
    except KeyError as e:
        print(f"{Colors.FAIL}Error: missing field in {file_path}: {e}{Colors.ENDC}")
        return 1
    except CourtsideException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    print(f"\n{Colors.BOLD}Replayed {summary.event_count} points{Colors.ENDC}")
    print(f"  {format_display(get_match_display(summary.final_state))}")
    print(f"  Points won: A {summary.points_a} - B {summary.points_b}")
    print(f"  Games won:  A {summary.games_a} - B {summary.games_b}")
    if summary.final_state.mode is MatchMode.STANDARD:
        print(f"  Sets won:   A {summary.sets_a} - B {summary.sets_b}")
    winner = summary.winner.value if summary.winner else "none yet"
    print(f"  Winner: {winner}")

    print(f"\n{Colors.BOLD}Players:{Colors.ENDC}")
    for stats in summary.player_stats:
        print(
            f"  {stats.player_id:10} side {stats.side.value}  "
            f"points {stats.total_points_won:3}  "
            f"1st in {stats.first_serve_percentage:5.1f}%  "
            f"DF {stats.double_faults}"
        )

    if args.export:
        export_path = Path(args.export)
        export_path.write_text(json.dumps(summary.to_dict(), indent=2), encoding="utf-8")
        print(f"\n{Colors.OKGREEN}Summary exported to: {export_path}{Colors.ENDC}")

    return 0


def run_score_command(args: argparse.Namespace) -> int:
    """Score a match interactively, one point at a time."""
    try:
        state = new_match_state(
            args.mode,
            TeamPlayers(team_a=tuple(args.team_a), team_b=tuple(args.team_b)),
            args.servers,
        )
    except CourtsideException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    session = PromptSession(
        completer=WordCompleter(SCORE_COMMANDS),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )
    history: List[MatchState] = []

    print(f"Type {Colors.BOLD}a{Colors.ENDC} or {Colors.BOLD}b{Colors.ENDC} to award a point")
    while True:
        print(format_display(get_match_display(state)))
        if state.completed:
            print(f"\n{Colors.OKGREEN}Side {state.winner.value} wins!{Colors.ENDC}\n")
            return 0

        try:
            user_input = session.prompt("point> ").strip().lower()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            return 0

        if user_input in ("quit", "exit", "q"):
            return 0
        if user_input == "undo":
            if history:
                state = history.pop()
            else:
                print(f"{Colors.WARNING}Nothing to undo{Colors.ENDC}")
            continue
        if user_input.upper() not in (Side.A.value, Side.B.value):
            print(f"{Colors.FAIL}Unknown command: {user_input}{Colors.ENDC}")
            continue

        history.append(state)
        state = score_point(state, Side(user_input.upper()))


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="courtside",
        description="Tennis scoring and doubles tournament console",
    )
    subparsers = parser.add_subparsers(dest="command")

    simulate = subparsers.add_parser("simulate", help="Simulate a full tournament")
    simulate.add_argument("--players", type=int, default=8, help="Number of players")
    simulate.add_argument(
        "--mode",
        choices=[m.value for m in MatchMode],
        default=MatchMode.SHORT_FORMAT.value,
        help="Scoring mode for every match",
    )
    simulate.add_argument("--seed", type=int, help="Random seed")
    simulate.add_argument(
        "--bias", type=float, default=0.5, help="Chance that side A wins a rally"
    )
    simulate.add_argument("--output", help="Write the simulation snapshot (JSON)")
    simulate.set_defaults(func=run_simulate_command)

    replay = subparsers.add_parser("replay", help="Replay recorded point events")
    replay.add_argument("--file", required=True, help="Match or simulation file (JSON)")
    replay.add_argument("--match", help="Match id inside a simulation file")
    replay.add_argument("--export", help="Export the summary (JSON)")
    replay.set_defaults(func=run_replay_command)

    score = subparsers.add_parser("score", help="Score a match interactively")
    score.add_argument(
        "--mode",
        choices=[m.value for m in MatchMode],
        default=MatchMode.STANDARD.value,
    )
    score.add_argument("--team-a", nargs="+", required=True, help="Side A players")
    score.add_argument("--team-b", nargs="+", required=True, help="Side B players")
    score.add_argument("--servers", nargs=3, help="Short-format server order")
    score.set_defaults(func=run_score_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
