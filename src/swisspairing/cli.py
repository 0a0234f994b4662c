"""Command-line interface for Swiss Pairing.

Runs either as a one-shot argparse command or, with no arguments, as an
interactive prompt with command completion.
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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
import shlex
import sys
import time
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from swisspairing.exceptions import SwissPairingException
from swisspairing.models.tournament_config import TournamentConfig
from swisspairing.pairing.override import force_pairing
from swisspairing.pairing.queries import (
    find_pairing,
    pairings_for_player,
    player_result,
    rounds_in,
)
from swisspairing.player.factory import RosterFactory
from swisspairing.tournament.generator import TournamentGenerator
from swisspairing.utils import setup_logger
from swisspairing.utils.serialization import (
    TournamentFile,
    load_config,
    load_roster,
    load_tournament,
    save_tournament,
)
from swisspairing.validation import (
    format_validation_report,
    log_validation,
    save_report,
    validate_pairings,
)

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "generate": {
        "description": "Generate a Swiss tournament",
        "options": {
            "--players": "Number of synthetic players (default: 600)",
            "--rounds": "Number of rounds, 1-8 (default: 8)",
            "--seed": "Random seed for reproducibility",
            "--resolved-through": "Last round with results; later rounds stay pending",
            "--roster": "Roster file (JSON) instead of synthetic players",
            "--config": "Tournament configuration file (JSON)",
            "--name": "Tournament name",
            "--output": "Output file path",
            "--validate": "Validate the generated pairings",
        },
    },
    "validate": {
        "description": "Validate the pairings of a tournament file",
        "options": {
            "--file": "Tournament file to validate (JSON)",
            "--players": "Roster size to validate against (default: from file)",
            "--export": "Export validation report (JSON)",
        },
    },
    "force-pairing": {
        "description": "Force two players to meet at a given round and table",
        "options": {
            "--file": "Tournament file (JSON)",
            "--round": "Round number",
            "--table": "Table number",
            "--player1": "First player id",
            "--player2": "Second player id",
            "--output": "Output file path (default: overwrite --file)",
        },
    },
    "find-pairing": {
        "description": "Find the table where two players meet",
        "options": {
            "--file": "Tournament file (JSON)",
            "--player1": "First player id",
            "--player2": "Second player id",
            "--round": "Restrict to one round",
        },
    },
    "pairings-for-player": {
        "description": "List every pairing of one player",
        "options": {
            "--file": "Tournament file (JSON)",
            "--player": "Player id",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {
            "<command>": "Command name to get help for",
        },
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                     SWISS PAIRING - CLI                       ║
║                                                               ║
║            [Generate, pin and validate pairings]              ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:20}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer():
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = None

    return NestedCompleter.from_nested_dict(completions)


def _print_error(error: Exception) -> None:
    print(f"{Colors.FAIL}Error: {error}{Colors.ENDC}")


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the generate command."""
    try:
        config = load_config(args.config) if args.config else TournamentConfig()
        if args.name:
            config.name = args.name
        if args.rounds is not None:
            config.num_rounds = args.rounds
        if args.seed is not None:
            config.seed = args.seed
        if args.resolved_through is not None:
            config.resolved_through = args.resolved_through

        if args.roster:
            roster = load_roster(args.roster)
        else:
            roster = RosterFactory(seed=config.seed).create_roster(args.players)

        print(f"\n{Colors.BOLD}Generating tournament...{Colors.ENDC}")
        start = time.perf_counter()
        pairings = TournamentGenerator(config).generate(roster)
        elapsed = time.perf_counter() - start

        tournament = TournamentFile(config=config, players=roster, pairings=pairings)
        if args.output:
            output_path = save_tournament(tournament, args.output)
            print(f"{Colors.OKGREEN}Tournament saved to: {output_path}{Colors.ENDC}")
    except SwissPairingException as e:
        _print_error(e)
        return 1

    print(f"\n{Colors.BOLD}Tournament Generated:{Colors.ENDC} {config.name}")
    print(f"  Players: {len(roster)}")
    print(f"  Rounds: {len(rounds_in(pairings))}")
    print(f"  Pairings: {len(pairings)}")
    print(f"  Time: {elapsed * 1000:.2f}ms")

    if args.validate:
        report = validate_pairings(pairings, len(roster))
        log_validation(report, config.name)
        print()
        print(format_validation_report(report, config.name))
        return 0 if report.is_valid else 1
    return 0


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validation command."""
    try:
        tournament = load_tournament(args.file)
    except SwissPairingException as e:
        _print_error(e)
        return 1

    total_players = args.players
    if total_players is None:
        total_players = len(tournament.players) or len(
            {pid for p in tournament.pairings for pid in p.player_ids}
        )

    name = tournament.config.name
    report = validate_pairings(tournament.pairings, total_players)
    log_validation(report, name)
    print()
    print(format_validation_report(report, name))

    if args.export:
        try:
            save_report(report, Path(args.export))
        except SwissPairingException as e:
            _print_error(e)
            return 1
        print(f"\n{Colors.OKGREEN}Report exported to: {args.export}{Colors.ENDC}")

    return 0 if report.is_valid else 1


def run_force_pairing_command(args: argparse.Namespace) -> int:
    """Run the force-pairing command."""
    try:
        tournament = load_tournament(args.file)
        tournament.pairings = force_pairing(
            tournament.pairings, args.round, args.table, args.player1, args.player2
        )
        output_path = save_tournament(tournament, args.output or args.file)
    except SwissPairingException as e:
        _print_error(e)
        return 1

    pairing = find_pairing(tournament.pairings, args.player1, args.player2, args.round)
    print(f"{Colors.OKGREEN}Forced pairing: {pairing}{Colors.ENDC}")
    print(f"Tournament saved to: {output_path}")
    return 0


def run_find_pairing_command(args: argparse.Namespace) -> int:
    """Run the find-pairing command."""
    try:
        tournament = load_tournament(args.file)
    except SwissPairingException as e:
        _print_error(e)
        return 1

    pairing = find_pairing(tournament.pairings, args.player1, args.player2, args.round)
    if pairing is None:
        print(f"{Colors.WARNING}No pairing found for {args.player1} vs {args.player2}{Colors.ENDC}")
        return 1
    print(pairing)
    return 0


def run_pairings_for_player_command(args: argparse.Namespace) -> int:
    """Run the pairings-for-player command."""
    try:
        tournament = load_tournament(args.file)
    except SwissPairingException as e:
        _print_error(e)
        return 1

    pairings = pairings_for_player(tournament.pairings, args.player)
    if not pairings:
        print(f"{Colors.WARNING}No pairings found for {args.player}{Colors.ENDC}")
        return 1

    print(f"\n{Colors.BOLD}Pairings for {args.player}:{Colors.ENDC}")
    for pairing in pairings:
        outcome = player_result(pairing, args.player) or "pending"
        print(f"  {pairing}  -> {outcome}")
    return 0


def create_generate_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for generate subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(prog="generate", description="Generate a Swiss tournament")
    parser.add_argument("--players", type=int, default=600, help="Number of players")
    parser.add_argument("--rounds", type=int, help="Number of rounds")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--resolved-through", type=int, help="Last round with results"
    )
    parser.add_argument("--roster", help="Roster file (JSON)")
    parser.add_argument("--config", help="Tournament configuration file (JSON)")
    parser.add_argument("--name", help="Tournament name")
    parser.add_argument("--output", help="Output file path")
    parser.add_argument("--validate", action="store_true", help="Validate pairings")
    parser.set_defaults(func=run_generate_command)
    return parser


def create_validate_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for validate subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(prog="validate", description="Validate pairings")
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument("--players", type=int, help="Roster size")
    parser.add_argument("--export", help="Export report (JSON)")
    parser.set_defaults(func=run_validate_command)
    return parser


def create_force_pairing_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for force-pairing subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(prog="force-pairing", description="Force a pairing")
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument("--round", type=int, required=True, help="Round number")
    parser.add_argument("--table", type=int, required=True, help="Table number")
    parser.add_argument("--player1", required=True, help="First player id")
    parser.add_argument("--player2", required=True, help="Second player id")
    parser.add_argument("--output", help="Output file path")
    parser.set_defaults(func=run_force_pairing_command)
    return parser


def create_find_pairing_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for find-pairing subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(prog="find-pairing", description="Find a pairing")
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument("--player1", required=True, help="First player id")
    parser.add_argument("--player2", required=True, help="Second player id")
    parser.add_argument("--round", type=int, help="Restrict to one round")
    parser.set_defaults(func=run_find_pairing_command)
    return parser


def create_pairings_for_player_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for pairings-for-player subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(
            prog="pairings-for-player", description="List a player's pairings"
        )
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument("--player", required=True, help="Player id")
    parser.set_defaults(func=run_pairings_for_player_command)
    return parser


SUBCOMMAND_PARSERS = {
    "generate": create_generate_parser,
    "validate": create_validate_parser,
    "force-pairing": create_force_pairing_parser,
    "find-pairing": create_find_pairing_parser,
    "pairings-for-player": create_pairings_for_player_parser,
}


def create_main_parser():
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="swiss-pairing",
        description="Swiss-system pairing generation and validation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  swiss-pairing

  # Generate a 600 player, 8 round event with one round still pending
  swiss-pairing generate --players 600 --rounds 8 --seed 42 --resolved-through 7 --output event.json

  # Validate it
  swiss-pairing validate --file event.json

  # Pin two players to round 3, table 12
  swiss-pairing force-pairing --file event.json --round 3 --table 12 --player1 manraj-sidhu --player2 david-kim
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for command, create_parser in SUBCOMMAND_PARSERS.items():
        create_parser(subparsers.add_parser(command, help=COMMANDS[command]["description"]))

    return parser


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("swiss-pairing> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?"]:
                print_commands_list()
                continue

            if user_input.startswith("/help ") or user_input.startswith("help "):
                cmd = user_input.split()[1].lstrip("/")
                print_command_help(cmd)
                continue

            parts = shlex.split(user_input)
            if not parts:
                continue
            command = parts[0].lstrip("/")

            if command not in SUBCOMMAND_PARSERS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            try:
                args = SUBCOMMAND_PARSERS[command]().parse_args(parts[1:])
                args.func(args)
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue
            except Exception as e:
                _print_error(e)
                logger.exception("Command execution failed")

        except ValueError as e:
            # unbalanced quotes from shlex
            _print_error(e)
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def run_standard_mode(argv: List[str]) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return run_interactive_mode()

    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the swiss-pairing CLI."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv or "--interactive" in argv or "-i" in argv:
        return run_interactive_mode()

    return run_standard_mode(argv)


if __name__ == "__main__":
    sys.exit(main())
