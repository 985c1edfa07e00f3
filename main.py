#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}]
                        [--rows R --cols C --mines M] [--marks]
    python main.py simulate [--games N] [--seed S]
"""
import argparse
import logging

from minefield import (
    BoardConfig,
    Game,
    InvalidConfiguration,
    PRESETS,
    Phase,
    render_ansi,
    simulate,
)


HELP_TEXT = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   cycle flag on a cell
  m           toggle marks (?)
  n           new game
  q           quit"""


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from a preset or custom values."""
    preset = PRESETS[args.difficulty]
    return BoardConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
    )


def print_status(game: Game) -> None:
    """Print the board with the flag counter and game phase."""
    print()
    print(render_ansi(game))
    print(f"Flags: {game.flags_remaining}  Marks: {'on' if game.mark_option else 'off'}")
    if game.phase == Phase.WON:
        print("\n*** WIN! ***")
    elif game.phase == Phase.LOST:
        print(f"\n*** LOST (hit mine at {game.detonated}) ***")
        wrong = game.misflagged()
        if wrong:
            print(f"Wrong flags: {wrong}")


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    game = Game(build_config(args), marks=args.marks, seed=args.seed)
    print(HELP_TEXT)
    print_status(game)

    while True:
        try:
            line = input("> ").split()
        except EOFError:
            break
        if not line:
            continue

        command, params = line[0].lower(), line[1:]
        if command == "q":
            break
        if command == "n":
            game.reset()
        elif command == "m":
            game.toggle_mark_option()
        elif command in ("r", "f") and len(params) == 2:
            try:
                row, col = int(params[0]), int(params[1])
            except ValueError:
                print(HELP_TEXT)
                continue
            if command == "r":
                game.reveal(row, col)
            else:
                game.flag(row, col)
        else:
            print(HELP_TEXT)
            continue

        game.drain_changed()
        print_status(game)


def run_simulation(args: argparse.Namespace) -> None:
    """Simulate random-click games and print results."""
    config = build_config(args)
    print(
        f"Simulating {args.games} games on {config.rows}x{config.cols} "
        f"with {config.num_mines} mines..."
    )
    results = simulate(config, games=args.games, seed=args.seed)

    print("Results:")
    print(f"  Win rate: {results.win_rate:.1%}")
    print(f"  Avg steps: {results.avg_steps:.1f}")
    print(f"  Avg safe cells revealed: {results.avg_revealed:.1f}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board size options shared by every command."""
    parser.add_argument(
        "--difficulty",
        choices=sorted(PRESETS),
        default="beginner",
        help="Preset board size",
    )
    parser.add_argument("--rows", type=int, help="Custom row count")
    parser.add_argument("--cols", type=int, help="Custom column count")
    parser.add_argument("--mines", type=int, help="Custom mine count")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal or simulate games"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)
    play_parser.add_argument(
        "--marks", action="store_true", help="Enable question marks"
    )

    # Simulate command
    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random-click games"
    )
    add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            run_simulation(args)
        else:
            parser.print_help()
    except InvalidConfiguration as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
