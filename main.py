#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--ratio R] [--seed S]
    python main.py evaluate [--games N]
"""
import argparse
import logging

from minefield.agents import RandomAgent
from minefield.board import BoardConfig, ConfigurationError
from minefield.console import play
from minefield.evaluation import Evaluator
from minefield.state import GameState


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Create the board configuration from command line flags."""
    return BoardConfig(
        width=args.width,
        height=args.height,
        mine_ratio=args.ratio,
        seed=args.seed,
    )


def play_game(args: argparse.Namespace) -> None:
    """Play one game in the terminal."""
    config = build_config(args)
    state = GameState.new_game(config)
    play(state)


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent."""
    config = build_config(args)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(RandomAgent(seed=args.seed))

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Loss rate: {results['loss_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=20, help="Board columns")
    parser.add_argument("--height", type=int, default=20, help="Board rows")
    parser.add_argument(
        "--ratio", type=float, default=0.15, help="Fraction of cells with mines"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Play or evaluate agents"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "play":
            play_game(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except ConfigurationError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
