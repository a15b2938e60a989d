"""
Main entry point for solving a word-search board.

Usage:
    python -m wordhunt.main oatrihpshtnrenei --dictionary dictionary.txt
    python -m wordhunt.main --dictionary dictionary.txt --config solver.yaml --output solved.txt
"""

import argparse
import logging
import sys
from pathlib import Path

from .solver import Board, SolverConfig, load_config, load_lexicon, score_progress, solve
from .utils.path_render import render_word_list


def build_config(args: argparse.Namespace) -> SolverConfig:
    """Load the YAML config (if any) and apply command-line overrides."""
    config = load_config(args.config) if args.config else SolverConfig()

    overrides = {}
    if args.budget is not None:
        overrides["complexity_budget"] = args.budget
    if args.strategy is not None:
        overrides["strategy"] = args.strategy
    if overrides:
        config = SolverConfig(**{**config.model_dump(), **overrides})

    return config


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the words on a word-search board and pick which ones to enter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example solver.yaml:
  board_size: 4
  complexity_budget: 1000
  base_complexity: 50
  diag_complexity: 10
  ambiguity_complexity: 10
  reward_table: reference   # or "legacy", or a {length: points} mapping
  strategy: greedy          # greedy | dfs | length | goal
        """
    )
    parser.add_argument(
        "board",
        nargs="?",
        help="Board letters in row-major order, e.g. oatrihpshtnrenei (prompted for if omitted)"
    )
    parser.add_argument(
        "--dictionary", "-d",
        required=True,
        help="Path to a word list with one word per line"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML solver configuration"
    )
    parser.add_argument(
        "--budget", "-b",
        type=int,
        help="Complexity budget (overrides the config)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=["greedy", "dfs", "length", "goal"],
        help="Word selection strategy (overrides the config)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Also write the chosen words to this file (uncolored)"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print words without color codes"
    )
    parser.add_argument(
        "--show-unchosen",
        action="store_true",
        help="List the words that were not chosen, longest first"
    )
    parser.add_argument(
        "--reached",
        help="Score a finished game: the last word you entered"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        lexicon = load_lexicon(args.dictionary, config)
    except Exception as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        return 1

    letters = args.board
    if not letters:
        letters = input("Input Board:\n").strip()

    try:
        board = Board.from_string(letters, size=config.board_size)
    except ValueError as e:
        print(f"Error reading board: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(board.render())
        print()

    result = solve(board, lexicon, config)

    print(render_word_list(result.chosen, color=not args.no_color))
    print()

    if args.show_unchosen:
        print("=== Other Words ===")
        for candidate in result.unchosen:
            print(candidate.word)
        print()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(render_word_list(result.chosen, color=False) + "\n")
        if args.verbose:
            print(f"Words saved to: {output_path}")

    # Print summary
    print("=== Summary ===")
    print(f"total reward: {result.all_stats.total_reward}")
    print(f"total words: {result.all_stats.num_words}")
    print(f"chosen reward: {result.chosen_stats.total_reward}")
    print(f"chosen words: {result.chosen_stats.num_words}")

    if args.reached:
        report = score_progress(result.chosen, args.reached)
        print()
        print(f"score: {report.reward} similarity: {report.similarity} words: {report.num_words}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
