import argparse
import logging
import random
import sys
import time
from typing import List, Optional

from dotenv import load_dotenv

from config.config import Config
from countdown.dedup import deduplicate
from countdown.expression_parser import ExpressionParser
from countdown.puzzle import Puzzle, PuzzleGenerator
from countdown.solver import CountdownSolver
from utils.helpers import format_elapsed, format_nodes, format_solutions

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='countdown-solve',
        description="Find every way to reach the target in the Countdown numbers game.")
    parser.add_argument('numbers', nargs='*', type=int,
                        help="starting numbers (default: from settings)")
    parser.add_argument('-t', '--target', type=int, help="number to reach")
    parser.add_argument('--random', action='store_true', help="deal a random round")
    parser.add_argument('--seed', type=int, help="seed for --random")
    parser.add_argument('--verify', action='store_true',
                        help="re-evaluate every solution before printing it")
    parser.add_argument('--settings', help="path to the YAML settings file")
    args = parser.parse_args(argv)
    if args.random and args.numbers:
        parser.error("--random deals its own numbers; do not pass NUMBERS with it")
    return args


def resolve_puzzle(args: argparse.Namespace, config: Config) -> Puzzle:
    if args.random:
        generator = PuzzleGenerator(config.rules, random.Random(args.seed))
        puzzle = generator.generate()
        if args.target is not None:
            puzzle.target = args.target
    elif args.numbers:
        target = args.target if args.target is not None else config.default_puzzle().target
        puzzle = Puzzle(numbers=list(args.numbers), target=target)
    else:
        puzzle = config.default_puzzle()
        if args.target is not None:
            puzzle.target = args.target
    puzzle.validate()
    return puzzle


def main(argv: Optional[List[str]] = None) -> int:
    # Load environment variables
    load_dotenv()
    args = parse_args(argv)

    try:
        config = Config(args.settings)
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", e)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        puzzle = resolve_puzzle(args, config)
    except ValueError as e:
        logger.error("Invalid puzzle: %s", e)
        return 1

    leaves = puzzle.leaves()
    print(f"Target: {puzzle.target}")
    print("Numbers:")
    print(format_nodes(leaves))
    print()

    solver = CountdownSolver()
    start_solve = time.perf_counter()
    solutions = solver.solve(leaves, puzzle.target)
    end_solve = time.perf_counter()

    start_unique = time.perf_counter()
    unique = deduplicate(solutions)
    end_unique = time.perf_counter()
    logger.info("%d candidates, %d solutions, %d after dedup",
                solver.candidates, len(solutions), len(unique))

    if args.verify:
        checker = ExpressionParser()
        for node in unique:
            ok, _, error = checker.check_solution(node.render(), puzzle.numbers, puzzle.target)
            if not ok:
                logger.error("Solution %s failed verification: %s", node.render(), error)
                return 1

    print("Solutions:")
    for line in format_solutions(unique):
        print(line)
    print(f"There are {len(unique)} 'distinct' solutions")
    print()
    print(f"Time to solution: {format_elapsed(end_solve - start_solve)}")
    print(f"Time to clean up: {format_elapsed(end_unique - start_unique)}")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
