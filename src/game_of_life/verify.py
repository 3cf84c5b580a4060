#!/usr/bin/env python3
"""
Stepping Correctness Verification

Evolves the same seeded random board with the pure-Python Board.step and the
numpy evolve, and checks that both produce identical fingerprints after every
generation. Edges are bounded in both implementations.

Usage:
    life-verify                          # 64×64, 100 generations, seed 42
    life-verify --verbose                # Show per-generation fingerprints
    life-verify --rows 32 --cols 48 --generations 20 --seed 7
"""

import argparse
import sys

from loguru import logger

from game_of_life import board_np
from game_of_life.board import Board

# Defaults
ROWS = 64
COLS = 64
GENERATIONS = 100
SEED = 42


def trunc(s: str, n: int = 16) -> str:
    return s[:n] + "..." + s[-n:] if len(s) > n * 2 + 3 else s


class VerificationRunner:
    def __init__(self, rows=ROWS, cols=COLS, generations=GENERATIONS, seed=SEED, verbose=False):
        self.rows = rows
        self.cols = cols
        self.generations = generations
        self.seed = seed
        self.verbose = verbose
        self.mismatch_at = None

    def run(self) -> bool:
        """Return True when both implementations agree on every generation."""
        print("Stepping Correctness Verification")
        print(f"Board size: {self.rows}×{self.cols}")
        print(f"Generations: {self.generations}")
        print(f"Seed: {self.seed}\n")

        board = Board.random(self.cols, self.rows, seed=self.seed)
        array = board_np.to_array(board)

        for generation in range(1, self.generations + 1):
            board = board.step()
            array = board_np.evolve(array)

            fp_py = board.fingerprint()
            fp_np = board_np.from_array(array).fingerprint()
            if self.verbose:
                print(f"  gen {generation:>4}  python={trunc(fp_py)}  numpy={trunc(fp_np)}")

            if fp_py != fp_np:
                self.mismatch_at = generation
                logger.error(f"Fingerprints diverged at generation {generation}")
                print(f"✗ MISMATCH at generation {generation}")
                return False

        print(f"✓ Pure Python and NumPy agree for {self.generations} generations")
        print(f"  Final fingerprint: {trunc(board.fingerprint())}")
        print(f"  Alive cells: {board.alive_count()}")
        return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Verify that pure Python and NumPy stepping agree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show per-generation fingerprints"
    )
    parser.add_argument("--rows", type=int, default=ROWS, help=f"Board rows (default: {ROWS})")
    parser.add_argument("--cols", type=int, default=COLS, help=f"Board columns (default: {COLS})")
    parser.add_argument(
        "--generations",
        type=int,
        default=GENERATIONS,
        help=f"Number of generations (default: {GENERATIONS})"
    )
    parser.add_argument("--seed", type=int, default=SEED, help=f"Random seed (default: {SEED})")

    args = parser.parse_args(argv)

    runner = VerificationRunner(
        rows=args.rows,
        cols=args.cols,
        generations=args.generations,
        seed=args.seed,
        verbose=args.verbose,
    )
    success = runner.run()

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
