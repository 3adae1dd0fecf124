"""
Ultimate Tic-Tac-Toe batch solver.

Plays random games and solves positions near their end with the exact
solver, reusing work through the tiered cache.

Modes:
    stats      play random games and report results and mean length
    show       print random games move by move
    solve      solve the position BACK plies before the end at DEPTH
    backwards  solve the last POSITIONS positions, depth growing with distance from the end
    full       solve every position of a game from the end backwards, depth FULL_DEPTH minus the ply
"""
import argparse
import sys
import time

import numpy as np
from tqdm import tqdm

from config import CacheConfig, Config, DriverConfig, SolveConfig
from game import make_rng, random_game, random_games
from solver import SolverInvariantError, make_stack
from utils import (
    log_header, log_solution, log_summary,
    result_str, show_board, show_solution,
)


def heading(level, text):
    bar = '=' if level == 0 else '-'
    tqdm.write(f"\n{'  ' * level}{bar * 3} {text} {bar * 3}")


class BatchRunner:
    def __init__(self, config: Config):
        self.config = config
        self.rng = make_rng(config.driver.seed)
        self.stack = make_stack(config.cache)
        self.verbose = config.driver.verbose
        self.log_file = config.driver.log_file

    def _say(self, text):
        if self.verbose:
            tqdm.write(text)

    def _solve(self, trial, label, board, depth):
        start = time.time()
        solution = self.stack.get_or_compute(board, depth)
        elapsed = time.time() - start
        self._say(f"{label} sol d={depth}: {show_solution(solution)}  [{elapsed*1000:.1f}ms]")
        if self.log_file:
            log_solution(self.log_file, trial, label, depth, show_solution(solution),
                         elapsed, self.stack.get_stats())
        return solution

    def run_stats(self):
        trials = self.config.driver.trials
        heading(0, "random games")
        lengths = np.zeros(trials, dtype=np.int64)
        winners = np.zeros(trials, dtype=np.int64)
        for i, games in enumerate(tqdm(random_games(self.rng, trials), total=trials,
                                       desc="Games", ncols=80, leave=False)):
            final = games[-1]
            lengths[i] = len(games) - 1
            winners[i] = final.winner
            self._say(f"Game #{i:4}: {result_str(final.winner)} in {lengths[i]}")

        counts = np.bincount(winners, minlength=4)
        summary = [
            f"X wins: {counts[1]:4}",
            f"O wins: {counts[2]:4}",
            f"  ties: {counts[3]:4}",
            f"average game length: {lengths.mean() if trials else 0.0:.2f}",
        ]
        tqdm.write('')
        for line in summary:
            tqdm.write(line)
        if self.log_file:
            log_summary(self.log_file, summary)
        return counts

    def run_show(self):
        heading(0, "random game")
        for i in range(self.config.driver.trials):
            heading(1, f"Game #{i}")
            for ply, board in enumerate(random_game(self.rng)):
                tqdm.write(f"ply {ply}:")
                tqdm.write(show_board(board))
                tqdm.write('')

    def run_solve(self):
        back, depth = self.config.solve.back, self.config.solve.depth
        heading(0, f"Solve N-{back}")
        solutions = []
        for trial in tqdm(range(self.config.driver.trials), desc="Trials", ncols=80, leave=False):
            heading(1, f"Trial #{trial}")
            games = random_game(self.rng)
            if len(games) <= back:
                self._say(f"game has only {len(games) - 1} moves, skipping")
                continue
            self._say(show_board(games[-1]))
            label = f"Game N-{back}"
            board = games[-1 - back]
            self._say(show_board(board))
            solutions.append(self._solve(trial, label, board, depth))
        return solutions

    def run_backwards(self):
        base_depth = self.config.solve.backwards_depth
        positions = self.config.solve.backwards_positions
        heading(0, "Solving Back to Front")
        solutions = []
        for trial in tqdm(range(1, self.config.driver.trials + 1), desc="Trials", ncols=80, leave=False):
            heading(1, f"Trial #{trial}")
            games = random_game(self.rng)
            self._say(show_board(games[-1]))
            for i in range(1, min(positions, len(games) - 1) + 1):
                board = games[-1 - i]
                self._say(show_board(board))
                solutions.append(self._solve(trial, f"N-{i}", board, base_depth + i))
        return solutions

    def run_full(self):
        """
        Solve a game from its end back towards the start.

        The position after k plies is searched at full_depth - k, so its
        children are looked up under exactly the keys written by the
        previous iteration.
        """
        full_depth = self.config.solve.full_depth
        positions = self.config.solve.full_positions
        heading(0, "Fully Solving Back to Front")
        solutions = []
        for trial in range(1, self.config.driver.trials + 1):
            heading(1, f"Trial #{trial}")
            games = random_game(self.rng)
            last = len(games) - 1
            if positions is not None:
                last = min(positions, last)
            for i in tqdm(range(last + 1), desc="Positions", ncols=80, leave=False):
                ply = len(games) - 1 - i
                board = games[ply]
                self._say(show_board(board))
                solutions.append(self._solve(trial, f"Game N-{i}", board, max(full_depth - ply, 0)))
                self._say(f"memory cache size : {self.stack.cache_len(0)}")
        return solutions

    def report_cache(self):
        for stats in self.stack.get_stats():
            tqdm.write(f"[{stats['name']}] entries={stats['entries']:,}/{stats['capacity']:,} "
                       f"hits={stats['hits']:,} misses={stats['misses']:,} "
                       f"evictions={stats['evictions']:,} hit_rate={stats['hit_rate']}")


MODES = {
    'stats': BatchRunner.run_stats,
    'show': BatchRunner.run_show,
    'solve': BatchRunner.run_solve,
    'backwards': BatchRunner.run_backwards,
    'full': BatchRunner.run_full,
}


def build_config(args) -> Config:
    return Config(
        cache=CacheConfig(hot_size=args.hot_size, cold_size=args.cold_size),
        solve=SolveConfig(
            back=args.back,
            depth=args.depth,
            backwards_depth=args.backwards_depth,
            backwards_positions=args.positions,
            full_depth=args.full_depth,
            full_positions=args.full_positions,
        ),
        driver=DriverConfig(
            trials=args.trials,
            seed=args.seed,
            verbose=not args.quiet,
            log_file=args.log_file,
        ),
    )


def parse_args(argv=None):
    defaults = Config()
    parser = argparse.ArgumentParser(description='Solve random Ultimate Tic-Tac-Toe games')
    parser.add_argument('mode', choices=sorted(MODES), help='What to run')
    parser.add_argument('--trials', type=int, default=defaults.driver.trials, help='Number of random games')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed (random if omitted)')
    parser.add_argument('--back', type=int, default=defaults.solve.back, help='Plies before the end to solve (solve mode)')
    parser.add_argument('--depth', type=int, default=defaults.solve.depth, help='Search depth (solve mode)')
    parser.add_argument('--backwards-depth', type=int, default=defaults.solve.backwards_depth,
                        help='Base search depth (backwards mode)')
    parser.add_argument('--positions', type=int, default=defaults.solve.backwards_positions,
                        help='Positions to solve from the end (backwards mode)')
    parser.add_argument('--full-depth', type=int, default=defaults.solve.full_depth,
                        help='Search depth at the first ply, one less per ply played (full mode)')
    parser.add_argument('--full-positions', type=int, default=defaults.solve.full_positions,
                        help='Positions to solve from the end (full mode, all if omitted)')
    parser.add_argument('--hot-size', type=int, default=defaults.cache.hot_size, help='Memory tier capacity')
    parser.add_argument('--cold-size', type=int, default=defaults.cache.cold_size, help='Compressed tier capacity')
    parser.add_argument('--log-file', type=str, default=None, help='Append results to this file')
    parser.add_argument('--quiet', action='store_true', help='Only print summaries')
    args = parser.parse_args(argv)
    if (args.trials < 0 or args.back < 0 or args.depth < 0 or args.positions < 0
            or args.full_depth < 0 or (args.full_positions is not None and args.full_positions < 0)):
        parser.error('counts and depths must be non-negative')
    return args


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)
    runner = BatchRunner(config)

    print(f"\n{'=' * 60}")
    print(f"Ultimate Tic-Tac-Toe Solver")
    print(f"  Mode: {args.mode}")
    print(f"  Seed: {runner.rng.seed_value}")
    print(f"  Cache: {config.cache.hot_size:,} hot / {config.cache.cold_size:,} cold")
    print(f"{'=' * 60}")

    if config.driver.log_file:
        log_header(config.driver.log_file, args.mode, runner.rng.seed_value, config)

    try:
        MODES[args.mode](runner)
    except SolverInvariantError as e:
        print(f"✗ Solver invariant violated: {e}", file=sys.stderr)
        return 1

    if args.mode not in ('stats', 'show'):
        runner.report_cache()
    return 0


if __name__ == '__main__':
    sys.exit(main())
