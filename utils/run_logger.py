"""Run logs: append solve results and cache pressure to a plain-text file."""
import datetime
import os


def _now():
    return datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def log_header(log_path, mode, seed, config):
    """Start a run section in the log."""
    directory = os.path.dirname(log_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(log_path, 'a') as f:
        f.write(f"\n{'='*60}\n")
        f.write(f"[{_now()}] RUN mode={mode} seed={seed}\n")
        f.write(f"{'='*60}\n")
        f.write(f"[Cache] Hot: {config.cache.hot_size:,} | Cold: {config.cache.cold_size:,}\n")


def log_solution(log_path, trial, label, depth, solution_text, elapsed, stack_stats=None):
    """Write one solved position, with per-device cache counters when given."""
    with open(log_path, 'a') as f:
        f.write(f"[{_now()}] Trial {trial} | {label} | d={depth} | {solution_text} | {elapsed*1000:.1f}ms\n")
        for stats in stack_stats or []:
            f.write(f"  [{stats['name']}] Entries: {stats['entries']:,} | Hits: {stats['hits']:,} "
                    f"| Misses: {stats['misses']:,} | Evictions: {stats['evictions']:,} | Hit: {stats['hit_rate']}\n")


def log_summary(log_path, lines):
    with open(log_path, 'a') as f:
        f.write(f"[{_now()}] SUMMARY\n")
        for line in lines:
            f.write(f"  {line}\n")
