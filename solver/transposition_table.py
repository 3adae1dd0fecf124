"""
Tiered transposition table for solver results.

A Stack holds an ordered list of cache devices, fastest first. Entries are
keyed by (position key, depth): a solution found with a shallow search is
never handed out for a deeper request. Each device keeps its own copy of an
entry and evicts on its own; an evicted entry is gone from that device and
is recomputed on the next full miss.
"""
import struct
from collections import OrderedDict
from typing import List, Optional, Sequence

from config import CacheConfig
from game import Board
from .exact import ExactSolver
from .outcome import Solution, Tie, Unknown, Win

_TAG_WIN = 0
_TAG_TIE = 1
_TAG_UNKNOWN = 2
_NO_MOVE = 255

# tag, winning player (0 if none), turns/depth, move (row*9+col)
_ENTRY = struct.Struct(">BBIB")


def compress_solution(solution: Solution) -> bytes:
    outcome = solution.outcome
    if isinstance(outcome, Win):
        tag, player, count = _TAG_WIN, outcome.player, outcome.turns
    elif isinstance(outcome, Tie):
        tag, player, count = _TAG_TIE, 0, outcome.turns
    else:
        tag, player, count = _TAG_UNKNOWN, 0, outcome.depth

    if solution.move is None:
        move_byte = _NO_MOVE
    else:
        row, col = solution.move
        move_byte = row * 9 + col

    return _ENTRY.pack(tag, player, count, move_byte)


def decompress_solution(compressed: bytes) -> Solution:
    tag, player, count, move_byte = _ENTRY.unpack(compressed)

    if tag == _TAG_WIN:
        outcome = Win(player, count)
    elif tag == _TAG_TIE:
        outcome = Tie(count)
    elif tag == _TAG_UNKNOWN:
        outcome = Unknown(count)
    else:
        raise ValueError(f"Corrupt cache entry tag: {tag}")

    move = None if move_byte == _NO_MOVE else (move_byte // 9, move_byte % 9)
    return Solution(move, outcome)


class CacheDevice:
    """Base class for one cache tier: a bounded key -> Solution map with counters."""

    name = "device"

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.stats = self._empty_stats()

    @staticmethod
    def _empty_stats():
        return {"hits": 0, "misses": 0, "evictions": 0, "writes": 0}

    def get(self, key) -> Optional[Solution]:
        raise NotImplementedError

    def put(self, key, solution: Solution):
        raise NotImplementedError

    def __len__(self):
        raise NotImplementedError

    def __contains__(self, key):
        raise NotImplementedError

    def _clear_entries(self):
        raise NotImplementedError

    def clear(self):
        self._clear_entries()
        self.stats = self._empty_stats()

    def get_stats(self):
        total = self.stats["hits"] + self.stats["misses"]
        hit_rate = self.stats["hits"] / total if total > 0 else 0
        return {
            "name": self.name,
            **self.stats,
            "entries": len(self),
            "capacity": self.capacity,
            "hit_rate": f"{hit_rate:.2%}",
        }


class MemoryDevice(CacheDevice):
    """Hot tier: uncompressed entries with least-recently-used eviction."""

    name = "memory"

    def __init__(self, capacity: int = 50000):
        super().__init__(capacity)
        self.entries = OrderedDict()

    def get(self, key):
        if key in self.entries:
            self.stats["hits"] += 1
            self.entries.move_to_end(key)
            return self.entries[key]
        self.stats["misses"] += 1
        return None

    def put(self, key, solution):
        if self.capacity == 0:
            return
        if key in self.entries:
            self.entries.move_to_end(key)
            return
        if len(self.entries) >= self.capacity:
            self.entries.popitem(last=False)
            self.stats["evictions"] += 1
        self.entries[key] = solution
        self.stats["writes"] += 1

    def __len__(self):
        return len(self.entries)

    def __contains__(self, key):
        return key in self.entries

    def _clear_entries(self):
        self.entries.clear()


class CompressedDevice(CacheDevice):
    """Cold tier: entries packed to a few bytes each, oldest write evicted first."""

    name = "compressed"

    def __init__(self, capacity: int = 500000):
        super().__init__(capacity)
        self.entries = {}

    def get(self, key):
        compressed = self.entries.get(key)
        if compressed is None:
            self.stats["misses"] += 1
            return None
        self.stats["hits"] += 1
        return decompress_solution(compressed)

    def put(self, key, solution):
        if self.capacity == 0 or key in self.entries:
            return
        if len(self.entries) >= self.capacity:
            # dicts keep insertion order, so the first key is the oldest write
            del self.entries[next(iter(self.entries))]
            self.stats["evictions"] += 1
        self.entries[key] = compress_solution(solution)
        self.stats["writes"] += 1

    def __len__(self):
        return len(self.entries)

    def __contains__(self, key):
        return key in self.entries

    def _clear_entries(self):
        self.entries.clear()


class Stack:
    """
    Ordered cache devices in front of an exact solver.

    get_or_compute() is the only way in: devices are checked fastest first,
    a hit is copied into the faster devices that missed, and a full miss is
    solved and written to every device.
    """

    def __init__(self, devices: Sequence[CacheDevice], solver=None):
        self.devices: List[CacheDevice] = list(devices)
        self.solver = solver or ExactSolver()

    @staticmethod
    def cache_key(board: Board, depth: int):
        return (board.key(), depth)

    def get_or_compute(self, board: Board, depth: int) -> Solution:
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")

        key = self.cache_key(board, depth)
        for i, device in enumerate(self.devices):
            solution = device.get(key)
            if solution is not None:
                for faster in self.devices[:i]:
                    faster.put(key, solution)
                return solution

        solution = self.solver.solve(board, depth, stack=self)
        for device in self.devices:
            device.put(key, solution)
        return solution

    def cache_len(self, index: int = 0) -> int:
        return len(self.devices[index])

    def get_stats(self):
        return [device.get_stats() for device in self.devices]

    def clear(self):
        for device in self.devices:
            device.clear()


def make_stack(cache_config=None, solver=None) -> Stack:
    """Default two-tier stack: small memory tier over a larger compressed tier."""
    cache_config = cache_config or CacheConfig()
    return Stack(
        [MemoryDevice(cache_config.hot_size), CompressedDevice(cache_config.cold_size)],
        solver=solver,
    )
