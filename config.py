from dataclasses import dataclass
from typing import Optional

@dataclass
class CacheConfig:
    hot_size: int = 50000       # memory tier (LRU)
    cold_size: int = 500000     # compressed tier (FIFO)

@dataclass
class SolveConfig:
    back: int = 4               # plies before the end for the 'solve' mode
    depth: int = 6              # search depth for the 'solve' mode
    backwards_depth: int = 81   # base depth for the 'backwards' mode
    backwards_positions: int = 10
    full_depth: int = 81        # depth at ply 0 for the 'full' mode, one less per ply played
    full_positions: Optional[int] = None  # positions from the end for the 'full' mode, None for all

@dataclass
class DriverConfig:
    trials: int = 1
    seed: Optional[int] = None
    verbose: bool = True
    log_file: Optional[str] = None

@dataclass
class Config:
    cache: CacheConfig = None
    solve: SolveConfig = None
    driver: DriverConfig = None

    def __post_init__(self):
        if self.cache is None:
            self.cache = CacheConfig()
        if self.solve is None:
            self.solve = SolveConfig()
        if self.driver is None:
            self.driver = DriverConfig()
