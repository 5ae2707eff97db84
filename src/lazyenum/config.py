"""
Configuration management for lazyenum operations.
"""

import os
import random
import tempfile
from typing import ClassVar, Optional
from dataclasses import dataclass, field
from enum import Enum
import psutil


class RunSizeStrategy(Enum):
    """Strategy for sizing in-memory sort runs."""
    FIXED = "fixed"
    MEMORY_BASED = "memory_based"


@dataclass
class EnumConfig:
    """Global configuration for lazyenum operations."""

    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))

    # Storage for spilled sort runs
    external_storage_path: str = field(default_factory=lambda: os.path.join(tempfile.gettempdir(), "lazyenum"))

    # Sort runs
    run_size_strategy: RunSizeStrategy = RunSizeStrategy.FIXED
    fixed_run_size: int = 100_000
    min_run_size: int = 1_000
    max_run_size: int = 10_000_000
    bytes_per_item: int = 64  # rough per-element cost used by MEMORY_BASED

    # Windowing: warn when chunk_every may hold more elements than this
    window_warning_threshold: int = 100_000

    # Random selection; None seeds from the OS
    random_seed: Optional[int] = None

    _instance: ClassVar[Optional['EnumConfig']] = None

    @classmethod
    def get_instance(cls) -> 'EnumConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                if key == 'run_size_strategy' and isinstance(value, str):
                    value = RunSizeStrategy(value)
                setattr(instance, key, value)

    def calculate_run_size(self) -> int:
        """Number of elements sorted in memory before a run is spilled."""
        if self.run_size_strategy == RunSizeStrategy.MEMORY_BASED:
            available = min(psutil.virtual_memory().available, self.memory_limit)
            # Use 10% of available memory for one run
            run_size = int(available * 0.1 / max(1, self.bytes_per_item))
            return max(self.min_run_size, min(run_size, self.max_run_size))

        return self.fixed_run_size

    def make_random(self) -> random.Random:
        return random.Random(self.random_seed)


# Global configuration instance
config = EnumConfig.get_instance()
