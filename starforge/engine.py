"""The game engine: an entity registry with asset storage and frame timing."""

from __future__ import annotations

import time
from typing import Callable

from starforge.assets import AssetManager
from starforge.registry import Registry


class GameEngine(Registry, AssetManager):
    """Registry and asset manager in one object, tracking frame time.

    Systems receive the engine itself as their first argument. After every
    call to ``run_systems`` the ``delta_time`` attribute holds the seconds
    elapsed since the previous run (or since construction, for the first).
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        super().__init__()
        self._clock = clock
        self.delta_time: float = 0.0
        self._start: float = clock()

    def run_systems(self) -> None:
        """Run every system in order, then update ``delta_time``."""
        super().run_systems()
        now = self._clock()
        self.delta_time = now - self._start
        self._start = now