# runtime/rng.py
from __future__ import annotations

from zlib import crc32

import numpy as np


def _tag(s: str) -> int:
    return crc32(s.encode("utf-8")) & 0xFFFFFFFF


class RNGRegistry:
    """
    Named, reproducible numpy.random.Generator streams.
    A stream depends only on (master_seed, scenario, name), never on the
    order in which streams are requested.
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = int(master_seed) & 0xFFFFFFFF
        self.scenario_tag = _tag(str(scenario))
        self._streams: dict[str, np.random.Generator] = {}

    def stream(self, name: str) -> np.random.Generator:
        gen = self._streams.get(name)
        if gen is None:
            ss = np.random.SeedSequence([self.master_seed, self.scenario_tag, _tag(name)])
            gen = self._streams[name] = np.random.Generator(np.random.PCG64(ss))
        return gen
