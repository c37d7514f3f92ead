# finder/hooks.py
from typing import Protocol


class FinderHooks(Protocol):
    def query_start(self, *, mode, pattern, position, find_more): ...
    def radius_pass(self, *, mode, radius, inner_radius, found, total): ...
    def query_end(self, *, mode, pattern, results, radius, ms): ...


class NoopHooks:
    def query_start(self, **_):
        pass

    def radius_pass(self, **_):
        pass

    def query_end(self, **_):
        pass
