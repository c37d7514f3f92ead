"""Exception hierarchy for mapnav.

Missing links, missing coordinates and empty result lists are not errors;
they are reported as ``None`` or empty lists. Exceptions are reserved for
misconfiguration and misuse.
"""


class MapnavError(Exception):
    """Base exception for all mapnav errors."""


class ConfigurationError(MapnavError, ValueError):
    """Inconsistent or unknown configuration (radii, factory kinds, ...)."""


class EmptyMapError(MapnavError, LookupError):
    """A selection was requested from a map without any location."""

    def __init__(self, what: str = "location"):
        self.what = what
        super().__init__(f"cannot select a {what} from an empty map")


class FinderStateError(MapnavError, RuntimeError):
    """A finder operation was called in a state that does not allow it."""
