"""
Exceptions raised by buildgrinder.

Not-found is never an exception: lookups return None (or an empty list).
Everything below is fatal for the operation that asked for resolution.
Plain programmer errors (wrong reference type, unknown validation kind)
are raised as TypeError / ValueError.
"""

__all__ = [
    "GrinderError",
    "AmbiguousResourceError",
    "ResourceLoaderClosedError",
    "ResolverConfigurationError",
    "UnresolvedReferenceError",
    "InvalidUserDataError",
]


class GrinderError(Exception):
    """Root exception for all buildgrinder errors."""


# ── Resource loaders ──────────────────────────────────────────────────────────

class AmbiguousResourceError(GrinderError, LookupError):
    """Raised when a single location is demanded but several sources match."""

    def __init__(self, name, locations):
        self.name = name
        self.locations = list(locations)
        super().__init__(
            f"Failure to get location of named resource; name is {name}, "
            f"locations are {self.locations}!"
        )


class ResourceLoaderClosedError(GrinderError):
    """Raised when a proxy loader is used after it was closed."""


# ── Resource factory ──────────────────────────────────────────────────────────

class ResolverConfigurationError(GrinderError):
    """Raised when a resource factory has no resolvers configured at all."""


class UnresolvedReferenceError(GrinderError):
    """Raised in strict mode when a relative reference cannot be resolved."""


class InvalidUserDataError(GrinderError):
    """Raised when a resolved path fails an explicit validation check."""
