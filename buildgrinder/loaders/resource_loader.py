import posixpath
from abc import ABC, abstractmethod


def normalize_resource_name(name):
    """Return the loader-relative form of ``name``, or None if it can never match.

    Names are forward-slash separated. A leading slash is ignored; names
    that climb out of the loading unit match nothing.
    """
    if not isinstance(name, str):
        raise TypeError(f"Resource name must be a string, not {type(name).__name__}")
    stripped = name.lstrip("/")
    if not stripped:
        return None
    normalized = posixpath.normpath(stripped)
    if normalized in (".", "..") or normalized.startswith("../"):
        return None
    if name.endswith("/"):
        normalized += "/"
    return normalized


class ResourceLoader(ABC):
    """Locates named resources in one or more underlying sources."""

    @abstractmethod
    def get_resource(self, name):
        """Return the URL of the named resource, or None."""

    @abstractmethod
    def get_resource_as_stream(self, name):
        """Return an open binary stream to the named resource, or None.

        The caller owns the stream and must close it.
        """

    @abstractmethod
    def get_resource_locations(self, name):
        """Return the locations of every occurrence of the named resource."""

    @abstractmethod
    def get_resource_location(self, name):
        """Return the single location of the named resource, or None.

        Raises AmbiguousResourceError when more than one source matches.
        """

    @abstractmethod
    def close(self):
        """Release the underlying sources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
