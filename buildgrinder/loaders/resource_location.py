from dataclasses import dataclass
from typing import Any

from .resource_offset import ResourceOffset


@dataclass(frozen=True)
class ResourceLocation:
    """One successful name-to-URL match and the loader that produced it."""

    offset: ResourceOffset
    loader: Any
    name: str
    url: str

    def __post_init__(self):
        if self.loader is None:
            raise ValueError("Resource location requires a loader")
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Resource location requires a non-empty name")
        if not isinstance(self.url, str) or not self.url:
            raise ValueError("Resource location requires a URL")

    def __repr__(self):
        return f"ResourceLocation(name={self.name!r}, url={self.url!r}, offset={self.offset})"
