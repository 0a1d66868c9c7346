import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True, eq=False)
class ResourceOffset:
    """Where a resource came from.

    Fields are filled coarse to fine as a lookup descends: source-sets,
    source-set, file-collection, files, file, configuration, url. A record
    is never changed in place; ``derive`` returns an extended copy and
    refuses to clear or replace a field that is already set.
    """

    source_sets: Any = None
    source_set: Any = None
    file_collection: Any = None
    files: Optional[Tuple[str, ...]] = None
    file: Optional[str] = None
    configuration: Any = None
    url: Optional[str] = None

    def __post_init__(self):
        if self.files is not None and not isinstance(self.files, tuple):
            object.__setattr__(self, "files", tuple(self.files))

    def derive(self, **changes):
        for field, value in changes.items():
            current = getattr(self, field, None)
            if current is None:
                continue
            if value is None:
                raise ValueError(f"Resource offset field '{field}' is already set and cannot be cleared")
            if field == "files":
                value = tuple(value)
            if value != current:
                raise ValueError(
                    f"Resource offset field '{field}' is already set to {current!r} and cannot be changed to {value!r}"
                )
        return dataclasses.replace(self, **changes)

    def __str__(self):
        parts = []
        if self.source_set is not None:
            parts.append(f"source-set={getattr(self.source_set, 'name', self.source_set)}")
        if self.configuration is not None:
            parts.append(f"configuration={getattr(self.configuration, 'name', self.configuration)}")
        if self.file is not None:
            parts.append(f"file={self.file}")
        if self.url is not None:
            parts.append(f"url={self.url}")
        return "ResourceOffset(" + ", ".join(parts) + ")"
