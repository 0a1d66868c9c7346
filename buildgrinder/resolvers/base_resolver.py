# Base class for the strategies a ResourceFactory uses to resolve relative
# references. Concrete resolvers differ only in the base directory they try.

import os
from abc import ABC, abstractmethod
from pathlib import Path


class BaseResolver(ABC):
    @abstractmethod
    def resolve(self, factory, file):
        """Resolve the relative ``file`` (a str) or return None.

        ``factory`` is the calling ResourceFactory; it carries the project,
        the default resource directory and the log sink.
        """

    def resolve_path(self, factory, path):
        resolved = self.resolve(factory, os.fspath(path))
        if resolved is None:
            return None
        return Path(resolved)

    def _try_candidate(self, factory, description, file, base_dir):
        candidate = os.path.join(os.fspath(base_dir), file)
        factory.log(f"Trying to resolve file against {description}; file is {file}, candidate file is {candidate}!")
        if os.path.exists(candidate):
            return candidate
        return None

    def __repr__(self):
        return f"{type(self).__name__}()"
