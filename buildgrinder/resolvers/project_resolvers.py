import os

from .base_resolver import BaseResolver


class DefaultResourceDirectoryResolver(BaseResolver):
    """Resolves against the default resource directory of the calling factory.

    Matches nothing when the factory has no default resource directory.
    """

    def resolve(self, factory, file):
        resource_dir = factory.default_resource_dir
        if resource_dir is None:
            return None
        return self._try_candidate(factory, f"default resource directory {resource_dir}", file, resource_dir)


class SourceSetResolver(BaseResolver):
    """Resolves against the resource directories of a source-set, in order."""

    def __init__(self, source_set):
        self.source_set = source_set

    def resolve(self, factory, file):
        for resource_dir in self.source_set.resource_dirs:
            resolved = self._try_candidate(
                factory, f"source-set {self.source_set.name} ({resource_dir})", file, resource_dir
            )
            if resolved is not None:
                return resolved
        return None

    def __repr__(self):
        return f"SourceSetResolver({self.source_set.name!r})"


class ResourceDirectoryResolver(BaseResolver):
    """Resolves against one fixed directory."""

    def __init__(self, resource_directory):
        self.resource_directory = os.fspath(resource_directory)

    def resolve(self, factory, file):
        return self._try_candidate(
            factory, f"resource directory {self.resource_directory}", file, self.resource_directory
        )

    def __repr__(self):
        return f"ResourceDirectoryResolver({self.resource_directory!r})"


class DivergentResourceResolver(BaseResolver):
    """Resolves against a subdirectory of a source-set's source root.

    For source-set ``main`` and subdirectory ``schema`` this is
    ``<project dir>/src/main/schema``.
    """

    def __init__(self, source_set, sub_directory):
        self.source_set = source_set
        self.sub_directory = os.fspath(sub_directory)

    def divergent_resource_directory(self, factory):
        return os.path.join(factory.project.project_dir, "src", self.source_set.name, self.sub_directory)

    def resolve(self, factory, file):
        directory = self.divergent_resource_directory(factory)
        return self._try_candidate(factory, f"divergent resource directory {directory}", file, directory)

    def __repr__(self):
        return f"DivergentResourceResolver({self.source_set.name!r}, {self.sub_directory!r})"


class ProjectResolver(BaseResolver):
    """Resolves against the project directory."""

    def __init__(self, project):
        self.project = project

    def resolve(self, factory, file):
        return self._try_candidate(factory, f"project {self.project.name}", file, self.project.project_dir)

    def __repr__(self):
        return f"ProjectResolver({self.project.name!r})"
