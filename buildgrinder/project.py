"""
Project model consumed by resource factories and resource loaders.

A build script describes its project once (root directory, ad hoc
properties, source-sets and configurations), either in code or through
``buildgrinder.toml``, and hands the objects below to the resolvers and
loaders.
"""

import glob
import os
import types

from . import config as config_module
from .cli_logger import logger as default_logger

__all__ = [
    "Project",
    "SourceSet",
    "SourceSetContainer",
    "FileCollection",
    "Configuration",
    "load_project",
]

_GLOB_CHARS = ("*", "?", "[")


def _absolute(base_dir, file):
    file = os.fspath(file)
    if os.path.isabs(file) or base_dir is None:
        return os.path.abspath(file)
    return os.path.abspath(os.path.join(base_dir, file))


class SourceSet:
    """A named logical source area with its resource directories."""

    def __init__(self, name, resource_dirs=()):
        if not name:
            raise ValueError("Source-set name must not be empty")
        self.name = name
        self.resource_dirs = tuple(os.fspath(d) for d in resource_dirs)

    def __repr__(self):
        return f"SourceSet({self.name!r})"


class SourceSetContainer:
    """Ordered collection of source-sets, looked up by name."""

    def __init__(self, source_sets=()):
        self._source_sets = {}
        for source_set in source_sets:
            if source_set.name in self._source_sets:
                raise ValueError(f"Duplicate source-set name: {source_set.name}")
            self._source_sets[source_set.name] = source_set

    def get(self, name):
        return self._source_sets.get(name)

    def __getitem__(self, name):
        return self._source_sets[name]

    def __contains__(self, name):
        return name in self._source_sets

    def __iter__(self):
        return iter(self._source_sets.values())

    def __len__(self):
        return len(self._source_sets)

    def names(self):
        return list(self._source_sets)

    def __repr__(self):
        return f"SourceSetContainer({self.names()!r})"


class FileCollection:
    """An ordered, de-duplicated set of files."""

    def __init__(self, files=(), base_dir=None):
        self._files = tuple(files)
        self.base_dir = base_dir

    def get_files(self):
        seen = []
        for file in self._files:
            path = _absolute(self.base_dir, file)
            if path not in seen:
                seen.append(path)
        return tuple(seen)

    def __iter__(self):
        return iter(self.get_files())

    def __repr__(self):
        return f"FileCollection({list(self._files)!r})"


class Configuration:
    """A named set of dependency files, resolved on demand.

    Entries containing glob characters are expanded relative to
    ``base_dir``; matches of one pattern are sorted, patterns keep their
    declared order.
    """

    def __init__(self, name, files=(), base_dir=None):
        self.name = name
        self._files = tuple(files)
        self.base_dir = base_dir

    def resolve(self):
        resolved = []
        for entry in self._files:
            entry = os.fspath(entry)
            if any(c in entry for c in _GLOB_CHARS):
                pattern = _absolute(self.base_dir, entry)
                matches = sorted(glob.glob(pattern, recursive=True))
                if not matches:
                    default_logger.debug(f"Configuration '{self.name}': pattern {entry} matched nothing")
                candidates = matches
            else:
                candidates = [_absolute(self.base_dir, entry)]
            for candidate in candidates:
                if candidate not in resolved:
                    resolved.append(candidate)
        return tuple(resolved)

    def __repr__(self):
        return f"Configuration({self.name!r})"


class Project:
    """Root directory, ad hoc properties, source-sets and configurations."""

    def __init__(self, project_dir, properties=None, source_sets=None, configurations=None,
                 logger=None, name=None, default_resource_dir=None):
        self.project_dir = os.path.abspath(os.fspath(project_dir))
        self.name = name or os.path.basename(self.project_dir)
        self.properties = types.MappingProxyType(dict(properties or {}))
        if source_sets is None:
            source_sets = SourceSetContainer()
        elif not isinstance(source_sets, SourceSetContainer):
            source_sets = SourceSetContainer(source_sets)
        self.source_sets = source_sets
        self.configurations = dict(configurations or {})
        self.logger = logger or default_logger
        self.default_resource_dir = default_resource_dir

    def get_configuration(self, name):
        try:
            return self.configurations[name]
        except KeyError:
            raise KeyError(
                f"Unknown configuration '{name}'; known configurations are {sorted(self.configurations)}"
            ) from None

    def __repr__(self):
        return f"Project({self.name!r}, {self.project_dir!r})"


def load_project(path=".", logger=None):
    """Build a Project from the buildgrinder.toml found in ``path``.

    A missing configuration file yields a bare project rooted at ``path``.
    Source-sets without ``resource_dirs`` default to ``src/<name>/resources``.
    """
    project_dir = os.path.abspath(path)
    conf = config_module.load_config(path=project_dir)
    project_conf = conf.get("project", {})

    source_sets = []
    for name, entry in conf.get("source_sets", {}).items():
        dirs = entry.get("resource_dirs") or [os.path.join("src", name, "resources")]
        source_sets.append(SourceSet(name, [_absolute(project_dir, d) for d in dirs]))

    configurations = {}
    for name, entry in conf.get("configurations", {}).items():
        configurations[name] = Configuration(name, entry.get("files", []), base_dir=project_dir)

    default_resource_dir = project_conf.get("default_resource_dir")
    if default_resource_dir:
        default_resource_dir = _absolute(project_dir, default_resource_dir)

    return Project(
        project_dir,
        properties=conf.get("properties", {}),
        source_sets=SourceSetContainer(source_sets),
        configurations=configurations,
        logger=logger,
        name=project_conf.get("name"),
        default_resource_dir=default_resource_dir,
    )
