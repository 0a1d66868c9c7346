"""
Resolution of file, path, URI and URL references for build scripts.

A ResourceFactory walks an ordered list of resolvers; the first resolver
that finds an existing candidate wins. Absolute references are returned
as they are without consulting any resolver.
"""

import enum
import os
import urllib.parse
from pathlib import Path, PurePath

from .cli_logger import LogLevel, logger as default_logger
from .errors import InvalidUserDataError, ResolverConfigurationError, UnresolvedReferenceError
from .resolvers import DefaultResourceDirectoryResolver, ProjectResolver, SourceSetResolver
from .utils.urls import file_to_url, is_absolute_url

__all__ = ["PathValidation", "ResourceFactory"]

_UNSAFE_URI_CHARS = set(' \t\r\n<>"{}|\\^`')


class PathValidation(enum.Enum):
    """Checks applied to a resolved reference."""

    NONE = "none"  # must not exist
    EXISTS = "exists"
    FILE = "file"
    DIRECTORY = "directory"


# reference kinds
_NAME = "name"
_FILE = "file"
_PATH = "path"


def _reference_kind(reference, what):
    if reference is None:
        raise ValueError(f"Failure to resolve {what} reference; reference is not set!")
    if isinstance(reference, str):
        return _NAME
    if isinstance(reference, PurePath):
        return _PATH
    if isinstance(reference, (bytes, os.PathLike)):
        return _FILE
    raise TypeError(
        f"Failure to resolve {what} reference; cannot recognize reference type {type(reference).__name__}!"
    )


class ResourceFactory:
    """Resolves references to absolute files and paths.

    Configuration is fixed at construction; use ``replace`` to derive a
    differently configured factory.
    """

    def __init__(self, project=None, resolvers=None, fail_on_unresolved=True, logger=None,
                 level=LogLevel.INFO, default_resource_dir=None):
        self.project = project
        self.resolvers = tuple(resolvers) if resolvers is not None else None
        self.fail_on_unresolved = fail_on_unresolved
        self._logger = logger
        self.level = LogLevel.parse(level)
        self.default_resource_dir = os.fspath(default_resource_dir) if default_resource_dir is not None else None

    @classmethod
    def of(cls, project, source_set=None, **kwargs):
        """Factory resolving against the default resource directory, the
        source-set (if given) and finally the project directory."""
        resolvers = [DefaultResourceDirectoryResolver()]
        if source_set is not None:
            resolvers.append(SourceSetResolver(source_set))
        resolvers.append(ProjectResolver(project))
        kwargs.setdefault("fail_on_unresolved", False)
        kwargs.setdefault("default_resource_dir", getattr(project, "default_resource_dir", None))
        return cls(project, resolvers=resolvers, **kwargs)

    def replace(self, **changes):
        settings = {
            "project": self.project,
            "resolvers": self.resolvers,
            "fail_on_unresolved": self.fail_on_unresolved,
            "logger": self._logger,
            "level": self.level,
            "default_resource_dir": self.default_resource_dir,
        }
        unknown = set(changes) - set(settings)
        if unknown:
            raise TypeError(f"Unknown resource factory settings: {sorted(unknown)}")
        settings.update(changes)
        return type(self)(**settings)

    @property
    def logger(self):
        if self._logger is not None:
            return self._logger
        project_logger = getattr(self.project, "logger", None)
        return project_logger if project_logger is not None else default_logger

    def log(self, message):
        log_sink = self.logger
        if log_sink.is_enabled(self.level):
            log_sink.log(self.level, message)

    # -------------------- Core resolution --------------------

    def _walk_resolvers(self, reference, resolve_one):
        if self.resolvers is None:
            raise ResolverConfigurationError(
                f"Failure to resolve file; no resolvers are present, file is {reference}!"
            )
        for resolver in self.resolvers:
            resolved = resolve_one(resolver)
            if resolved is not None:
                return resolved
        return None

    def _check_resolved(self, reference, resolved, is_absolute, exists):
        if not self.fail_on_unresolved:
            return
        if resolved is None:
            raise UnresolvedReferenceError(
                f"Failure to resolve file; resolvers not able to resolve file, file is {reference}!"
            )
        if not is_absolute(resolved):
            raise UnresolvedReferenceError(
                f"Failure to resolve file; resolved file is not absolute, file is {reference}, resolved file is {resolved}!"
            )
        if not exists(resolved):
            raise UnresolvedReferenceError(
                f"Failure to resolve file; resolved file does not exist, file is {reference}, resolved file is {resolved}!"
            )

    def resolve_file(self, file):
        """Resolve a file name (str) against the resolvers."""
        file = os.fsdecode(os.fspath(file))
        if os.path.isabs(file):
            return file
        resolved = self._walk_resolvers(file, lambda resolver: resolver.resolve(self, file))
        self._check_resolved(file, resolved, os.path.isabs, os.path.exists)
        return resolved

    def resolve_path(self, path):
        """Resolve a path (pathlib) against the resolvers."""
        path = Path(path)
        if path.is_absolute():
            return path
        resolved = self._walk_resolvers(path, lambda resolver: resolver.resolve_path(self, path))
        self._check_resolved(path, resolved, lambda p: p.is_absolute(), lambda p: p.exists())
        return resolved

    # -------------------- Typed entry points --------------------

    def file(self, reference, validation=None):
        kind = _reference_kind(reference, "file")
        if kind == _PATH:
            resolved = self.resolve_path(reference)
            resolved = os.fspath(resolved) if resolved is not None else None
        else:
            resolved = self.resolve_file(reference)
        self._validate("file", reference, resolved, validation)
        return resolved

    def path(self, reference, validation=None):
        kind = _reference_kind(reference, "path")
        if kind == _FILE:
            resolved = self.resolve_file(reference)
            resolved = Path(resolved) if resolved is not None else None
        else:
            resolved = self.resolve_path(reference)
        self._validate("path", reference, resolved, validation)
        return resolved

    def uri(self, reference):
        kind = _reference_kind(reference, "URI")
        if kind == _NAME:
            return _check_uri(reference)
        return file_to_url(self._require_resolved(reference, "URI"))

    def url(self, reference):
        kind = _reference_kind(reference, "URL")
        if kind == _NAME:
            _check_uri(reference)
            if not is_absolute_url(reference):
                raise ValueError(f"Failure to resolve URL reference; URL is not absolute, reference is {reference}!")
            return reference
        return file_to_url(self._require_resolved(reference, "URL"))

    def _require_resolved(self, reference, what):
        if isinstance(reference, PurePath):
            resolved = self.resolve_path(reference)
        else:
            resolved = self.resolve_file(reference)
        if resolved is None:
            raise UnresolvedReferenceError(
                f"Failure to resolve {what} reference; reference could not be resolved, reference is {reference}!"
            )
        return resolved

    def _validate(self, what, reference, resolved, validation):
        if validation is None:
            return
        if not isinstance(validation, PathValidation):
            raise ValueError(f"Failure to resolve {what} reference; cannot recognize validation value {validation!r}!")
        if resolved is None:
            raise InvalidUserDataError(
                f"Failure to resolve {what} reference; reference {reference} could not be resolved "
                f"for validation {validation.name}!"
            )
        path = os.fspath(resolved)
        if validation is PathValidation.NONE:
            if os.path.exists(path):
                raise InvalidUserDataError(
                    f"Failure to resolve {what} reference; path resolved as {path}, but path must not exist!"
                )
        elif validation is PathValidation.EXISTS:
            if not os.path.exists(path):
                raise InvalidUserDataError(
                    f"Failure to resolve {what} reference; path resolved as {path}, but path must exist!"
                )
        elif validation is PathValidation.FILE:
            if not os.path.isfile(path):
                raise InvalidUserDataError(
                    f"Failure to resolve {what} reference; path resolved as {path}, but path must be an existing file!"
                )
        elif validation is PathValidation.DIRECTORY:
            if not os.path.isdir(path):
                raise InvalidUserDataError(
                    f"Failure to resolve {what} reference; path resolved as {path}, but path must be an existing directory!"
                )

    def __repr__(self):
        return f"ResourceFactory(project={self.project!r}, resolvers={self.resolvers!r})"


def _check_uri(text):
    bad = sorted(set(text) & _UNSAFE_URI_CHARS)
    if bad:
        raise ValueError(f"Failure to resolve URI reference; illegal characters {bad} in {text!r}!")
    # raises ValueError on malformed network locations
    urllib.parse.urlsplit(text)
    return text
