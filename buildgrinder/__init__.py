from .errors import (
    AmbiguousResourceError,
    GrinderError,
    InvalidUserDataError,
    ResolverConfigurationError,
    ResourceLoaderClosedError,
    UnresolvedReferenceError,
)
from .project import Configuration, FileCollection, Project, SourceSet, SourceSetContainer, load_project
from .resource_factory import PathValidation, ResourceFactory
