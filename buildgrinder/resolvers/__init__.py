from .base_resolver import BaseResolver
from .project_resolvers import (
    DefaultResourceDirectoryResolver,
    DivergentResourceResolver,
    ProjectResolver,
    ResourceDirectoryResolver,
    SourceSetResolver,
)

__all__ = [
    "BaseResolver",
    "DefaultResourceDirectoryResolver",
    "DivergentResourceResolver",
    "ProjectResolver",
    "ResourceDirectoryResolver",
    "SourceSetResolver",
]
