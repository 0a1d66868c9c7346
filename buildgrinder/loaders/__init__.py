from .chained_loader import ChainedResourceLoader
from .configuration_loader import ConfigurationResourceLoader
from .file_collection_loader import FileCollectionResourceLoader
from .proxy_loader import ProxyResourceLoader
from .resource_loader import ResourceLoader
from .resource_loaders import (
    create_resource_loader_for_configuration,
    create_resource_loader_for_file,
    create_resource_loader_for_files,
    create_resource_loader_for_url,
)
from .resource_location import ResourceLocation
from .resource_offset import ResourceOffset
from .url_loader import URLResourceLoader

__all__ = [
    "ChainedResourceLoader",
    "ConfigurationResourceLoader",
    "FileCollectionResourceLoader",
    "ProxyResourceLoader",
    "ResourceLoader",
    "ResourceLocation",
    "ResourceOffset",
    "URLResourceLoader",
    "create_resource_loader_for_configuration",
    "create_resource_loader_for_file",
    "create_resource_loader_for_files",
    "create_resource_loader_for_url",
]
