"""Builders that expand files and configurations into resource loaders."""

from ..utils.urls import file_to_url
from .chained_loader import ChainedResourceLoader
from .resource_offset import ResourceOffset
from .url_loader import URLResourceLoader


def create_resource_loader_for_configuration(offset, configuration):
    """Resolve ``configuration`` once and chain a loader per resolved file."""
    files = configuration.resolve()
    return create_resource_loader_for_files(_offset(offset).derive(configuration=configuration), files)


def create_resource_loader_for_files(offset, files):
    files = tuple(files)
    new_offset = _offset(offset).derive(files=files)
    loaders = []
    try:
        for file in files:
            loaders.append(create_resource_loader_for_file(new_offset, file))
    except Exception:
        ChainedResourceLoader(loaders).close()
        raise
    return ChainedResourceLoader(loaders)


def create_resource_loader_for_file(offset, file):
    url = file_to_url(file)
    return create_resource_loader_for_url(_offset(offset).derive(file=file), url)


def create_resource_loader_for_url(offset, url):
    return URLResourceLoader(_offset(offset).derive(url=url), url)


def _offset(offset):
    return offset if offset is not None else ResourceOffset()
