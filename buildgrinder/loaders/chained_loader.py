from ..errors import AmbiguousResourceError
from .resource_loader import ResourceLoader


class ChainedResourceLoader(ResourceLoader):
    """Chain-of-responsibility over an ordered list of loaders.

    ``get_resource`` and ``get_resource_as_stream`` return the first match;
    ``get_resource_locations`` collects the matches of every loader.
    """

    def __init__(self, loaders=()):
        self.loaders = tuple(loaders)

    @classmethod
    def of(cls, *loaders):
        return cls(loaders)

    def get_resource(self, name):
        for loader in self.loaders:
            url = loader.get_resource(name)
            if url is not None:
                return url
        return None

    def get_resource_as_stream(self, name):
        for loader in self.loaders:
            stream = loader.get_resource_as_stream(name)
            if stream is not None:
                return stream
        return None

    def get_resource_locations(self, name):
        locations = []
        for loader in self.loaders:
            found = loader.get_resource_locations(name)
            if found:
                locations.extend(found)
        return locations

    def get_resource_location(self, name):
        locations = self.get_resource_locations(name)
        if not locations:
            return None
        if len(locations) == 1:
            return locations[0]
        raise AmbiguousResourceError(name, locations)

    def close(self):
        # Every child gets closed; the first failure is raised afterwards.
        first_error = None
        for loader in self.loaders:
            try:
                loader.close()
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def __repr__(self):
        return f"ChainedResourceLoader({list(self.loaders)!r})"
