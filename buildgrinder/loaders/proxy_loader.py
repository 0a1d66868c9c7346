from ..errors import ResourceLoaderClosedError
from .resource_loader import ResourceLoader


class ProxyResourceLoader(ResourceLoader):
    """Forwards every call to a single delegate loader.

    The delegate slot is the one mutable piece of state; it is not guarded
    by a lock, so callers sharing a proxy across threads must not swap the
    delegate while other threads use it.
    """

    def __init__(self, delegate=None):
        self._delegate = delegate

    @property
    def delegate(self):
        return self._delegate

    @delegate.setter
    def delegate(self, loader):
        self._delegate = loader

    def _require_delegate(self):
        if self._delegate is None:
            raise ResourceLoaderClosedError(f"{type(self).__name__} has no resource loader to delegate to")
        return self._delegate

    def get_resource(self, name):
        return self._require_delegate().get_resource(name)

    def get_resource_as_stream(self, name):
        return self._require_delegate().get_resource_as_stream(name)

    def get_resource_locations(self, name):
        return self._require_delegate().get_resource_locations(name)

    def get_resource_location(self, name):
        return self._require_delegate().get_resource_location(name)

    def close(self):
        if self._delegate is not None:
            delegate, self._delegate = self._delegate, None
            delegate.close()
