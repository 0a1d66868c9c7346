import os
import tarfile
import zipfile

from ..cli_logger import logger
from ..errors import ResourceLoaderClosedError
from ..utils.urls import JAR_SCHEME, TAR_SCHEME, archive_entry_url, file_to_url, url_to_path
from .resource_loader import ResourceLoader, normalize_resource_name
from .resource_location import ResourceLocation
from .resource_offset import ResourceOffset


# -------------------- Loading units --------------------

class _EmptyUnit:
    """Stands in for a URL that points at nothing loadable."""

    def find(self, name):
        return None

    def open(self, name):
        return None

    def close(self):
        pass


class _DirectoryUnit:
    def __init__(self, root):
        self.root = root

    def _path(self, name):
        return os.path.join(self.root, *name.rstrip("/").split("/"))

    def find(self, name):
        path = self._path(name)
        if name.endswith("/"):
            return file_to_url(path) if os.path.isdir(path) else None
        return file_to_url(path) if os.path.exists(path) else None

    def open(self, name):
        if name.endswith("/"):
            return None
        path = self._path(name)
        if os.path.isfile(path):
            return open(path, "rb")
        return None

    def close(self):
        pass


class _ZipUnit:
    def __init__(self, archive_path, archive_url):
        self.archive_url = archive_url
        self._zip = zipfile.ZipFile(archive_path, "r")
        self._names = set(self._zip.namelist())
        # directories are often implicit in zip archives
        for entry in list(self._names):
            parts = entry.rstrip("/").split("/")[:-1]
            for i in range(1, len(parts) + 1):
                self._names.add("/".join(parts[:i]) + "/")

    def _entry(self, name):
        if name in self._names:
            return name
        if not name.endswith("/") and name + "/" in self._names:
            return name + "/"
        return None

    def find(self, name):
        entry = self._entry(name)
        if entry is None:
            return None
        return archive_entry_url(JAR_SCHEME, self.archive_url, entry)

    def open(self, name):
        entry = self._entry(name)
        if entry is None or entry.endswith("/"):
            return None
        try:
            return self._zip.open(entry, "r")
        except KeyError:
            # implicit directory
            return None

    def close(self):
        self._zip.close()


def _implicit_directory(name):
    info = tarfile.TarInfo(name)
    info.type = tarfile.DIRTYPE
    return info


class _TarUnit:
    def __init__(self, archive_path, archive_url):
        self.archive_url = archive_url
        self._tar = tarfile.open(archive_path, "r:*")
        self._members = {}
        for member in self._tar.getmembers():
            member_name = member.name
            if member_name.startswith("./"):
                member_name = member_name[2:]
            self._members[member_name.rstrip("/")] = member
        # directories are often implicit in tar archives too
        for member_name in list(self._members):
            parts = member_name.split("/")[:-1]
            for i in range(1, len(parts) + 1):
                parent = "/".join(parts[:i])
                if parent not in self._members:
                    self._members[parent] = _implicit_directory(parent)

    def _member(self, name):
        member = self._members.get(name.rstrip("/"))
        if member is None:
            return None
        if name.endswith("/") and not member.isdir():
            return None
        return member

    def find(self, name):
        member = self._member(name)
        if member is None:
            return None
        entry = name.rstrip("/") + ("/" if member.isdir() else "")
        return archive_entry_url(TAR_SCHEME, self.archive_url, entry)

    def open(self, name):
        member = self._member(name)
        if member is None or not member.isfile():
            return None
        return self._tar.extractfile(member)

    def close(self):
        self._tar.close()


def _open_unit(url):
    path = url_to_path(url)
    if os.path.isdir(path):
        return _DirectoryUnit(path)
    if not os.path.isfile(path):
        logger.debug(f"Resource URL {url} does not exist; loader will match nothing")
        return _EmptyUnit()
    archive_url = file_to_url(path)
    if zipfile.is_zipfile(path):
        return _ZipUnit(path, archive_url)
    if tarfile.is_tarfile(path):
        return _TarUnit(path, archive_url)
    logger.warning(f"Unsupported resource container {path}. It will be ignored.")
    return _EmptyUnit()


# -------------------- Loader --------------------

class URLResourceLoader(ResourceLoader):
    """Loads resources from one file: URL (a directory, a zip/jar or a tar archive)."""

    def __init__(self, offset, url):
        self.offset = offset if offset is not None else ResourceOffset()
        self.url = url
        self._unit = _open_unit(url)

    def _loading_unit(self):
        if self._unit is None:
            raise ResourceLoaderClosedError(f"Resource loader for {self.url} is closed")
        return self._unit

    def get_resource(self, name):
        unit = self._loading_unit()
        normalized = normalize_resource_name(name)
        if normalized is None:
            return None
        return unit.find(normalized)

    def get_resource_as_stream(self, name):
        unit = self._loading_unit()
        normalized = normalize_resource_name(name)
        if normalized is None:
            return None
        return unit.open(normalized)

    def get_resource_locations(self, name):
        location = self.get_resource_location(name)
        if location is None:
            return None
        return [location]

    def get_resource_location(self, name):
        url = self.get_resource(name)
        if url is None:
            return None
        return ResourceLocation(self.offset, self, name, url)

    def close(self):
        if self._unit is not None:
            unit, self._unit = self._unit, None
            unit.close()

    def __repr__(self):
        return f"URLResourceLoader({self.url!r})"
