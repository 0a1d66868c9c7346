import os
import urllib.parse
import urllib.request
from pathlib import Path

# Archive entries are addressed as <scheme>:<archive url>!/<entry name>.
JAR_SCHEME = "jar"
TAR_SCHEME = "tar"
ENTRY_SEPARATOR = "!/"


def file_to_url(file):
    """Return the file: URL of a local file; directories get a trailing slash."""
    path = Path(os.path.abspath(os.fspath(file)))
    url = path.as_uri()
    if path.is_dir() and not url.endswith("/"):
        url += "/"
    return url


def url_to_path(url):
    """Return the local filesystem path behind a file: URL."""
    parsed = urllib.parse.urlsplit(url)
    if parsed.scheme != "file":
        raise ValueError(f"Not a file URL: {url}")
    if parsed.netloc not in ("", "localhost"):
        raise ValueError(f"Remote file URLs are not supported: {url}")
    return urllib.request.url2pathname(parsed.path)


def archive_entry_url(scheme, archive_url, name):
    return f"{scheme}:{archive_url}{ENTRY_SEPARATOR}{urllib.parse.quote(name)}"


def is_absolute_url(text):
    parsed = urllib.parse.urlsplit(text)
    # single letters are Windows drive names, not schemes
    return len(parsed.scheme) > 1 and bool(parsed.netloc or parsed.path)
