from .config import config
from .locate import locate
from .log import log
from .properties import properties
from .resolve import resolve
from .version import version

__all__ = ["config", "locate", "log", "properties", "resolve", "version"]
