from ..cli_logger import logger
from .proxy_loader import ProxyResourceLoader
from .resource_loaders import create_resource_loader_for_configuration
from .resource_offset import ResourceOffset


class ConfigurationResourceLoader(ProxyResourceLoader):
    """Loads resources from the files a configuration resolves to.

    The configuration is resolved once, here; later changes to it are
    not seen by this loader.
    """

    def __init__(self, configuration):
        self.configuration = configuration
        self.offset = ResourceOffset(configuration=configuration)
        delegate = create_resource_loader_for_configuration(self.offset, configuration)
        logger.debug(f"Resource loader for configuration '{configuration.name}' covers {len(delegate.loaders)} files")
        super().__init__(delegate)
