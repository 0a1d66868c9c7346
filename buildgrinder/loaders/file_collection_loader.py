from ..cli_logger import logger
from ..project import FileCollection
from .proxy_loader import ProxyResourceLoader
from .resource_loaders import create_resource_loader_for_files
from .resource_offset import ResourceOffset


class FileCollectionResourceLoader(ProxyResourceLoader):
    """Loads resources from the files of a file-collection of a source-set."""

    def __init__(self, source_sets, source_set, file_collection):
        files = file_collection.get_files()
        self.source_sets = source_sets
        self.source_set = source_set
        self.file_collection = file_collection
        self.offset = ResourceOffset(
            source_sets=source_sets,
            source_set=source_set,
            file_collection=file_collection,
            files=files,
        )
        logger.debug(f"Resource loader for source-set '{source_set.name}' covers {len(files)} files")
        super().__init__(create_resource_loader_for_files(self.offset, files))

    @classmethod
    def for_source_set(cls, project, source_set_name):
        """Loader over the resource directories of a project's source-set."""
        source_set = project.source_sets[source_set_name]
        return cls(project.source_sets, source_set, FileCollection(source_set.resource_dirs, base_dir=project.project_dir))
