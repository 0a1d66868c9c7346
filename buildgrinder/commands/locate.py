import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..loaders import ChainedResourceLoader, ConfigurationResourceLoader, FileCollectionResourceLoader
from ..project import load_project

@click.command()
@click.argument("name")
@click.option("--configuration", "-c", "configurations", multiple=True, help="Search the files of this configuration.")
@click.option("--source-set", "-s", "source_sets", multiple=True, help="Search the resource directories of this source-set.")
@click.option("--single", is_flag=True, help="Fail if the resource is found in more than one place.")
@click.pass_context
@handle_exceptions
def locate(ctx, name, configurations, source_sets, single):
    """Show every place the resource NAME can be loaded from."""
    project = load_project(ctx.obj["path"])
    if not configurations and not source_sets:
        source_sets = project.source_sets.names()
        configurations = sorted(project.configurations)
    if not configurations and not source_sets:
        logger.warning("No source-sets or configurations defined. Nothing to search.")
        return

    loaders = [FileCollectionResourceLoader.for_source_set(project, s) for s in source_sets]
    loaders += [ConfigurationResourceLoader(project.get_configuration(c)) for c in configurations]

    with ChainedResourceLoader(loaders) as loader:
        if single:
            location = loader.get_resource_location(name)
            locations = [location] if location is not None else []
        else:
            locations = loader.get_resource_locations(name)

        if not locations:
            click.echo(f"Resource '{name}' not found.")
            return
        for index, location in enumerate(locations, start=1):
            click.echo(f"{index}) {location.url}  [{location.offset}]")
        if len(locations) > 1:
            logger.warning(f"Resource '{name}' is ambiguous; found in {len(locations)} places.")
