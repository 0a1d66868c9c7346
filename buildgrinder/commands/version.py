import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of buildgrinder."""
    try:
        ver = importlib.metadata.version("buildgrinder")
        click.echo(f"buildgrinder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of buildgrinder. Is it installed correctly?")
