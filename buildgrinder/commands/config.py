import click
import os
import sys
import json
from .. import config as config_module
from ..cli_logger import logger

NOT_FOUND = "Error: No buildgrinder.toml found in the project directory."

@click.group()
@click.pass_context
def config(ctx):
    """Inspect the buildgrinder.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the buildgrinder.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NOT_FOUND)
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading buildgrinder.toml at {config_file_path}: {e}")
        logger.lifecycle("Please check file permissions.")
    except Exception as e:
        logger.error(f"An unexpected error occurred while viewing buildgrinder.toml: {e}")
        logger.exception(*sys.exc_info())

@config.command(name="list")
@click.pass_context
def list_config(ctx):
    """List all configuration keys and values."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NOT_FOUND)
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value, e.g. 'project.name' or 'properties.generate:schema'."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NOT_FOUND)
        return

    section, _, rest = key.partition('.')
    value = conf
    try:
        value = value[section]
        if rest:
            # property keys may contain dots themselves
            value = value[rest] if rest in value else _lookup(value, rest.split('.'))
        click.echo(value)
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in buildgrinder.toml")

def _lookup(value, keys):
    for k in keys:
        value = value[k]
    return value
