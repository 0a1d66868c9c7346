import click
from .cli_logger import logger, LogLevel
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.option("--log-level", default=None, type=click.Choice([l.name for l in LogLevel], case_sensitive=False),
              help="Console log threshold.")
@click.pass_context
def cli(ctx, path, log_level):
    """buildgrinder: resolve build resources and files."""
    if log_level:
        previous = logger.threshold
        logger.threshold = LogLevel.parse(log_level)
        # only for this invocation
        ctx.call_on_close(lambda: setattr(logger, "threshold", previous))
    ctx.obj = {"path": path}

cli.add_command(properties)
cli.add_command(resolve)
cli.add_command(locate)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
