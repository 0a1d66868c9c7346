import functools
import click
import sys
from .cli_logger import logger
from .errors import GrinderError

def handle_exceptions(func):
    """A decorator to handle common exceptions for CLI commands."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
        except click.ClickException:
            raise
        except GrinderError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
        except (TypeError, ValueError, KeyError) as e:
            logger.error(f"Invalid input: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
