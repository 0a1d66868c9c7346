import click
from ..decorators import handle_exceptions
from ..project import load_project
from ..properties import get_project_properties, get_task_properties, verify_task_property_keys
from ..utils.properties_formatter import PropertiesFormatter

@click.command()
@click.option("--task", "-t", default=None, help="Only show the ad hoc properties of this task.")
@click.option("--valid-key", "valid_keys", multiple=True, help="Task property key to accept; others are reported as invalid.")
@click.option("--no-index", is_flag=True, help="Do not number the lines.")
@click.pass_context
@handle_exceptions
def properties(ctx, task, valid_keys, no_index):
    """List the project's ad hoc properties, or those of one task."""
    project = load_project(ctx.obj["path"])
    if task:
        props = get_task_properties(task, project)
        if valid_keys:
            verify_task_property_keys(task, props, valid_keys)
    else:
        props = get_project_properties(project)

    if not props:
        click.echo("No properties defined.")
        return
    click.echo(PropertiesFormatter(show_index=not no_index).format(props))
