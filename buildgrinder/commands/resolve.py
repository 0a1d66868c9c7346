import click
from pathlib import Path
from ..cli_logger import LogLevel
from ..decorators import handle_exceptions
from ..project import load_project
from ..resolvers import DivergentResourceResolver, ResourceDirectoryResolver
from ..resource_factory import PathValidation, ResourceFactory
from ..utils.urls import is_absolute_url

VALIDATIONS = {v.value: v for v in PathValidation}

@click.command()
@click.argument("reference")
@click.option("--source-set", "-s", default=None, help="Also try the resource directories of this source-set.")
@click.option("--resource-dir", "resource_dirs", multiple=True, type=click.Path(), help="Extra directory to try before the project directory.")
@click.option("--divergent", default=None, help="Subdirectory of src/<source-set> to try (needs --source-set).")
@click.option("--default-dir", default=None, type=click.Path(), help="Default resource directory.")
@click.option("--strict", is_flag=True, help="Fail if the reference cannot be resolved.")
@click.option("--validation", type=click.Choice(sorted(VALIDATIONS)), default=None,
              help="Check the resolved path: none (must not exist), exists, file or directory.")
@click.option("--as", "kind", type=click.Choice(["file", "path", "uri", "url"]), default="file", show_default=True)
@click.option("--trace", is_flag=True, help="Show every candidate tried.")
@click.pass_context
@handle_exceptions
def resolve(ctx, reference, source_set, resource_dirs, divergent, default_dir, strict, validation, kind, trace):
    """Resolve REFERENCE against the project's resource locations."""
    project = load_project(ctx.obj["path"])
    source_set_obj = project.source_sets[source_set] if source_set else None
    if divergent and source_set_obj is None:
        raise click.UsageError("--divergent requires --source-set")

    factory = ResourceFactory.of(
        project,
        source_set=source_set_obj,
        fail_on_unresolved=strict,
        level=LogLevel.LIFECYCLE if trace else LogLevel.INFO,
    )
    if default_dir:
        factory = factory.replace(default_resource_dir=default_dir)
    extra = [ResourceDirectoryResolver(d) for d in resource_dirs]
    if divergent:
        extra.append(DivergentResourceResolver(source_set_obj, divergent))
    if extra:
        # extra locations go right before the project directory
        factory = factory.replace(resolvers=factory.resolvers[:-1] + tuple(extra) + factory.resolvers[-1:])

    check = VALIDATIONS[validation] if validation else None
    if kind == "file":
        resolved = factory.file(reference, check)
    elif kind == "path":
        resolved = factory.path(reference, check)
    else:
        # anything but an absolute URL is a path to resolve
        target = reference if is_absolute_url(reference) else Path(reference)
        resolved = factory.uri(target) if kind == "uri" else factory.url(target)

    if resolved is None:
        click.echo(f"Could not resolve '{reference}'.")
        return
    click.echo(str(resolved))
