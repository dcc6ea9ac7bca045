"""covsubmit CLI - covsubmit command."""

import click

from covsubmit import __version__
from covsubmit.cli.submit import submit_command
from covsubmit.config.loader import load_config
from covsubmit.core.errors import ConfigError
from covsubmit.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="covsubmit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """covsubmit - upload line coverage to Codecov."""
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(submit_command, name="submit")


if __name__ == "__main__":
    cli()
