# ABOUTME: Main CLI application entry point using click
# ABOUTME: Chooses the verbosity once at startup and offers logging status and demo commands

import time

import click
from rich.console import Console

from crunchy_cli.config import get_config
from crunchy_cli.utils.logging import (
    AlreadyInstalledError,
    Verbosity,
    get_logger,
    get_logging_status,
    init_logging,
    max_level,
    progress,
    tab_info,
    verbosity_from_flags,
)
from crunchy_cli.utils.rich_tables import create_logging_status_table, print_rich_table

console = Console()
logger = get_logger(__name__)


def _initialize_logging(verbose: int, quiet: bool, log_level: str | None = None) -> Verbosity:
    """Initialize logging configuration, keeping a sink installed earlier in the process.

    Returns:
        Verbosity of the sink in effect, which is the earlier one when it was kept
    """
    config = get_config()
    verbosity = verbosity_from_flags(verbose, quiet, log_level or config.log_level)
    try:
        init_logging(verbosity)
    except AlreadyInstalledError as e:
        logger.debug("Keeping the installed CLI logger ({})", e)
    return max_level()


@click.command(name="logging-status")
def logging_status():
    """
    Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.command()
@click.option("--steps", default=3, type=click.IntRange(min=1), help="Number of simulated steps")
@click.option("--delay", default=0.5, type=click.FloatRange(min=0), help="Seconds each step takes")
@click.option("--fail", is_flag=True, help="Fail on the last step to show the spinner being stopped implicitly")
def demo(steps: int, delay: float, fail: bool):
    """
    Run a short sequence of steps behind a progress spinner.
    """
    logger.info("Preparing {} steps", steps)
    tab_info("each step takes {}s", delay)

    with progress("Running {} steps", steps) as handler:
        for step in range(1, steps + 1):
            time.sleep(delay)
            if fail and step == steps:
                raise click.ClickException(f"Step {step} failed")
            logger.info("Finished step {}", step)
        handler.stop(f"Ran {steps} steps")

    tab_info("all steps done")


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", count=True, help="Show extended output (-v debug, -vv trace)")
@click.option("--quiet", "-q", is_flag=True, help="Only show errors")
@click.option(
    "--log-level",
    type=click.Choice([level.name for level in Verbosity], case_sensitive=False),
    default=None,
    help="Logging level used without -v/-q (defaults to CRUNCHY_CLI_LOG_LEVEL or INFO)",
)
@click.pass_context
def app(ctx, verbose: int, quiet: bool, log_level: str | None):
    """
    crunchy-cli - command line output with a live progress spinner.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)

    # Initialize logging once here instead of in each command
    ctx.obj["verbosity"] = _initialize_logging(verbose, quiet, log_level)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add commands to the main group
app.add_command(logging_status)
app.add_command(demo)


if __name__ == "__main__":
    app()
