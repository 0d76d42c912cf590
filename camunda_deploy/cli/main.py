# camunda_deploy/cli/main.py
"""Main CLI entry point for camunda-deploy"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..api.exceptions import CamundaDeployError
from ..constants import (
    APP_NAME,
    LOG_FORMAT,
    ENV_URL,
    ENV_AUTH_USERNAME,
    ENV_AUTH_PASSWORD,
    ENV_AUTH_BEARER,
    ENV_REQUEST_TIMEOUT,
)
from ..services import DeployService, load_environment
from .utils.output import Reporter, print_error, stringify

console = Console(stderr=True)

EPILOG = f"""\b
Endpoint configuration:
  The engine endpoint and credentials are read from the environment:

  {ENV_URL}
  {ENV_AUTH_USERNAME}
  {ENV_AUTH_PASSWORD}
  {ENV_AUTH_BEARER}
  {ENV_REQUEST_TIMEOUT}

  A .env file in the working directory (or --env-file) is read too.
  Variables already set in the environment take precedence.

\b
Examples:
  $ {APP_NAME} -n invoice -S node-worker-1 '*.bpmn'

   ○ preparing deployment (5 resources)
   ○ deploying to Camunda
   ✔ 3 artifacts deployed (2 added, 1 updated)

  $ {APP_NAME} -n invoice --json '*.bpmn' > result.json
"""


def get_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map output options to a root log level"""
    if quiet:
        return logging.CRITICAL
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable debug output (DEBUG level)
        quiet: Only log critical errors
    """
    # Configure rich handler
    logging.basicConfig(
        level=get_log_level(verbose=verbose, quiet=quiet),
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=verbose,
                show_path=verbose,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def exit_with_error(message: str, verbose: bool = False, json_output: bool = False) -> None:
    """Report a failed run and exit with status 1

    JSON mode prints ``null`` on stdout so consumers always get a
    parseable document.
    """
    print_error(message, verbose=verbose, json_output=json_output)

    if json_output:
        click.echo("null")

    sys.exit(1)


@click.command(name=APP_NAME, epilog=EPILOG,
               context_settings={"help_option_names": ["-h", "--help"]})
@click.argument('resources', nargs=-1)
@click.option('-n', '--name', help='The deployment name')
@click.option('-t', '--tenant-id', help='The (optional) tenant to deploy to')
@click.option('-S', '--source', help='The (optional) deployment source')
@click.option('--env-file', type=click.Path(dir_okay=False),
              help='Read endpoint configuration from this .env file')
@click.option('--verbose', is_flag=True, help='Log verbose output')
@click.option('--quiet', is_flag=True, help='Log no output')
@click.option('--quite', 'quite', is_flag=True, hidden=True)
@click.option('--json', 'json_output', is_flag=True, help='Output deployed resources as JSON')
@click.version_option(__version__, prog_name=APP_NAME)
def cli(resources, name, tenant_id, source, env_file, verbose, quiet, quite, json_output):
    """Deploy BPMN, CMMN and DMN resources to a Camunda engine

    RESOURCES are file names or glob patterns relative to the working
    directory. All matched files are deployed in one deployment; the
    engine only creates new versions for resources that changed.
    """
    if json_output and verbose:
        exit_with_error(
            "--verbose and --json are exclusive",
            json_output=True
        )

    # --quite is the spelling older scripts use
    quiet = quiet or quite

    # Suppress all console output if JSON output is desired
    if json_output:
        quiet = True

    setup_logging(verbose=verbose, quiet=quiet)

    reporter = Reporter(verbose=verbose, quiet=quiet)

    if not quiet:
        reporter.out.print()

    try:
        env = load_environment(env_file)

        summary = DeployService(reporter).run(
            resources,
            name,
            env,
            tenant_id=tenant_id,
            source=source,
            cwd=Path.cwd()
        )

    except CamundaDeployError as e:
        exit_with_error(str(e), verbose=verbose, json_output=json_output)

    except Exception as e:
        exit_with_error(
            f"Unexpected error: {e}",
            verbose=verbose,
            json_output=json_output
        )

    if json_output:
        click.echo(stringify(summary.to_dict()))


def main():
    """Main entry point for the CLI application"""
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
