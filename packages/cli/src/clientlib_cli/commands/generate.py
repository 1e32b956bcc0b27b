"""Generate command: build every clientlib listed in a config file."""

from pathlib import Path
from typing import Optional

import typer

from clientlib_cli._shared import (
    CONFIG_ARGUMENT,
    CWD_OPTION,
    ROOT_OPTION,
    load_run_config,
    select_libraries,
    setup_logging,
)
from clientlib_common import BatchError, ClientlibError
from clientlib_generator import generate as generate_clientlibs


def generate(
    config_path: Path = CONFIG_ARGUMENT,
    cwd: Optional[Path] = CWD_OPTION,
    root: Optional[str] = ROOT_OPTION,
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Only generate this clientlib"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="console or json"),
):
    """Generate clientlib folders, descriptors and manifests.

    Previous output of each library is removed first, so the result is
    always a clean copy.

    Examples:

        clientlib generate clientlib.config.yaml

        clientlib generate clientlib.config.json --cwd frontend --root dist/clientlibs
    """
    setup_logging(log_level, log_format)

    try:
        config = select_libraries(load_run_config(config_path, cwd, root), name)
        report = generate_clientlibs(config.libs, config.options)
    except BatchError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.completed:
            typer.echo(f"Generated before failure: {', '.join(e.completed)}", err=True)
        raise typer.Exit(1)
    except ClientlibError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not report.libraries:
        typer.echo("No clientlibs in config.")
        return

    typer.echo(f"Generated {len(report.libraries)} clientlibs:")
    for layout in report.libraries:
        typer.echo(f"  {layout.name:30} {layout.descriptor}")
