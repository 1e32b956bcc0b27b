"""Clean command: remove generated clientlibs."""

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
from clientlib_common import ClientlibError
from clientlib_generator import remove_clientlib
from clientlib_generator.models import coerce_options


def clean(
    config_path: Path = CONFIG_ARGUMENT,
    cwd: Optional[Path] = CWD_OPTION,
    root: Optional[str] = ROOT_OPTION,
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Only remove this clientlib"),
):
    """Remove the generated folder and JSON descriptor of each clientlib.

    Examples:

        clientlib clean clientlib.config.yaml

        clientlib clean clientlib.config.yaml --name site.publish
    """
    setup_logging(None, None)

    try:
        config = select_libraries(load_run_config(config_path, cwd, root), name)
        options = coerce_options(config.options)

        removed = []
        for lib in config.libs:
            removed.extend(
                remove_clientlib(
                    lib,
                    base_dir=options.cwd,
                    clientlib_root=options.client_lib_root,
                )
            )
    except ClientlibError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not removed:
        typer.echo("Nothing to remove.")
        return

    typer.echo(f"Removed {len(removed)} paths:")
    for path in removed:
        typer.echo(f"  {path}")
