"""Plan command: show the copy plan without writing anything."""

import json
from pathlib import Path
from typing import Optional

import typer

from clientlib_cli._shared import (
    CONFIG_ARGUMENT,
    CWD_OPTION,
    ROOT_OPTION,
    OutputFormat,
    load_run_config,
    select_libraries,
)
from clientlib_common import ClientlibError
from clientlib_generator import LibraryPlan, build_plan


def format_plan_markdown(plans: list[LibraryPlan]) -> str:
    """Render plans as a markdown outline."""
    lines = []
    for plan in plans:
        layout = plan.layout
        lines.append(f"## {layout.name}")
        lines.append("")
        lines.append(f"- folder: `{layout.folder}`")
        lines.append(f"- descriptor: `{layout.descriptor}` ({layout.descriptor_format.value})")
        for record in plan.records:
            lines.append("")
            lines.append(f"### {record.type} (base: `{record.base}`)")
            if record.files is None:
                lines.append("- (no files list)")
                continue
            for file in record.files:
                lines.append(f"- `{file.src}` -> `{file.dest}`")
        lines.append("")
    return "\n".join(lines)


def format_plan_json(plans: list[LibraryPlan]) -> str:
    """Render plans as a JSON array."""
    payload = [
        {
            "name": plan.layout.name,
            "folder": str(plan.layout.folder),
            "descriptor": str(plan.layout.descriptor),
            "format": plan.layout.descriptor_format.value,
            "assets": [record.model_dump(mode="json") for record in plan.records],
        }
        for plan in plans
    ]
    return json.dumps(payload, indent=2)


def plan(
    config_path: Path = CONFIG_ARGUMENT,
    cwd: Optional[Path] = CWD_OPTION,
    root: Optional[str] = ROOT_OPTION,
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Only plan this clientlib"),
    format: OutputFormat = typer.Option(
        OutputFormat.markdown,
        "--format",
        "-f",
        help="Output format",
    ),
):
    """Show where every asset file would be copied.

    Nothing is written or removed.

    Examples:

        clientlib plan clientlib.config.yaml

        clientlib plan clientlib.config.yaml --format json
    """
    try:
        config = select_libraries(load_run_config(config_path, cwd, root), name)
        plans = build_plan(config.libs, config.options)
    except ClientlibError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if format == OutputFormat.json:
        typer.echo(format_plan_json(plans))
    else:
        typer.echo(format_plan_markdown(plans))
