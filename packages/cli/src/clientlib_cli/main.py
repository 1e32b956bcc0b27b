"""Clientlib CLI - Main entry point.

Provides the ``clientlib`` command-line interface.

Usage:
    clientlib generate clientlib.config.yaml
    clientlib plan clientlib.config.yaml --format json
    clientlib clean clientlib.config.yaml --name site.publish
"""

import typer

from clientlib_cli.commands.clean import clean
from clientlib_cli.commands.generate import generate
from clientlib_cli.commands.plan import plan

# ---------------------------------------------------------------------------
# Root Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="clientlib",
    help="Generate AEM clientlib folders, descriptors and manifests from a config file.",
    add_completion=False,
)

app.command(name="generate")(generate)
app.command(name="plan")(plan)
app.command(name="clean")(clean)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
