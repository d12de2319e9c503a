"""CLI for Medrunner Tools."""

import typer

from .mcp_server import run_server
from .tips.cli import app as tips_app

app = typer.Typer(
    name="medrunner-tools",
    help="Operations tools for Medrunner teams",
)

app.add_typer(tips_app, name="tips", help="Fee-fair tip splitting")


@app.command()
def mcp():
    """Start the MCP server for Claude integration."""
    run_server()


if __name__ == "__main__":
    app()
