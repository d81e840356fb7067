"""
Budgeteer CLI - Main Entry Point

Unified Typer CLI that assembles the module sub-commands.

Usage:
    budgeteer version
    budgeteer migrate
    budgeteer serve
    budgeteer projects [command]
    budgeteer stats [command]
"""

import importlib
import logging
import socket

import typer
from waitress import serve as waitress_serve

import budgeteer

app = typer.Typer(
    name="budgeteer",
    help="Budget tracking for project teams.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Budget tracking for project teams."""
    if verbose:
        from budgeteer.core.logging import set_level

        set_level(logging.DEBUG)


@app.command()
def version():
    """Show the Budgeteer version."""
    typer.echo(f"budgeteer {budgeteer.__version__}")


@app.command()
def migrate():
    """Apply the database schemas of all modules."""
    from budgeteer.core.db import migrate_all

    count = migrate_all()
    typer.echo(f"Database migration complete ({count} schemas).")


@app.command()
def serve(
    port: int = typer.Option(5000, "--port", "-p", help="Port number"),
    host: str = typer.Option(None, "--host", "-h", help="Host address (default: 0.0.0.0 prod, 127.0.0.1 debug)"),
    debug: bool = typer.Option(False, "--debug", help="Use Flask dev server with auto-reload (localhost only)"),
    threads: int = typer.Option(8, "--threads", "-t", help="Waitress worker threads (production only)"),
):
    """Launch the Budgeteer web interface.

    Default: Waitress server on 0.0.0.0 (LAN accessible).
    With --debug: Flask dev server on 127.0.0.1 with auto-reload.
    """
    from budgeteer.api import create_app

    web = create_app()

    if debug:
        _host = host or "127.0.0.1"
        typer.echo(f"Starting Flask dev server at http://{_host}:{port}")
        web.run(host=_host, port=port, debug=True)
        return

    _host = host or "0.0.0.0"
    typer.echo(f"Starting Waitress server on {_host}:{port} ({threads} threads)")
    if _host == "0.0.0.0":
        typer.echo(f"LAN access: http://{socket.gethostname()}:{port}")
    waitress_serve(web, host=_host, port=port, threads=threads)


MODULE_REGISTRY = [
    ("budgeteer.projects.cli", "projects", "Projects, budgets & people"),
    ("budgeteer.statistics.cli", "stats", "Burn statistics & notifications"),
]


def _register_modules():
    """Register module CLI sub-apps."""
    for module_path, name, help_text in MODULE_REGISTRY:
        mod = importlib.import_module(module_path)
        app.add_typer(mod.app, name=name, help=help_text)


_register_modules()


def main():
    """Entry point for the budgeteer CLI."""
    app()


if __name__ == "__main__":
    main()
