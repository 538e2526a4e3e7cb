"""Main CLI application for Clean-Auth."""

import asyncio
import sys

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clean_auth import __version__
from clean_auth.application.container import DependencyContainer
from clean_auth.domain.entities.login_state import LoginState, LoginStatus
from clean_auth.shared.config.settings import get_settings
from clean_auth.shared.logging import setup_logging

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

app = typer.Typer(
    name="clean-auth",
    help="Layered login flow demo",
    add_completion=False,
)
console = Console()


def render_state(state: LoginState) -> None:
    """Render a login state change to the console."""
    if state.status == LoginStatus.LOADING:
        console.print("[yellow]Logging in...[/yellow]")
    elif state.status == LoginStatus.FAILED:
        console.print(f"[bold red]Login failed:[/bold red] {state.message}")
    elif state.status == LoginStatus.SUCCESS:
        console.print(Panel(
            Text(f"Welcome 👋\n{state.user.display_name}", justify="center"),
            title="Logged in",
            border_style="green"
        ))


async def _run_login(container: DependencyContainer, email: str, password: str) -> LoginState:
    orchestrator = container.make_login_orchestrator()
    orchestrator.subscribe(render_state)
    try:
        return await orchestrator.submit(email, password)
    finally:
        await container.close()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Configure logging before running a command."""
    settings = get_settings().logging
    if verbose:
        settings = settings.model_copy(update={"level": "DEBUG"})
    setup_logging(settings)


@app.command()
def version():
    """Show version information."""
    console.print(Panel(
        Text(f"Clean-Auth v{__version__}\nLayered login flow", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command()
def login(
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Account email"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Account password"
    ),
):
    """Log in with email and password."""
    container = DependencyContainer(get_settings())
    state = asyncio.run(_run_login(container, email, password))
    if not state.is_logged_in:
        raise typer.Exit(code=1)
    console.print(f"[dim]User id: {state.user.id}[/dim]")


@app.command()
def config():
    """Show the effective configuration."""
    settings = get_settings()
    table = Table(title=f"{settings.app_name} configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in settings.get_auth_config().items():
        table.add_row(f"auth.{key}", str(value))
    table.add_row("logging.level", settings.logging.level)
    table.add_row("web.host", settings.web.host)
    table.add_row("web.port", str(settings.web.port))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind host"),
    port: int = typer.Option(None, "--port", help="Bind port"),
):
    """Run the HTTP API."""
    import uvicorn

    from clean_auth.presentation.api.main import create_app

    settings = get_settings()
    host = host or settings.web.host
    port = port or settings.web.port
    console.print(f"[bold green]Clean-Auth API:[/bold green] http://{host}:{port}")
    uvicorn.run(create_app(DependencyContainer(settings)), host=host, port=port, access_log=False)


if __name__ == "__main__":
    app()
