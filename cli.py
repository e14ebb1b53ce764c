"""CLI entry point for cors-forward-proxy."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from core.config import CONFIG_FILE, load_config
from core.protocols import NullLogger, RequestLogger
from ui.dashboard import Dashboard
from ui.log_utils import clear_logs, write_cli_log

console = Console()


def main():
    """Main CLI entry point."""
    headless = False

    # Handle CLI arguments
    if len(sys.argv) > 1:
        arg = sys.argv[1]

        if arg == "--config":
            console.print(f"[bold]Config:[/bold] {CONFIG_FILE}")
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

        if arg == "--headless":
            headless = True
        else:
            console.print(f"[red][ERROR][/red] Unknown argument: {arg}")
            _print_help()
            sys.exit(2)

    config = load_config()

    clear_logs()
    dashboard = None if headless else Dashboard(config)
    logger: RequestLogger = dashboard or NullLogger()

    import uvicorn

    app = create_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.proxy.host,
        port=config.proxy.port,
        log_level="info" if headless or config.proxy.debug else "warning",
        timeout_keep_alive=config.limits.keep_alive_timeout,
    )
    server = uvicorn.Server(uvicorn_config)

    if dashboard:
        dashboard.start()
    start_time = datetime.now()
    write_cli_log("STARTUP", "Proxy started", host=config.proxy.host, port=config.proxy.port)
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", "Proxy stopped", duration=str(duration))
        if dashboard:
            dashboard.stop()


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]CORS Forward Proxy[/bold cyan]

Forwards browser requests to any http(s) target and adds permissive CORS headers.

[bold]Usage:[/bold]
    cors-forward-proxy              Start with live dashboard
    cors-forward-proxy --headless   Start without dashboard
    cors-forward-proxy --config     Show config location
    cors-forward-proxy --help       Show this help

[bold]Target:[/bold]
    x-target-url: https://api.example.com/data
    /?url=https%3A%2F%2Fapi.example.com%2Fdata
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
