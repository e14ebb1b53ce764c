"""Real-time CLI dashboard for proxy monitoring."""

from datetime import datetime
from threading import Lock

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from ui.log_utils import write_cli_log, write_forward_log

console = Console()


class ForwardInfo:
    """Info about a single forwarded request."""

    def __init__(self, method: str, target_url: str, status: int, timestamp: datetime):
        self.method = method
        self.target_url = target_url[:80] + "..." if len(target_url) > 80 else target_url
        self.status = status
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing forwarded requests, preflights and errors."""

    def __init__(self, config: Config):
        self.config = config
        self._lock = Lock()
        self._recent: list[ForwardInfo] = []
        self._max_recent = 10
        self._request_count = {"forwarded": 0, "preflight": 0, "errors": 0}
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    def log_forward(
        self,
        method: str,
        target_url: str,
        status: int,
        *,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Log a request forwarded to its target."""
        with self._lock:
            self._request_count["forwarded"] += 1
            self._recent.insert(0, ForwardInfo(method, target_url, status, datetime.now()))
            self._recent = self._recent[: self._max_recent]
            self._refresh()

            write_forward_log(method, target_url, status, headers or {})
            write_cli_log("FORWARD", target_url[:200], method=method, status=status)

    def log_preflight(self, uri: str) -> None:
        """Log a preflight answered locally."""
        with self._lock:
            self._request_count["preflight"] += 1
            self._refresh()
            write_cli_log("PREFLIGHT", uri[:200])

    def log_error(self, status: int, message: str) -> None:
        """Log an error."""
        with self._lock:
            self._request_count["errors"] += 1
            truncated = message[:60] + "..." if len(message) > 60 else message
            self._errors.insert(0, f"{status}: {truncated}")
            self._errors = self._errors[:3]
            self._refresh()
            write_cli_log("ERROR", message[:200], status=status)

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=5),
        )
        layout["header"].update(self._build_header())
        layout["body"].update(self._build_requests_panel())
        layout["footer"].update(self._build_footer())
        return layout

    def _build_header(self) -> Panel:
        """Build header with stats."""
        stats = Text()
        stats.append("CORS Forward Proxy", style="bold cyan")
        stats.append("  |  ")
        stats.append(f"Forwarded: {self._request_count['forwarded']}", style="green")
        stats.append("  |  ")
        stats.append(f"Preflight: {self._request_count['preflight']}", style="blue")
        stats.append("  |  ")
        stats.append(f"Errors: {self._request_count['errors']}", style="red")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.proxy.port}", style="dim")

        return Panel(stats, style="cyan")

    def _build_requests_panel(self) -> Panel:
        if self._recent:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column("Method", width=7)
            table.add_column("Status", width=6)
            table.add_column("Target", ratio=1)

            for info in self._recent:
                table.add_row(
                    info.timestamp.strftime("%H:%M:%S"),
                    info.method,
                    Text(str(info.status), style=_status_style(info.status)),
                    info.target_url,
                )
            content = table
        else:
            content = Text("Waiting for requests...", style="dim")

        return Panel(content, title="[green]Forwarded[/green]", border_style="green")

    def _build_footer(self) -> Panel:
        """Build footer with errors and usage hint."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        else:
            port = self.config.proxy.port
            content = Text(
                f"Call http://localhost:{port}/?url=<encoded target> or send x-target-url",
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")


def _status_style(status: int) -> str:
    if status >= 500:
        return "red"
    if status >= 400:
        return "yellow"
    return "green"
