from rich import print as rprint
from rich.panel import Panel

from .logger_instance import TRACE, logger

__all__ = [
    "logger",
    "rprint",
    "log_trace",
    "log_debug",
    "log_info",
    "log_warning",
    "log_error",
]


def log_trace(msg, *args, **kwargs):
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args, **kwargs)

def log_debug(msg, context=None):
    logger.debug(msg)
    if context:
        rprint(Panel(f"[bold blue]DEBUG:[/bold blue] {msg}\n[dim]{context}[/dim]", style="blue"))

def log_info(msg, context=None):
    logger.info(msg)
    if context:
        rprint(Panel(f"[bold green]INFO:[/bold green] {msg}\n[dim]{context}[/dim]", style="green"))

def log_warning(msg, context=None):
    logger.warning(msg)
    if context:
        rprint(Panel(f"[bold yellow]WARNING:[/bold yellow] {msg}\n[dim]{context}[/dim]", style="yellow"))

def log_error(msg, context=None):
    logger.error(msg)
    if context:
        rprint(Panel(f"[bold red]ERROR:[/bold red] {msg}\n[dim]{context}[/dim]", style="red"))
