"""Init command implementation."""

from pathlib import Path

from ..config import write_config_template
from ..constants import CONFIG_FILE_NAME
from ..output import get_output_context


def init() -> None:
    """Write a deploydoc.toml template into the current directory."""
    ctx = get_output_context()
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        return

    write_config_template(Path.cwd())
    ctx.print(f"[green]Created config template:[/green] {config_path}")
