"""Init command implementation."""

from ..config import write_config_template
from ..constants import CONFIG_FILE
from ..output import get_output_context


def init() -> None:
    """Create the change directory and a config template."""
    ctx = get_output_context()
    changes_dir = ctx.changes_dir
    config_path = changes_dir / CONFIG_FILE

    created_dir = not changes_dir.exists()
    changes_dir.mkdir(parents=True, exist_ok=True)
    if created_dir:
        ctx.message(f"[green]Created change directory:[/green] {changes_dir}")
    else:
        ctx.message(f"[yellow]Change directory already exists:[/yellow] {changes_dir}")

    created_config = not config_path.exists()
    if created_config:
        write_config_template(changes_dir)
        ctx.message(f"[green]Created config template:[/green] {config_path}")
    else:
        ctx.message(f"[yellow]Config already exists:[/yellow] {config_path}")

    ctx.result(
        str(changes_dir),
        {
            "changes_dir": str(changes_dir),
            "config": str(config_path),
            "created_dir": created_dir,
            "created_config": created_config,
        },
    )
