import logging
import os
from pathlib import Path

import click

from emojidb.cli.commands.build import build_cmd
from emojidb.cli.commands.init import init_cmd
from emojidb.cli.config import DEFAULT_CONFIG_NAME
from emojidb.cli.output import user_output
from emojidb.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if EMOJIDB_DEBUG environment variable is set
if os.getenv("EMOJIDB_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="emojidb")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_NAME,
    show_default=True,
    help="Path to the emojidb config file.",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print errors.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path, quiet: bool) -> None:
    """Build a searchable emoji database from the Unicode registry and an icon set."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(
                config_path=config_path,
                quiet=quiet,
                read_config=ctx.invoked_subcommand != "init",
            )
        except (ValueError, OSError) as e:
            user_output(click.style("Error: ", fg="red") + f"Invalid config {config_path}: {e}")
            raise SystemExit(1) from None


cli.add_command(build_cmd)
cli.add_command(init_cmd)


def main() -> None:
    """CLI entry point used by the `emojidb` console script."""
    cli()
