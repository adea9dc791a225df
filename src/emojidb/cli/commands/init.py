"""Write a starter config file."""

import click

from emojidb.cli.config import save_default_config
from emojidb.cli.ensure import Ensure
from emojidb.core.context import EmojiDbContext


@click.command("init")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_obj
def init_cmd(ctx: EmojiDbContext, force: bool) -> None:
    """Create emojidb.toml with default settings."""
    cfg_path = ctx.config_path
    Ensure.invariant(
        force or not cfg_path.exists(),
        f"Config already exists at {cfg_path} (use --force to overwrite)",
    )
    save_default_config(cfg_path)
    ctx.feedback.success(f"✓ Wrote {cfg_path}")
    ctx.feedback.info(
        "Icons are read from the twemoji submodule; initialize it with:\n"
        "  git submodule update --init --recursive"
    )
