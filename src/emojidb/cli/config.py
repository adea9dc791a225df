"""Load and write `emojidb.toml`."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

DEFAULT_CONFIG_NAME = "emojidb.toml"
DEFAULT_EMOJI_DEFINITION_URL = "https://unicode.org/Public/emoji/latest/emoji-test.txt"
DEFAULT_ICON_DIR = "twemoji/assets/svg"
DEFAULT_OUTPUT = "dist/emojis.db"


@dataclass(frozen=True)
class EmojiDbConfig:
    """In-memory representation of `emojidb.toml`.

    Loaded once at the CLI entry point; read-only for the run.
    """

    output: Path
    icon_dir: Path
    emoji_definition_url: str | None
    local_emoji_definition: Path | None


def load_config(cfg_path: Path) -> EmojiDbConfig:
    """Load the config file, resolving relative paths against its directory.

    Example config:
      output = "dist/emojis.db"
      icon_dir = "twemoji/assets/svg"
      emoji_definition_url = "https://unicode.org/Public/emoji/latest/emoji-test.txt"
      # local_emoji_definition = "emoji-test.txt"

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a required key is missing or neither registry source is set
    """
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found at {cfg_path}")

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    base_dir = cfg_path.parent

    output = data.get("output")
    if not output:
        raise ValueError(f"Missing 'output' in {cfg_path}")

    local = data.get("local_emoji_definition")
    url = data.get("emoji_definition_url")
    if not local and not url:
        raise ValueError(
            f"Set 'local_emoji_definition' or 'emoji_definition_url' in {cfg_path}"
        )

    return EmojiDbConfig(
        output=_resolve(base_dir, str(output)),
        icon_dir=_resolve(base_dir, str(data.get("icon_dir", DEFAULT_ICON_DIR))),
        emoji_definition_url=str(url) if url else None,
        local_emoji_definition=_resolve(base_dir, str(local)) if local else None,
    )


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def save_default_config(cfg_path: Path) -> None:
    """Write a starter config file, using tomlkit to keep comments."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("emojidb build configuration"))
    doc.add(tomlkit.nl())
    doc["output"] = DEFAULT_OUTPUT
    doc["output"].comment("parent directory is deleted and recreated on every build")
    doc["icon_dir"] = DEFAULT_ICON_DIR
    doc["emoji_definition_url"] = DEFAULT_EMOJI_DEFINITION_URL
    doc.add(tomlkit.comment('local_emoji_definition = "emoji-test.txt"'))

    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
