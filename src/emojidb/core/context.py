"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

from emojidb.cli.config import EmojiDbConfig, load_config
from emojidb.core.progress import ProgressReporter, RichProgressReporter, SilentProgressReporter
from emojidb.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback
from emojidb.integrations.database.abc import EmojiDatabase
from emojidb.integrations.database.real import RealEmojiDatabase
from emojidb.integrations.icons.abc import IconInventory
from emojidb.integrations.icons.real import RealIconInventory
from emojidb.integrations.registry_source.abc import RegistrySource
from emojidb.integrations.registry_source.real import LocalRegistrySource, RemoteRegistrySource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmojiDbContext:
    """Immutable context holding all dependencies for a build.

    Created at CLI entry point and threaded through the application.

    Note: config is None when no config file exists yet (before `emojidb init`),
    in which case icons and registry are None as well.
    """

    config: EmojiDbConfig | None
    icons: IconInventory | None
    registry: RegistrySource | None
    database: EmojiDatabase
    progress: ProgressReporter
    feedback: UserFeedback
    config_path: Path
    cwd: Path

    @staticmethod
    def for_test(
        config: EmojiDbConfig | None = None,
        icons: IconInventory | None = None,
        registry: RegistrySource | None = None,
        database: EmojiDatabase | None = None,
        progress: ProgressReporter | None = None,
        feedback: UserFeedback | None = None,
        config_path: Path | None = None,
        cwd: Path | None = None,
    ) -> "EmojiDbContext":
        """Create test context with fake implementations for anything not given.

        Example:
            >>> ctx = EmojiDbContext.for_test(
            ...     icons=FakeIconInventory(icons=["1f600.svg"]),
            ...     registry=FakeRegistrySource(text=REGISTRY_TEXT),
            ... )
        """
        from emojidb.integrations.database.fake import FakeEmojiDatabase
        from emojidb.integrations.icons.fake import FakeIconInventory
        from emojidb.integrations.registry_source.fake import FakeRegistrySource

        if config is None:
            config = EmojiDbConfig(
                output=Path("/test/dist/emojis.db"),
                icon_dir=Path("/fake/icons"),
                emoji_definition_url=None,
                local_emoji_definition=Path("/fake/emoji-test.txt"),
            )

        return EmojiDbContext(
            config=config,
            icons=icons if icons is not None else FakeIconInventory(),
            registry=registry if registry is not None else FakeRegistrySource(),
            database=database if database is not None else FakeEmojiDatabase(),
            progress=progress if progress is not None else SilentProgressReporter(),
            feedback=feedback if feedback is not None else SuppressedFeedback(),
            config_path=config_path or Path("/test/emojidb.toml"),
            cwd=cwd or Path("/test/cwd"),
        )


def registry_source_for(config: EmojiDbConfig) -> RegistrySource:
    """Pick the local file when configured, otherwise the remote URL."""
    if config.local_emoji_definition is not None:
        return LocalRegistrySource(config.local_emoji_definition)
    if config.emoji_definition_url is None:
        raise ValueError("No registry source configured")
    return RemoteRegistrySource(config.emoji_definition_url)


def create_context(
    *, config_path: Path, quiet: bool = False, read_config: bool = True
) -> EmojiDbContext:
    """Create production context with real implementations.

    Args:
        config_path: Path to `emojidb.toml`; a missing file yields config=None
        quiet: If True, suppress informational output and the progress bar
        read_config: If False, leave config unloaded so `init` can overwrite a
            malformed file

    Raises:
        ValueError: If the config file exists but is malformed
    """
    config: EmojiDbConfig | None = None
    icons: IconInventory | None = None
    registry: RegistrySource | None = None
    if read_config and config_path.exists():
        config = load_config(config_path)
        icons = RealIconInventory(config.icon_dir)
        registry = registry_source_for(config)
        logger.debug("Loaded config from %s: %s", config_path, config)
    else:
        logger.debug("Config not loaded from %s", config_path)

    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()
    progress: ProgressReporter = SilentProgressReporter() if quiet else RichProgressReporter()

    return EmojiDbContext(
        config=config,
        icons=icons,
        registry=registry,
        database=RealEmojiDatabase(),
        progress=progress,
        feedback=feedback,
        config_path=config_path,
        cwd=Path.cwd(),
    )
