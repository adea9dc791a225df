"""Output directory lifecycle for the rebuilt database."""

import logging
import shutil
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def reset_destination(output: Path) -> Path:
    """Delete the output's parent directory and recreate it empty.

    Tolerates a missing directory. Everything under the parent is owned by
    the build and is destroyed.

    Returns:
        The recreated (empty) directory
    """
    output_dir = output.parent
    if output_dir.exists():
        logger.debug("Removing previous output directory %s", output_dir)
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True)
    return output_dir


@contextmanager
def fresh_destination(output: Path) -> Iterator[Path]:
    """Reset the output directory for the duration of a rebuild.

    If the block raises, the partially written output file is removed so the
    directory is left empty rather than holding an incomplete database.

    Example:
        >>> with fresh_destination(Path("dist/emojis.db")) as output_dir:
        ...     write_database(Path("dist/emojis.db"))
    """
    output_dir = reset_destination(output)
    try:
        yield output_dir
    except BaseException:
        if output.exists():
            logger.debug("Removing incomplete output %s", output)
            output.unlink()
        raise


def is_unsafe_output_dir(output_dir: Path, cwd: Path) -> bool:
    """Check whether deleting output_dir would destroy a directory the user works in.

    The filesystem root, the home directory, the working directory and any
    of its ancestors are never valid output directories.
    """
    resolved = output_dir.resolve()
    if resolved == Path(resolved.anchor) or resolved == Path.home().resolve():
        return True
    working = cwd.resolve()
    return resolved == working or resolved in working.parents


def inputs_inside_output_dir(output_dir: Path, inputs: Iterable[Path]) -> list[Path]:
    """Return the build inputs that resetting output_dir would delete.

    An input is endangered when it is output_dir itself or lives anywhere
    beneath it.
    """
    resolved = output_dir.resolve()
    endangered: list[Path] = []
    for path in inputs:
        candidate = path.resolve()
        if candidate == resolved or resolved in candidate.parents:
            endangered.append(path)
    return endangered
