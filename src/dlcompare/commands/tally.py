import asyncio
import bisect
import logging
from pathlib import Path
from typing import NamedTuple, Callable

from ..utils.lister import DirectoryLister

logger = logging.getLogger(__name__)

# Subdirectory of a download directory holding cached git remotes, one repository per entry
GIT_REMOTES_DIR = '_git-remotes'
# Marker subdirectory confirming that a git remote entry is a repository
REPOSITORY_MARKER = '.git'

TallyMap = dict[str, list[int]]


class CompareArgs(NamedTuple):
    """Collaborators shared by the tally and comparison operations."""
    lister: DirectoryLister  # Directory listing and directory-type checks
    classifier: Callable[[str], bool]  # Recognizes package archive filenames


def record(tally_map: TallyMap, name: str, index: int):
    """Record that the directory at index contains name.

    The index is inserted at its ascending position, so a membership list stays
    sorted and duplicate-free whatever order directories are tallied in.
    """
    indices = tally_map.get(name)
    if indices is None:
        tally_map[name] = [index]
        return

    position = bisect.bisect_left(indices, index)
    if position == len(indices) or indices[position] != index:
        indices.insert(position, index)


async def is_git_repository(path: Path, lister: DirectoryLister) -> bool:
    try:
        return await lister.is_directory(path / REPOSITORY_MARKER)
    except (FileNotFoundError, NotADirectoryError):
        return False


async def _tally_git_remotes(remotes_path: Path, index: int, tally_map: TallyMap, args: CompareArgs):
    try:
        entries = await args.lister.list_entries(remotes_path)
    except NotADirectoryError:
        logger.debug(f"Ignoring {remotes_path}: not a directory")
        return

    for entry in entries:
        if await is_git_repository(remotes_path / entry, args.lister):
            record(tally_map, entry, index)
        else:
            logger.debug(f"Skipping git remote without repository: {remotes_path / entry}")


async def do_tally(directory: str | Path, index: int, tally_map: TallyMap, args: CompareArgs):
    """Tally the recognized entries of one download directory.

    Package archives are recorded by filename. Entries of the git remotes
    subdirectory are recorded by their own names when they hold a repository; the
    git remotes subdirectory itself is never recorded.

    Args:
        directory: Download directory to scan
        index: Position of the directory in the compared list
        tally_map: Map from entry name to ascending indices of directories containing it
        args: Lister and classifier to use

    Raises:
        OSError: Listing the directory failed, or a repository check failed for a
                 reason other than the path being missing or not a directory
    """
    directory = Path(directory)
    logger.info(f"Tallying directory {index}: {directory}")

    for entry in await args.lister.list_entries(directory):
        if entry == GIT_REMOTES_DIR:
            await _tally_git_remotes(directory / entry, index, tally_map, args)
        elif args.classifier(entry):
            record(tally_map, entry, index)


async def tally_directories(directories: list[str], args: CompareArgs) -> TallyMap:
    """Tally every directory into one map, indexed by position in directories."""
    tally_map: TallyMap = {}
    await asyncio.gather(*(
        do_tally(directory, index, tally_map, args)
        for index, directory in enumerate(directories)
    ))
    logger.info(f"Tallied {len(tally_map)} entries across {len(directories)} directories")
    return tally_map
