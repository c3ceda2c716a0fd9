import logging
from typing import NamedTuple

from .tally import CompareArgs, tally_directories
from ..errors import expect_directory_list
from ..utils.combinations import combinations

logger = logging.getLogger(__name__)


class Intersection(NamedTuple):
    """Files found in exactly one combination of directories.

    Attributes:
        dirs: Ascending indices of the directories sharing the files
        files: Names present in every directory of dirs and in no other
    """
    dirs: tuple[int, ...]
    files: list[str]


async def do_intersections(directories: list[str], args: CompareArgs) -> list[Intersection]:
    """Group the tallied entries of directories by the exact set of directories holding them.

    Groups are ordered by descending number of directories. Entries held by a
    single directory are not reported, and neither are combinations without entries.

    Raises:
        MalformedInputError: See expect_directory_list
        InputTypeError: See expect_directory_list
        OSError: A directory could not be read
    """
    expect_directory_list(directories)

    tally_map = await tally_directories(directories, args)

    members: dict[tuple[int, ...], list[str]] = {}
    for name, indices in tally_map.items():
        members.setdefault(tuple(indices), []).append(name)

    all_combinations = combinations(len(directories))
    results = []
    for size in range(len(directories), 1, -1):
        for combination in all_combinations:
            if len(combination) != size:
                continue
            files = members.get(combination)
            if files:
                results.append(Intersection(combination, files))

    logger.info(f"Found {len(results)} combinations of directories sharing packages")
    return results
