import logging

from .tally import CompareArgs, tally_directories
from ..errors import expect_directory_list

logger = logging.getLogger(__name__)


async def do_uniques(directories: list[str], args: CompareArgs) -> list[list[str] | None]:
    """Find the entries each directory holds that no other directory does.

    Returns:
        One slot per input directory, in input order. A slot is the list of names
        unique to that directory, or None when the directory has none.

    Raises:
        MalformedInputError: See expect_directory_list
        InputTypeError: See expect_directory_list
        OSError: A directory could not be read
    """
    expect_directory_list(directories)

    tally_map = await tally_directories(directories, args)

    results: list[list[str] | None] = [None] * len(directories)
    for name, indices in tally_map.items():
        if len(indices) == 1:
            index = indices[0]
            if results[index] is None:
                results[index] = []
            results[index].append(name)

    logger.info(f"Found unique packages in {sum(1 for r in results if r is not None)} of "
                f"{len(directories)} directories")
    return results
