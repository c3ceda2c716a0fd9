class ComparisonInputError(Exception):
    """The list of directories handed to a comparison is unusable.

    Raised before any directory is read. The CLI reports these together with its
    usage help, unlike I/O failures which are reported by message only.
    """


class MalformedInputError(ComparisonInputError, ValueError):
    """The directory list is missing, too short, or contains an empty path."""


class InputTypeError(ComparisonInputError, TypeError):
    """The directory list is not a list, or holds something other than strings."""


def expect_directory_list(directories) -> None:
    """Validate the argument of a comparison call.

    Raises:
        MalformedInputError: directories is None, has fewer than two items, or
                             contains an empty string
        InputTypeError: directories is not a list or tuple, or contains a non-str item
    """
    if directories is None:
        raise MalformedInputError("No argument given")
    if not isinstance(directories, (list, tuple)):
        raise InputTypeError(f"Expected a list of directories; given {type(directories).__name__}")
    for item in directories:
        if not isinstance(item, str):
            raise InputTypeError(f"Directories must all be strings; found {type(item).__name__}")
        if item == '':
            raise MalformedInputError("Empty string is invalid in this context")
    if len(directories) < 2:
        raise MalformedInputError("Not enough directories specified")
