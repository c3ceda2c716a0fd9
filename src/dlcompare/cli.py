import argparse
import glob
import logging
import sys
import textwrap
from importlib.metadata import version, PackageNotFoundError

from . import Comparator, FilesystemLister, CompareSettings, ComparisonInputError, MalformedInputError
from .commands.intersections import Intersection
from .settings import SETTING_LISTER_CONCURRENCY, SettingsError

RULE = '-' * 80


def expand_items(items: list[str]) -> list[str]:
    """Replace each item containing glob magic with its sorted matches, keeping item order."""
    directories = []
    for item in items:
        if glob.has_magic(item):
            directories.extend(sorted(glob.glob(item)))
        else:
            directories.append(item)
    return directories


def show_duplicates(directories: list[str], results: list[Intersection], count: bool, output=None):
    output = output if output is not None else sys.stdout
    if not results:
        print("\nNo duplicates found.\n", file=output)
        return

    print(f"\nShowing {'counts of ' if count else ''}packages in common among sets of directories:\n", file=output)
    for intersection in results:
        for index in intersection.dirs:
            print(directories[index], file=output)
        if count:
            print(f"{len(intersection.files)} packages in common", file=output)
        else:
            print(RULE, file=output)
            for name in intersection.files:
                print(name, file=output)
        print(file=output)


def show_uniques(directories: list[str], results: list[list[str] | None], count: bool, output=None):
    output = output if output is not None else sys.stdout
    if all(files is None for files in results):
        print("\nNo unique packages found.\n", file=output)
        return

    print(f"\nShowing {'counts of ' if count else ''}unique packages per directory:\n", file=output)
    for index, files in enumerate(results):
        if files is None:
            continue
        print(directories[index], file=output)
        if count:
            print(f"{len(files)} unique packages", file=output)
        else:
            print(RULE, file=output)
            for name in files:
                print(name, file=output)
        print(file=output)


def _package_version() -> str:
    try:
        return version('dlcompare')
    except PackageNotFoundError:
        return 'unknown'


def dlcompare_main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog='dlcompare',
        usage='%(prog)s [options] item_1 ... item_n',
        description='Compare the package downloads of several download-tracker directories and list the packages '
                    'they have in common, or the packages unique to each.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            The items must resolve to existing paths.
            At least two arguments are required if literal paths, but a glob expression
            that yields enough paths to result in at least two arguments will suffice.

            Examples:
              dlcompare downloads/a downloads/b
              dlcompare --unique 'downloads/*'
              dlcompare --count downloads/a downloads/b downloads/c
            ''').strip()
    )
    parser.add_argument(
        'items',
        nargs='*',
        metavar='ITEM',
        help='Download directory, or glob expression matching download directories')
    parser.add_argument(
        '-c', '--count',
        action='store_true',
        help='Only show counts for each combination of directories')
    parser.add_argument(
        '-u', '--unique',
        action='store_true',
        help='Only show packages that are unique to one of the directories')
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {_package_version()}')
    parser.add_argument(
        '--settings',
        metavar='PATH',
        help='Path to a TOML settings file. If not provided, uses the DLCOMPARE_SETTINGS environment variable.')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log progress to standard error when no log file is configured')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file. If not provided, uses logging.path from the settings file or no logging.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when --log-file is provided.')

    args = parser.parse_args(argv)

    if args.log_file:
        log_level = args.log_level if args.log_level is not None else 'INFO'
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    try:
        settings = CompareSettings.locate(args.settings)
        concurrency = settings.get_int(SETTING_LISTER_CONCURRENCY, minimum=1)

        if not args.items:
            raise MalformedInputError("No directories named")
        directories = expand_items(args.items)

        with FilesystemLister(concurrency) as lister:
            comparator = Comparator(lister, settings=settings)
            if not args.log_file and not comparator.configure_logging_from_settings() and args.verbose:
                logging.basicConfig(
                    stream=sys.stderr,
                    level=logging.DEBUG,
                    format='%(name)s - %(levelname)s - %(message)s'
                )

            if args.unique:
                show_uniques(directories, comparator.uniques(directories), args.count)
            else:
                show_duplicates(directories, comparator.intersections(directories), args.count)
    except ComparisonInputError as e:
        print(e, file=sys.stderr)
        print(file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(1)
    except SettingsError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    dlcompare_main()
