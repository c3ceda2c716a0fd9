import asyncio
import logging
from typing import Callable

from .commands.intersections import do_intersections, Intersection
from .commands.tally import CompareArgs
from .commands.uniques import do_uniques
from .settings import CompareSettings, SETTING_LOGGING_PATH, SETTING_LOGGING_LEVEL
from .utils.lister import DirectoryLister
from .utils.package_name import is_package_archive_name


class Comparator:
    """Synchronous entry point for comparing download directories.

    Each call builds its own tally of the given directories on a fresh event loop,
    so one Comparator can serve any number of comparisons. Directory access and
    filename recognition are delegated to the lister and classifier, which lets
    callers substitute in-memory fakes.
    """

    def __init__(
            self,
            lister: DirectoryLister,
            classifier: Callable[[str], bool] = is_package_archive_name,
            settings: CompareSettings | None = None):
        """Initialize the comparator.

        Args:
            lister: Directory access backend
            classifier: Predicate recognizing package archive filenames
            settings: Settings used by configure_logging_from_settings(); empty if None
        """
        self._args = CompareArgs(lister, classifier)
        self._settings = settings if settings is not None else CompareSettings()

    def configure_logging_from_settings(self) -> bool:
        """Configure logging from the logging.path and logging.level settings.

        Returns:
            True if logging was configured, False if no log path is set
        """
        log_path_setting = self._settings.get(SETTING_LOGGING_PATH)
        if log_path_setting:
            level_name = str(self._settings.get(SETTING_LOGGING_LEVEL, 'INFO')).upper()
            level = logging.getLevelNamesMapping().get(level_name, logging.INFO)

            for handler in logging.root.handlers[:]:
                logging.root.removeHandler(handler)

            logging.basicConfig(
                filename=str(log_path_setting),
                level=level,
                format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            return True
        return False

    def intersections(self, directories: list[str]) -> list[Intersection]:
        """Report the packages shared by each combination of directories.

        See do_intersections() for ordering and errors.
        """
        return asyncio.run(do_intersections(directories, self._args))

    def uniques(self, directories: list[str]) -> list[list[str] | None]:
        """Report the packages found in only one of the directories.

        See do_uniques() for the result layout and errors.
        """
        return asyncio.run(do_uniques(directories, self._args))
