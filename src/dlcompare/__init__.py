from .comparator import Comparator
from .commands.intersections import Intersection, do_intersections
from .commands.tally import CompareArgs, GIT_REMOTES_DIR, REPOSITORY_MARKER, do_tally
from .commands.uniques import do_uniques
from .errors import ComparisonInputError, MalformedInputError, InputTypeError
from .settings import CompareSettings, SettingsError
from .utils.combinations import combinations
from .utils.lister import DirectoryLister, FilesystemLister
from .utils.package_name import PackageFilename, parse_package_filename, is_package_archive_name
