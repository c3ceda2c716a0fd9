"""Recognition of package archive filenames as saved by an npm download tracker.

Three kinds of tarball are stored:

- semver: ``<name>-<version>.tgz``. Scoped packages keep their scope with the
  slash percent-encoded, e.g. ``@babel%2Fcore-7.24.0.tgz`` or
  ``%40babel%2Fcore-7.24.0.tgz``.
- git: a hosted-git snapshot named after its percent-encoded location and
  commit, e.g. ``github.com%2Fuser%2Fproject%2F<commit>.tar.gz``.
- url: a tarball fetched from a plain URL, named after its percent-encoded
  location without the scheme, e.g. ``example.com%2Fpath%2Fpkg.tgz``.
"""
import re
import urllib.parse
from typing import NamedTuple


TYPE_SEMVER = 'semver'
TYPE_GIT = 'git'
TYPE_URL = 'url'

_EXTENSION = r'(?P<extension>\.tgz|\.tar\.gz)'
_HOST = r'[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*\.[A-Za-z]{2,}'
_SEGMENT = r"(?:[A-Za-z0-9._~!$&'()*+,;=:@-]|%(?!2[Ff])[0-9A-Fa-f]{2})+"
_SLASH = r'%2[Ff]'

_SEMVER_FILENAME = re.compile(
    r'^(?:(?:@|%40)(?P<scope>[A-Za-z0-9][A-Za-z0-9._~-]*)%2[Ff])?'
    r'(?P<name>[A-Za-z0-9][A-Za-z0-9._~-]*)'
    r'-(?P<version>(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)'
    r'(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?'
    r'(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?)'
    + _EXTENSION + '$'
)

_GIT_FILENAME = re.compile(
    rf'^(?P<source>{_HOST}(?:{_SLASH}{_SEGMENT})+)'
    rf'{_SLASH}(?P<commit>[0-9a-fA-F]{{7,40}})'
    + _EXTENSION + '$'
)

_URL_FILENAME = re.compile(
    rf'^(?P<source>{_HOST}(?::\d+)?(?:{_SLASH}{_SEGMENT})*{_SLASH}(?P<basename>{_SEGMENT}?))'
    + _EXTENSION + '$'
)


class PackageFilename(NamedTuple):
    """Components of a recognized package archive filename.

    Attributes:
        type: TYPE_SEMVER, TYPE_GIT or TYPE_URL
        name: Package name without scope (semver), repository name (git), or
              decoded last path segment without extension (url)
        version: Semantic version (semver), commit (git), or None (url)
        extension: '.tgz' or '.tar.gz'
        scope: Scope without the leading '@' for scoped semver packages, else None
        source: Decoded location without scheme for git and url tarballs
                (e.g. 'github.com/user/project'), None for semver
    """
    type: str
    name: str
    version: str | None
    extension: str
    scope: str | None = None
    source: str | None = None


def parse_package_filename(filename: str) -> PackageFilename | None:
    match = _SEMVER_FILENAME.match(filename)
    if match is not None:
        return PackageFilename(TYPE_SEMVER, match['name'], match['version'], match['extension'],
                               scope=match['scope'])

    match = _GIT_FILENAME.match(filename)
    if match is not None:
        source = urllib.parse.unquote(match['source'])
        return PackageFilename(TYPE_GIT, source.rsplit('/', 1)[-1], match['commit'], match['extension'],
                               source=source)

    match = _URL_FILENAME.match(filename)
    if match is not None:
        return PackageFilename(TYPE_URL, urllib.parse.unquote(match['basename']), None, match['extension'],
                               source=urllib.parse.unquote(match['source']) + match['extension'])

    return None


def is_package_archive_name(filename: str) -> bool:
    return parse_package_filename(filename) is not None
