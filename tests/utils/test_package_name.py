import unittest

from dlcompare.utils.package_name import (PackageFilename, TYPE_GIT, TYPE_SEMVER, TYPE_URL,
                                          parse_package_filename, is_package_archive_name)

COMMIT = '0123456789abcdef0123456789abcdef01234567'


class ParsePackageFilenameTest(unittest.TestCase):
    def test_plain_package(self):
        self.assertEqual(
            PackageFilename(TYPE_SEMVER, 'dummy0', '1.0.1', '.tgz'),
            parse_package_filename('dummy0-1.0.1.tgz'))

    def test_hyphenated_name_with_prerelease(self):
        parsed = parse_package_filename('my-pkg-1.0.0-beta.1.tgz')
        self.assertEqual(TYPE_SEMVER, parsed.type)
        self.assertEqual('my-pkg', parsed.name)
        self.assertEqual('1.0.0-beta.1', parsed.version)

    def test_build_metadata_and_tar_gz(self):
        parsed = parse_package_filename('left-pad-1.3.0+build.5.tar.gz')
        self.assertEqual('left-pad', parsed.name)
        self.assertEqual('1.3.0+build.5', parsed.version)
        self.assertEqual('.tar.gz', parsed.extension)

    def test_scoped_package(self):
        for filename in ['@babel%2Fcore-7.24.0.tgz', '%40babel%2fcore-7.24.0.tgz']:
            with self.subTest(filename=filename):
                self.assertEqual(
                    PackageFilename(TYPE_SEMVER, 'core', '7.24.0', '.tgz', scope='babel'),
                    parse_package_filename(filename))

    def test_hosted_git_tarball(self):
        self.assertEqual(
            PackageFilename(TYPE_GIT, 'project', COMMIT, '.tar.gz', source='github.com/user/project'),
            parse_package_filename(f'github.com%2Fuser%2Fproject%2F{COMMIT}.tar.gz'))

    def test_hosted_git_tarball_short_commit(self):
        parsed = parse_package_filename('gitlab.com%2fgroup%2fsub%2fproject%2fa1b2c3d.tgz')
        self.assertEqual(TYPE_GIT, parsed.type)
        self.assertEqual('gitlab.com/group/sub/project', parsed.source)
        self.assertEqual('a1b2c3d', parsed.version)

    def test_url_tarball(self):
        self.assertEqual(
            PackageFilename(TYPE_URL, 'pkg', None, '.tgz', source='example.com/path/pkg.tgz'),
            parse_package_filename('example.com%2Fpath%2Fpkg.tgz'))

    def test_url_tarball_with_port_and_escapes(self):
        parsed = parse_package_filename('registry.example.org:8080%2Fmy%20files%2Fthing-1.0.0.tar.gz')
        self.assertEqual(TYPE_URL, parsed.type)
        self.assertEqual('thing-1.0.0', parsed.name)
        self.assertEqual('registry.example.org:8080/my files/thing-1.0.0.tar.gz', parsed.source)

    def test_rejects_non_archives(self):
        for filename in [
            'dltracker.json',
            'JUNK-1.zip',
            '_git-remotes',
            'git-github-com-ghuser-ghrepo-git-12345678',
            'noversion.tgz',
            'pkg-1.0.tgz',
            'pkg-01.0.0.tgz',
            '-1.0.0.tgz',
            'pkg-1.0.0.tgz.part',
            'example.com%2Fpath%2Fpkg.zip',
            'localhost%2Fpkg.tgz',
            f'github.com%2Fuser%2Fproject%2F{COMMIT}',
        ]:
            with self.subTest(filename=filename):
                self.assertIsNone(parse_package_filename(filename))
                self.assertFalse(is_package_archive_name(filename))

    def test_is_package_archive_name(self):
        for filename in ['dummy12-1.0.1.tgz',
                         f'github.com%2Fuser%2Fproject%2F{COMMIT}.tar.gz',
                         'example.com%2Fpath%2Fpkg.tgz']:
            with self.subTest(filename=filename):
                self.assertTrue(is_package_archive_name(filename))


if __name__ == '__main__':
    unittest.main()
