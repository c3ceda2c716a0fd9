"""Tests for command implementation modules.

Test Files and Coverage:
========================

| Test File             | Test Classes                            | Tested Constructs              | Tested Functionalities                          |
|-----------------------|-----------------------------------------|--------------------------------|-------------------------------------------------|
| test_tally.py         | RecordTest                              | record()                       | Ascending, duplicate-free membership            |
|                       | TallyFilesystemTest, TallyFakeListerTest| do_tally(), tally_directories()| Git remotes, tolerated and propagated failures  |
| test_intersections.py | IntersectionsTest                       | do_intersections()             | Exact membership, ordering, disjoint, identical |
| test_uniques.py       | UniquesTest                             | do_uniques()                   | Per-directory slots, disjoint, identical        |
"""
