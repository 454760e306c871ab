import pytest

from adventatlas.terminal import build_tree

CLASSIC_TRACE = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


@pytest.fixture
def classic_trace():
    return CLASSIC_TRACE


@pytest.fixture
def classic_tree():
    return build_tree(CLASSIC_TRACE)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ADVENTATLAS_MODE", "ADVENTATLAS_THRESHOLD",
                 "ADVENTATLAS_CAPACITY", "ADVENTATLAS_REQUIRED"):
        monkeypatch.delenv(name, raising=False)
