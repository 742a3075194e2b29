import os.path

import pytest

from .conversion import ConversionFile

_dir = os.path.abspath(os.path.dirname(__file__))
_testdata = os.path.join(_dir, "testdata")
_conversion = os.path.join(_testdata, "conversion")


def pytest_configure(config):
    if not os.path.exists(_conversion):
        pytest.exit("testdata not available! The conversion test cases are "
                    "expected in %s" % _conversion)


def pytest_collect_file(file_path, parent):
    dir = os.path.abspath(str(file_path.parent))
    dir_and_parents = set()
    while dir not in dir_and_parents:
        dir_and_parents.add(dir)
        dir = os.path.dirname(dir)

    if _conversion in dir_and_parents:
        if file_path.suffix == ".dat":
            return ConversionFile.from_parent(parent, path=file_path)
