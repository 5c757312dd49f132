import re

import bsptree


def test_version_is_declared():
    # setup.py reads the version from this attribute
    assert re.match(r"^\d+\.\d+\.\d+$", bsptree.__version__)
