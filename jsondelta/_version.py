# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

__version__ = "0.3.0"

_parser = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)((?P<releaselevel>a|b|rc)(?P<serial>\d+))?$"
)

_groups = _parser.match(__version__).groupdict()

version_info = VersionInfo(
    int(_groups["major"]),
    int(_groups["minor"]),
    int(_groups["micro"]),
    {"a": "alpha", "b": "beta", "rc": "candidate"}.get(_groups["releaselevel"], "final"),
    int(_groups["serial"] or 0),
)
