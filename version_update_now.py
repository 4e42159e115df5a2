"""Stamp zint/version.py, a docstring-only module, with a timestamped version-code."""

import datetime

VERSION_PY = 'zint/version.py'
VERSION_BASE_PARTS = 3   # major.minor.patch, ahead of the timestamp


def current_version():
    with open(VERSION_PY, 'r') as version_py:
        return version_py.read().strip().strip('"')


def timestamped_version(version_base, when=None):
    """
    EXAMPLE:  timestamped_version('0.0.1') == '0.0.1.2019.0524.1959.39' at UTC 2019-05-24 19:59:39
    """
    if when is None:
        when = datetime.datetime.now(datetime.timezone.utc)
    return version_base + '.' + when.strftime('%Y.%m%d.%H%M.%S')


if __name__ == '__main__':
    base = '.'.join(current_version().split('.')[:VERSION_BASE_PARTS])
    new_version = timestamped_version(base)
    with open(VERSION_PY, 'w') as version_py:
        version_py.write('"""' + new_version + '"""')
    print(VERSION_PY, "is now", new_version)
