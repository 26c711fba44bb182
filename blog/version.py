# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT
from importlib.metadata import PackageNotFoundError, version
# File for tracking the application version


try:
    from setuptools_scm import get_version
    __version__ = get_version(root="..", relative_to=__file__)

except (ImportError, LookupError, OSError):
    try:
        __version__ = version("markdown-blog")
    except PackageNotFoundError:
        __version__ = "0.0.0"
