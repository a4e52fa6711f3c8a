"""
The `__version__` module.

Separated from the `__init__` one because some tools use `__init__` internally
(e.g. Pycharm Interactive console: `pycharm_matplotlib_backend`) and that creates problems.
"""

import tomllib
from importlib.metadata import version
from pathlib import Path

# Get the version from the source tree, or from the installed distribution when there's no source tree
try:
    with open(Path(__file__).parent.parent / "pyproject.toml", "rb") as file:
        __version__ = tomllib.load(file)["project"]["version"]
except FileNotFoundError:
    __version__ = version("flatstore")


__all__ = ["__version__"]
