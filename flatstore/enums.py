"""Different enums used in the project."""

from enum import Enum


class StoragesIDs(str, Enum):
    """The file storage services the project can be configured with."""

    FILE_SYSTEM = "FileSystem"
