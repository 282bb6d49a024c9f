"""Exceptions raised by the data structures in this package."""


class DataStructureError(Exception):
    """Base class for errors raised by container operations."""


class IndexErr(DataStructureError, IndexError):
    """A position is outside the valid range for the operation."""


class FullErr(DataStructureError):
    """A fixed-capacity container has no room for another element."""