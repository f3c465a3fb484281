"""Exceptions shared by the bounded containers."""


class CapacityError(OverflowError):
    """Raised when a value is added to a container that is already full."""


class EmptyError(IndexError):
    """Raised when a value is read or removed from an empty container."""