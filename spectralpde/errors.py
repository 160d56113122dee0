"""Exceptions raised by the transform plans."""


class TransformError(ValueError):
    """Base class for errors reported by transform plans."""


class InvalidSizeError(TransformError):
    """The requested transform size is invalid."""


class SizeMismatchError(TransformError):
    """A buffer or grid size does not match the plan."""