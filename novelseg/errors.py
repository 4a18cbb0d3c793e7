"""Exceptions raised by the segmentation pipeline."""


class InvalidInputError(ValueError):
    """Raised when a line cannot be associated with a book or text."""
