"""Content store exceptions."""


class ContentStoreError(Exception):
    """Raised when the content store cannot be queried."""


class ContentShapeError(ContentStoreError):
    """Raised when a document returned by the store cannot be shaped into a record."""
