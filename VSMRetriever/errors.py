"""
Exceptions raised by the vector space model.
"""


class VSMError(Exception):
    """Base class for all errors raised by VSMRetriever."""


class UsageError(VSMError, ValueError):
    """Invalid arguments passed to a query. Raised before any work is done."""


class InvalidKError(UsageError):
    def __init__(self, k):
        self.k = k
        super().__init__(f"Parameter k must be a positive integer, got {k!r}.")


class KExceedsCollectionError(UsageError):
    def __init__(self, k: int, collection_size: int):
        self.k = k
        self.collection_size = collection_size
        super().__init__(
            f"Parameter k ({k}) cannot be greater than collection size ({collection_size})."
        )


class EmptyQueryError(UsageError):
    def __init__(self):
        super().__init__("Empty query not allowed.")


class ConfigurationError(VSMError):
    """Unknown component name or malformed configuration."""
