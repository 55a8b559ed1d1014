"""
Loggit-specific exception types for the log store
"""


class LoggitError(Exception):
    """Base exception for all loggit errors"""
    pass


class StoreError(LoggitError):
    """Base exception for log store errors"""
    pass


class RecordNotFoundError(StoreError):
    """No record exists at the requested index"""
    def __init__(self, index: int, count: int):
        super().__init__(f"No log at index {index} (store holds {count})")
        self.index = index
        self.count = count


class CorruptStoreError(StoreError):
    """Store file could not be parsed"""
    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
