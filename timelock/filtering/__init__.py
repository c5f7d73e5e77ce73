from .unchanged import UnchangedFileFilter, format_timestamp

__all__ = ["UnchangedFileFilter", "format_timestamp"]
