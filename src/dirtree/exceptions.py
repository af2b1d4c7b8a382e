from typing import Optional


class DirtreeError(Exception):
    """
    Base class for all errors raised by dirtree operations.

    Attributes:
        path (str): The path the failing operation was working on.

    Example:
        >>> error = DirtreeError("/some/path", "Something went wrong")
        >>> error.path
        '/some/path'
        >>> str(error)
        'Something went wrong'
    """

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message if message is not None else path)


class NotFoundError(DirtreeError, FileNotFoundError):
    """
    Exception raised when the root of a scan, copy or remove does not exist.

    It is also a FileNotFoundError, so callers catching the built-in keep working.

    Example:
        >>> error = NotFoundError("missing/path")
        >>> str(error)
        'Unexisting path `missing/path`.'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: str) -> None:
        DirtreeError.__init__(self, path, f"Unexisting path `{path}`.")


class DestinationMissingError(DirtreeError):
    """
    Exception raised when a copy destination is not an existing directory.

    The destination root is never created implicitly, so a mistyped destination
    fails before anything is written.

    Example:
        >>> error = DestinationMissingError("Unexisting/Folder")
        >>> str(error)
        'Unexisting destination path `Unexisting/Folder`.'
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Unexisting destination path `{path}`.")


class CreateFailedError(DirtreeError):
    """
    Exception raised when a directory cannot be created.

    Attributes:
        path (str): The directory that could not be created.
        reason (str): Why creation failed (permission, not a directory, disk full, ...).

    Example:
        >>> error = CreateFailedError("/root/locked/dir", "Permission denied")
        >>> str(error)
        'Unable to create directory `/root/locked/dir`: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Unable to create directory `{path}`: {reason}")


class IOFailureError(DirtreeError):
    """
    Exception raised when reading, copying or deleting an individual entry fails.

    The underlying OSError is chained as ``__cause__`` by the code raising this.

    Attributes:
        path (str): The entry that failed.
        operation (str): What was being attempted ("list", "copy", "remove").

    Example:
        >>> error = IOFailureError("/tmp/x/file.txt", "remove", "Permission denied")
        >>> str(error)
        'Unable to remove `/tmp/x/file.txt`: Permission denied'
    """

    def __init__(self, path: str, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(path, f"Unable to {operation} `{path}`: {reason}")
