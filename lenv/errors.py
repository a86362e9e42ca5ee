from pathlib import Path
from typing import Optional, Union


class KVFileError(OSError):
    """An existing key-value file could not be read, or the target could not be written."""

    file_path : Path

    def __init__(self, action: str, file_path: Union[str, Path], cause: Exception) -> None:
        errno: Optional[int] = getattr(cause, "errno", None)
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(errno, f"Error {action} key-value file {file_path}: {reason}", str(file_path))
        self.file_path = Path(file_path)

    def __str__(self) -> str:
        return self.strerror
