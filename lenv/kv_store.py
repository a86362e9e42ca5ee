##### Utility functions for .lenv key-value file handling
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import KVFileError

LOGGER = logging.getLogger("lenv")

SEPARATOR = ": "
COMMENT_PREFIX = "#"


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Split one `key: value` line.

    Returns None for blank lines, comments and lines without the separator.
    Only the key is stripped; the value is kept exactly as written.
    """
    line = line[:-1] if line.endswith("\n") else line
    line = line[:-1] if line.endswith("\r") else line
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    index = line.find(SEPARATOR)
    if index == -1:
        return None

    return line[:index].strip(), line[index + len(SEPARATOR):]


def load_kv(file_path : Union[str,Path], encoding: str = "utf-8") -> Dict[str, List[str]]:
    file_path = Path(file_path)
    data: Dict[str, List[str]] = {}

    try:
        if not file_path.exists():
            LOGGER.debug("%s does not exist, treating it as empty", file_path)
            return data

        # records end at "\n" only; a lone "\r" belongs to the value
        with open(file_path, "r", encoding=encoding, newline="\n") as f:
            for lineno, line in enumerate(f, start=1):
                entry = parse_line(line)
                if entry is None:
                    stripped = line.strip()
                    if stripped and not stripped.startswith(COMMENT_PREFIX):
                        LOGGER.debug("%s:%d: no '%s' separator, line skipped", file_path, lineno, SEPARATOR)
                    continue
                key, value = entry
                data.setdefault(key, []).append(value)
    except (OSError, UnicodeDecodeError) as e:
        raise KVFileError("reading", file_path, e) from e

    LOGGER.debug("read %d keys from %s", len(data), file_path)
    return data


def save_kv(file_path : Union[str,Path], data : Mapping[str, Sequence[str]], encoding: str = "utf-8") -> None:
    file_path = Path(file_path)
    count = 0
    try:
        with open(file_path, "w", encoding=encoding, newline="\n") as f:
            for key, values in data.items():
                for value in values:
                    f.write(f"{key}{SEPARATOR}{value}\n")
                    count += 1
    except OSError as e:
        raise KVFileError("writing", file_path, e) from e

    LOGGER.debug("wrote %d lines to %s", count, file_path)
