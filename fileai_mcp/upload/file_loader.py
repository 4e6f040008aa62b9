import os
from pathlib import Path


class FileLoader:
    """Resolves a local upload path and reads its bytes."""

    def resolve(self, file_path: str | Path) -> Path:
        """Return the expanded path of a readable regular file.

        Raises:
            FileNotFoundError: if the path is missing, not a file, or unreadable.
        """
        path = Path(file_path).expanduser()
        if not path.is_file() or not os.access(path, os.R_OK):
            raise FileNotFoundError(f"File not found: {file_path}")
        return path

    def load(self, path: Path) -> bytes:
        """Read the whole file into memory."""
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileNotFoundError(f"File not found: {path}") from exc
