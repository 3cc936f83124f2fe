"""Writer for the snapshot artifact."""

import types
from pathlib import Path
from typing import BinaryIO, Optional, Type

from ctxgen.io.interrupts import InterruptMonitor, interrupt_monitor
from ctxgen.types import PathType


class ArtifactWriter:
    """Writes the snapshot to its file, one piece at a time.

    The file is created or truncated when the writer is constructed, so an unwritable
    destination fails before any output is produced. Text is encoded as UTF-8 and
    written in binary mode: the artifact uses ``\\n`` line endings on every platform.

    Each ``write`` first consults the interrupt monitor. After Ctrl+C the next write
    raises KeyboardInterrupt and the pieces written so far stay in the file.

    Attributes:
        path (Path): The artifact being written.

    Example:
        >>> with ArtifactWriter("project_structure.md") as writer:  # doctest: +SKIP
        ...     writer.write("# Project structure overview\\n")
    """

    def __init__(self, path: PathType, monitor: InterruptMonitor = interrupt_monitor) -> None:
        """Open ``path`` for writing.

        Raises:
            OSError: If the file cannot be created or truncated.
        """
        self.path = Path(path)
        self._monitor = monitor
        self._file: Optional[BinaryIO] = self.path.open("wb")

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, text: str) -> None:
        """Append ``text`` to the artifact.

        Raises:
            KeyboardInterrupt: If SIGINT has been received.
            ValueError: If the writer has been closed.
            OSError: If the write fails.
        """
        if self._file is None:
            raise ValueError(f"Cannot write to closed artifact {self.path}")
        self._monitor.check()
        self._file.write(text.encode("utf-8"))

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "ArtifactWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
