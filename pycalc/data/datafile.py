from __future__ import annotations

from collections.abc import Iterable
from os import PathLike


# ======================================================================

class DataFile:
    """
    Plain text file holding two columns of numbers, e.g. `(x, f(x))`
    pairs for plotting.  Each row is written as ``"x y\\n"``.

    The file is created (or truncated if it already exists) when the
    object is constructed.  Any error writing the file is raised as
    `OSError` and is not retried.

    Parameters
    ----------
    path : str or PathLike
        File to create.

    Examples
    --------
    >>> import os, tempfile
    >>> path = os.path.join(tempfile.mkdtemp(), 'square.dat')
    >>> with DataFile(path) as out:
    ...     out.write_rows((x, x ** 2) for x in (1.0, 2.0))
    >>> print(open(path).read(), end='')
    1.0 1.0
    2.0 4.0
    """

    def __init__(self, path: str | PathLike):
        self.path = path
        self._file = open(path, 'w')

    def __enter__(self) -> DataFile:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # -- Public Methods ------------------------------------------------

    def close(self):
        """Flush and close the file.  Further writes are an error."""
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, first_column: float, second_column: float):
        """Append a single row."""
        self._file.write(f"{first_column} {second_column}\n")

    def write_rows(self, rows: Iterable[tuple[float, float]]):
        """Append each `(first, second)` pair in `rows`."""
        for first_column, second_column in rows:
            self.write(first_column, second_column)
