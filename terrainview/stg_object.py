"""Reader for scenery tile description (.stg) files."""

from __future__ import annotations

import os
from typing import Iterator


class StgObject:
    """An open .stg file whose ``VERB data`` lines can be looked up in order.

    Lookups read forward from the current position in the file; use
    :meth:`rewind` to start again from the top.
    """

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self.filename = os.fspath(filename)
        slash = self.filename.rfind("/")
        # The base path keeps its trailing slash so data can be appended to it.
        self.base_path = self.filename[: slash + 1]
        self._fp = open(self.filename, encoding="utf-8", errors="replace")

    @property
    def closed(self) -> bool:
        return self._fp.closed

    def get_value(self, verb: str, concat_base: bool = True) -> str | None:
        """Data of the next line that starts with ``verb`` and a space.

        With ``concat_base`` the directory of the .stg file is prepended.
        Returns None when no further line matches.
        """
        prefix = verb + " "
        while True:
            line = self._fp.readline()
            if not line:
                return None
            if line.startswith(prefix):
                data = line[len(prefix):]
                if data.endswith("\n"):
                    data = data[:-1]
                return self.base_path + data if concat_base else data

    def values(self, verb: str, concat_base: bool = True) -> Iterator[str]:
        """Yield the data of every remaining line for ``verb``."""
        while (value := self.get_value(verb, concat_base)) is not None:
            yield value

    def rewind(self) -> None:
        """Go back to the start of the file."""
        self._fp.seek(0)

    def close(self) -> None:
        self._fp.close()

    def __enter__(self) -> "StgObject":
        return self

    def __exit__(self, *args) -> None:
        self.close()