"""In-memory licence collection.

This module owns the header plus ordered rows loaded from the register.
It provides copying and in-place filters and CSV write-back.
"""

from __future__ import annotations

import csv
import io
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from core.constants import CSV_LINE_TERMINATOR
from core.errors import WtrStoreError
from core.logging_config import get_logger
from core.types import LicencePredicate, LicenceRow

_LOGGER = get_logger(__name__)


class LicenceCollection:
    """Ordered licence rows sharing one register header.

    The header is an immutable tuple and may be shared between
    collections. The row list is always owned: the constructor copies
    the rows it is given and both filters build fresh lists, so no two
    collections ever alias the same row storage.
    """

    def __init__(self, header: Iterable[str], rows: Iterable[LicenceRow] = ()) -> None:
        """Create a collection.

        Args:
            header: Ordered column names.
            rows: Licence rows, copied into storage owned by this collection.
        """
        self._header = tuple(header)
        self._rows: list[LicenceRow] = list(rows)

    @property
    def header(self) -> tuple[str, ...]:
        """Return ordered column names."""
        return self._header

    @property
    def rows(self) -> tuple[LicenceRow, ...]:
        """Return a snapshot of the current rows."""
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[LicenceRow]:
        return iter(tuple(self._rows))

    def __repr__(self) -> str:
        return f"LicenceCollection(columns={len(self._header)}, rows={len(self._rows)})"

    def filter(self, predicate: LicencePredicate) -> "LicenceCollection":
        """Return a new collection holding the rows matching ``predicate``.

        The receiver is left untouched. Row order is preserved.

        Args:
            predicate: Membership test over licence rows.

        Returns:
            New collection with the same header.
        """
        filtered = LicenceCollection(self._header, _select_rows(self._rows, predicate))
        _LOGGER.debug(
            "collection_filtered",
            input_count=len(self._rows),
            output_count=len(filtered),
            in_place=False,
        )
        return filtered

    def filter_in_place(self, predicate: LicencePredicate) -> None:
        """Keep only the rows matching ``predicate``.

        The receiver's row list is replaced by a newly built list, so
        row tuples previously taken from ``rows`` are not affected.

        Args:
            predicate: Membership test over licence rows.
        """
        input_count = len(self._rows)
        self._rows = _select_rows(self._rows, predicate)
        _LOGGER.debug(
            "collection_filtered",
            input_count=input_count,
            output_count=len(self._rows),
            in_place=True,
        )

    def get_companies(self) -> list[str]:
        """Return distinct non-empty licencee company names, sorted."""
        return sorted({row.licencee_company for row in self._rows if row.licencee_company})

    def count_by_product_code(self) -> dict[str, int]:
        """Return row counts keyed by product code."""
        return dict(Counter(row.product_code for row in self._rows))

    def count_by_company(self) -> dict[str, int]:
        """Return row counts keyed by non-empty licencee company, sorted by name."""
        counts = Counter(row.licencee_company for row in self._rows if row.licencee_company)
        return dict(sorted(counts.items()))

    def write_csv(self, sink: TextIO) -> None:
        """Write header and rows as CSV to ``sink``.

        Fields containing the delimiter, quote character, or line breaks
        are quoted. The sink is neither flushed nor closed, and write
        failures propagate to the caller.

        Args:
            sink: Text stream opened with ``newline=""`` when file-backed.
        """
        writer = csv.writer(sink, lineterminator=CSV_LINE_TERMINATOR)
        writer.writerow(self._header)
        writer.writerows(row.to_values() for row in self._rows)

    def to_csv_text(self) -> str:
        """Render the collection as CSV text."""
        buffer = io.StringIO()
        self.write_csv(buffer)
        return buffer.getvalue()

    def save_csv(self, path: Path | str) -> Path:
        """Write the collection to a CSV file.

        Args:
            path: Destination file path. Parent directories are created.

        Returns:
            Written file path.

        Raises:
            WtrStoreError: If the file cannot be written.
        """
        output_path = Path(path).expanduser()
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", encoding="utf-8", newline="") as handle:
                self.write_csv(handle)
        except OSError as error:
            raise WtrStoreError(
                f"Failed to write licence collection to {output_path}: {error}. "
                "Check the output path and free disk space."
            ) from error
        _LOGGER.info("collection_saved", output_path=str(output_path), row_count=len(self))
        return output_path


def _select_rows(rows: list[LicenceRow], predicate: LicencePredicate) -> list[LicenceRow]:
    """Return a new list with the rows accepted by ``predicate``."""
    return [row for row in rows if predicate(row)]
