# telemetry/controller.py
import logging
from typing import Callable, List, Optional, Sequence

from telemetry.ingest import load_records
from telemetry.model import Record
from telemetry.series import SeriesCollection, build, clamp_granularity

logger = logging.getLogger(__name__)

Listener = Callable[[SeriesCollection], None]


class SeriesController:
    """
    Holds the loaded records and the granularity, and rebuilds the series
    collection whenever either changes.

    Every listener is called with the new collection, synchronously and in
    registration order, after each rebuild.
    """

    def __init__(self, on_update: Optional[Listener] = None, settings=None):
        self.settings = settings
        self._records: List[Record] = []
        self._granularity = 0
        self._listeners: List[Listener] = []
        self.collection = build(self._records, self._granularity)

        if on_update is not None:
            self.add_listener(on_update)

    @property
    def records(self) -> List[Record]:
        return self._records

    @property
    def granularity(self) -> int:
        return self._granularity

    def add_listener(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def set_records(self, records: Sequence[Record]) -> None:
        self._records = list(records)
        self._rebuild()

    def set_granularity(self, value: int) -> None:
        value = clamp_granularity(value)
        if value == self._granularity:
            return
        self._granularity = value
        self._rebuild()

    def load(self, path) -> int:
        """
        Ingest a CSV file and rebuild. Returns the number of rows loaded.

        OSError from opening the file propagates; the current records are
        kept in that case.
        """
        records = load_records(path, self.settings)
        self.set_records(records)
        return len(records)

    def clear(self) -> None:
        self.set_records([])

    def _rebuild(self) -> None:
        self.collection = build(self._records, self._granularity)
        logger.debug(
            f"Rebuilt series: {len(self._records)} rows, granularity {self._granularity}, "
            f"{len(self.collection)} points"
        )
        for callback in self._listeners:
            callback(self.collection)
