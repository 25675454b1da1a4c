# simlogbook/tracker/logbook.py

import csv
import logging
import os

from .data_models import Flight
from ..constants.navdata import LogbookConstants


class Logbook:
    """Appends completed flights to a CSV file."""

    def __init__(self, path: str = LogbookConstants.DEFAULT_PATH):
        self.path = path
        should_add_header = not os.path.exists(path)
        self._file = open(path, "a", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        if should_add_header:
            self._writer.writerow(LogbookConstants.CSV_HEADER)
            self._file.flush()
        logging.info(f"Logging flights to {os.path.abspath(path)}")

    def log(self, flight: Flight) -> None:
        self._writer.writerow(["" if field is None else field for field in flight.to_record()])
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
