import json
import os
import tempfile
from datetime import datetime, timedelta, timezone

from models.operation import OperationRecord
from modules.config import logger

DEFAULT_RETENTION = timedelta(days=30)


def utc_now():
    return datetime.now(timezone.utc)


class HistoryError(Exception):
    pass


class HistoryReadError(HistoryError):
    pass


class HistoryWriteError(HistoryError):
    """The transaction went through on-chain but its record could not be saved."""

    def __init__(self, record, error):
        super().__init__(f"Failed to save {record.tx_hash}: {error}")
        self.record = record


class HistoryPruneError(HistoryError):
    """The stale log was dropped in memory but the file still holds it."""


class HistoryStore:
    """
    Append-only log of confirmed wrap/unwrap transactions.

    Records are kept in completion order, index 0 is always the oldest one.
    Once the oldest record is older than `retention` the whole log is
    dropped; that check runs on every count, not on a timer.
    """

    def __init__(self, records=None, retention=DEFAULT_RETENTION, now=utc_now):
        self.records = list(records or [])
        self.retention = retention
        self.now = now

    def __len__(self):
        return len(self.records)

    def save(self):
        """Persists the whole log. The in-memory store has nothing to do."""

    def append(self, record: OperationRecord):
        self.records.append(record)

        try:
            self.save()
        except OSError as error:
            raise HistoryWriteError(record, error) from error

    def prune_if_stale(self, staleness=None) -> bool:
        if not self.records:
            return False

        if staleness is None:
            staleness = self.retention

        oldest = self.records[0]

        if self.now() - oldest.timestamp <= staleness:
            return False

        logger.info(
            f"History is older than {staleness.days} days, clearing {len(self.records)} record(s)"
        )
        self.records = []

        try:
            self.save()
        except OSError as error:
            raise HistoryPruneError(f"Failed to save pruned history: {error}") from error
        return True

    def count_within(self, window: timedelta, account=None) -> int:
        try:
            self.prune_if_stale()
        except HistoryPruneError as error:
            logger.critical(error)

        now = self.now()
        cutoff = now - window

        return sum(
            1
            for record in self.records
            if cutoff <= record.timestamp <= now
            and (account is None or record.account == account)
        )


class JsonHistoryStore(HistoryStore):
    """History kept as a JSON array, rewritten in full on every change."""

    def __init__(self, path, retention=DEFAULT_RETENTION, now=utc_now):
        self.path = path
        super().__init__(self.load(path), retention=retention, now=now)

    @staticmethod
    def load(path):
        if not os.path.exists(path):
            return []

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return [OperationRecord.from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as error:
            raise HistoryReadError(f"Can't read history from {path}: {error}") from error

    def save(self):
        directory = os.path.dirname(self.path) or "."
        os.makedirs(directory, exist_ok=True)

        payload = [record.to_dict() for record in self.records]
        fd, tmp_path = tempfile.mkstemp(prefix=".history-", suffix=".tmp", dir=directory)

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
