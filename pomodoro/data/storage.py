from __future__ import annotations

"""SQLite settings store: key/value JSON settings and the saved Pomodoro configuration."""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from pomodoro.core.configuration import InvalidConfigurationError, PomodoroConfiguration


SCHEMA_VERSION = 1
CONFIGURATION_KEY = "pomodoro_configuration"

logger = logging.getLogger(__name__)


class Storage:
    """Wraps the SQLite connection and transactional settings writes."""
    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA journal_mode = WAL;")
        except sqlite3.DatabaseError:
            pass
        return conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = self._connect()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Creates the settings tables on first run."""
        with self._transaction() as conn:
            conn.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER NOT NULL)")
            row = conn.execute("SELECT version FROM schema_version LIMIT 1").fetchone()
            if not row:
                conn.execute("INSERT INTO schema_version(version) VALUES (?)", (SCHEMA_VERSION,))
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS settings(
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
                """
            )
        logger.debug("Settings database ready at %s", self.db_path)

    def get_setting(self, key: str, default: Any = None) -> Any:
        with self._transaction() as conn:
            row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
        if not row:
            return default
        raw = row["value"]
        try:
            return json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            return raw

    def set_setting(self, key: str, value: Any) -> None:
        payload = json.dumps(value)
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO settings(key, value) VALUES(?, ?) ON CONFLICT(key) DO UPDATE SET value=excluded.value",
                (key, payload),
            )

    def load_configuration(self) -> PomodoroConfiguration:
        """Returns the saved configuration, or the default when none is stored or it is invalid."""
        raw = self.get_setting(CONFIGURATION_KEY)
        if not isinstance(raw, dict):
            return PomodoroConfiguration.default()
        try:
            return PomodoroConfiguration.from_dict(raw)
        except (InvalidConfigurationError, TypeError, ValueError) as exc:
            logger.warning("Ignoring stored configuration %r: %s", raw, exc)
            return PomodoroConfiguration.default()

    def save_configuration(self, configuration: PomodoroConfiguration) -> None:
        self.set_setting(CONFIGURATION_KEY, configuration.to_dict())
