"""SQLite brain implementation."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import aiosqlite

from ..config import resolve_db_path
from ..errors import BrainNotInitializedError
from ..models import TraceEvent
from .brain import new_user_attributes


class SqliteBrain:
    """Brain persisted in SQLite. Attribute values are stored as JSON."""

    def __init__(self, db_path: str | Path | None = None):
        if db_path is None:
            self._db_path = resolve_db_path()
        else:
            self._db_path = resolve_db_path(db_path)
        self._conn: aiosqlite.Connection | None = None

    async def init(self) -> None:
        """Open the database and create tables."""
        self._conn = await aiosqlite.connect(self._db_path)

        schema_path = Path(__file__).parent / "schema.sql"
        with open(schema_path, "r", encoding="utf-8") as f:
            schema_sql = f.read()
        await self._conn.executescript(schema_sql)
        await self._conn.commit()

    async def close(self) -> None:
        """Close database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    def _require_conn(self) -> aiosqlite.Connection:
        if not self._conn:
            raise BrainNotInitializedError()
        return self._conn

    # Users
    async def has_user(self, user_id: str) -> bool:
        conn = self._require_conn()
        cursor = await conn.execute("SELECT 1 FROM users WHERE id = ?", (user_id,))
        return await cursor.fetchone() is not None

    async def add_user(self, user_id: str) -> None:
        """Create the user with default attributes; existing values are kept."""
        conn = self._require_conn()
        attributes = new_user_attributes()

        await conn.execute(
            "INSERT OR IGNORE INTO users (id, created_at) VALUES (?, ?)",
            (user_id, attributes["created_at"]),
        )
        await conn.executemany(
            """
            INSERT OR IGNORE INTO user_attributes (user_id, key, value)
            VALUES (?, ?, ?)
            """,
            [(user_id, key, json.dumps(value)) for key, value in attributes.items()],
        )
        await conn.commit()

    async def init_user_if_necessary(self, user_id: str) -> None:
        if not await self.has_user(user_id):
            await self.add_user(user_id)

    async def get_user(self, user_id: str) -> dict | None:
        conn = self._require_conn()
        if not await self.has_user(user_id):
            return None

        cursor = await conn.execute(
            "SELECT key, value FROM user_attributes WHERE user_id = ?",
            (user_id,),
        )
        rows = await cursor.fetchall()
        return {row[0]: json.loads(row[1]) for row in rows}

    # Attributes
    async def user_get(self, user_id: str, key: str) -> Any:
        conn = self._require_conn()
        cursor = await conn.execute(
            "SELECT value FROM user_attributes WHERE user_id = ? AND key = ?",
            (user_id, key),
        )
        row = await cursor.fetchone()
        if not row:
            return None
        return json.loads(row[0])

    async def user_set(self, user_id: str, key: str, value: Any) -> None:
        conn = self._require_conn()
        await conn.execute(
            """
            INSERT OR IGNORE INTO users (id, created_at) VALUES (?, ?)
            """,
            (user_id, datetime.now(timezone.utc).isoformat()),
        )
        await conn.execute(
            """
            INSERT OR REPLACE INTO user_attributes (user_id, key, value, updated_at)
            VALUES (?, ?, ?, CURRENT_TIMESTAMP)
            """,
            (user_id, key, json.dumps(value)),
        )
        await conn.commit()

    # TraceEvents
    async def save_trace_event(self, event: TraceEvent) -> None:
        """Save a trace event."""
        conn = self._require_conn()
        await conn.execute(
            """
            INSERT INTO trace_events (id, event_type, actor, data, timestamp)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                event.id or str(uuid.uuid4()),
                event.event_type,
                event.actor,
                json.dumps(event.data),
                event.timestamp.isoformat(),
            ),
        )
        await conn.commit()

    async def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get trace events with optional filters (newest first)."""
        conn = self._require_conn()

        conditions = []
        params: list[Any] = []

        if after:
            if after.tzinfo is None:
                after = after.replace(tzinfo=timezone.utc)
            conditions.append("timestamp > ?")
            params.append(after.astimezone(timezone.utc).isoformat())
        if event_types:
            placeholders = ",".join("?" * len(event_types))
            conditions.append(f"event_type IN ({placeholders})")
            params.extend(event_types)
        if actor:
            conditions.append("actor = ?")
            params.append(actor)

        where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""

        query = f"""
            SELECT id, event_type, actor, data, timestamp
            FROM trace_events
            {where_clause}
            ORDER BY timestamp DESC
            LIMIT ?
        """
        params.append(limit)

        cursor = await conn.execute(query, params)
        rows = await cursor.fetchall()

        return [
            TraceEvent(
                id=row[0],
                event_type=row[1],
                actor=row[2],
                data=json.loads(row[3]),
                timestamp=datetime.fromisoformat(row[4]),
            )
            for row in rows
        ]

    # Lifecycle
    async def clean(self) -> None:
        """Drop all users and events."""
        conn = self._require_conn()
        for table in ["user_attributes", "users", "trace_events"]:
            await conn.execute(f"DELETE FROM {table}")
        await conn.commit()
