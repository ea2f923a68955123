"""SQLAlchemy-backed key-value store for EXAMPORTAL.

Each key of a namespace is one row of the ``kv_entry`` table (see
adapters.key_value_store.schema). Several namespaces can share one database;
``clear()`` only deletes the rows of its own namespace.

Every operation runs in its own short transaction. The single-writer
precondition of the interface still applies: concurrent read-modify-write
sequences from different processes are not serialized against each other.

Exceptions:
    Maps SQLAlchemy errors to ``StoreUnavailableError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from examportal.interfaces.key_value_store import KeyValueStore, StoreUnavailableError

from .schema import kv_entry

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

__all__ = ["SqlAlchemyKeyValueStore", "DEFAULT_NAMESPACE"]

DEFAULT_NAMESPACE = "examportal"


class SqlAlchemyKeyValueStore(KeyValueStore):
    """``KeyValueStore`` persisted in a relational database.

    Args:
        engine: Engine to run statements on (see ``adapters.db.engine.make_engine``).
        namespace: Namespace whose rows this store reads and writes.
        create_schema: When True, create the ``kv_entry`` table if it is missing.
    """

    def __init__(
        self,
        engine: Engine,
        namespace: str = DEFAULT_NAMESPACE,
        *,
        create_schema: bool = True,
    ) -> None:
        self._engine = engine
        self._namespace = namespace
        if create_schema:
            kv_entry.create(engine, checkfirst=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._engine.url!r}, namespace={self._namespace!r})"

    @property
    def namespace(self) -> str:
        """Namespace this store is bound to."""
        return self._namespace

    # ---- KeyValueStore ----

    def _read(self, key: str) -> str | None:
        stmt = select(kv_entry.c.value).where(
            kv_entry.c.namespace == self._namespace, kv_entry.c.key == key
        )
        try:
            with self._engine.connect() as conn:
                return conn.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(str(e)) from e

    def _write(self, key: str, text: str) -> None:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(kv_entry)
                    .where(
                        kv_entry.c.namespace == self._namespace,
                        kv_entry.c.key == key,
                    )
                    .values(value=text)
                )
                if result.rowcount:
                    return
                next_seq = conn.execute(
                    select(func.coalesce(func.max(kv_entry.c.seq), 0) + 1).where(
                        kv_entry.c.namespace == self._namespace
                    )
                ).scalar_one()
                conn.execute(
                    insert(kv_entry).values(
                        namespace=self._namespace, key=key, value=text, seq=next_seq
                    )
                )
        except SQLAlchemyError as e:
            raise StoreUnavailableError(str(e)) from e

    def _delete(self, key: str) -> None:
        stmt = delete(kv_entry).where(
            kv_entry.c.namespace == self._namespace, kv_entry.c.key == key
        )
        self._execute(stmt)

    def _delete_all(self) -> None:
        self._execute(delete(kv_entry).where(kv_entry.c.namespace == self._namespace))

    def _list_keys(self) -> list[str]:
        stmt = (
            select(kv_entry.c.key)
            .where(kv_entry.c.namespace == self._namespace)
            .order_by(kv_entry.c.seq.asc())
        )
        try:
            with self._engine.connect() as conn:
                return list(conn.execute(stmt).scalars())
        except SQLAlchemyError as e:
            raise StoreUnavailableError(str(e)) from e

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _execute(self, stmt) -> None:  # type: ignore[no-untyped-def]
        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(str(e)) from e
