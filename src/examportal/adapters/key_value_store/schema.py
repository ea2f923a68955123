"""Key-value store schema.

Defines the ``kv_entry`` table used by the SQL-backed key-value store. Each
row is one key of one namespace; ``value`` holds the JSON text exactly as the
store serialized it.

| Constraint                  | Purpose                                    |
|-----------------------------|--------------------------------------------|
| PRIMARY KEY(namespace, key) | one value per key and namespace            |
| INDEX(namespace, seq)       | insertion-ordered key listing per namespace |

``seq`` is assigned when a key is first written and kept on overwrite, so key
listings follow first-insertion order like the other backends.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, String, Table, Text

from examportal.adapters.db.metadata import metadata

__all__ = ["kv_entry"]

kv_entry = Table(
    "kv_entry",
    metadata,
    Column(
        "namespace",
        String(100),
        primary_key=True,
        comment="Logical store namespace; clear() only touches its own rows.",
    ),
    Column(
        "key",
        String(200),
        primary_key=True,
        comment="Key within the namespace.",
    ),
    Column(
        "value",
        Text,
        nullable=False,
        comment="JSON text of the stored value.",
    ),
    Column(
        "seq",
        Integer,
        nullable=False,
        comment="First-insertion order within the namespace.",
    ),
    Index("ix_kv_entry_namespace_seq", "namespace", "seq"),
)
