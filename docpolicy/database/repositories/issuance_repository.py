from psycopg import sql
from psycopg.rows import dict_row

from docpolicy.database.connection import get_connection
from docpolicy.issuance.base import BaseIssuanceStore
from docpolicy.issuance.models import IssuanceRecord


class IssuanceRepository(BaseIssuanceStore):
    """PostgreSQL-backed issuance counters.

    Increments are a single upsert, so concurrent issuances of one
    document from different processes never read the same count.
    """

    def __init__(self, table: str = "document_issuance_counts") -> None:
        self._table = sql.Identifier(table)

    def ensure_schema(self) -> None:
        """Create the counter table if it does not exist."""
        with get_connection() as conn:
            conn.execute(
                sql.SQL(
                    """
                    CREATE TABLE IF NOT EXISTS {table} (
                        document_id TEXT PRIMARY KEY,
                        issuance_count INTEGER NOT NULL CHECK (issuance_count > 0),
                        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                    )
                    """
                ).format(table=self._table)
            )
            conn.commit()

    def increment(self, document_id: str) -> int:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    sql.SQL(
                        """
                        INSERT INTO {table} AS c (document_id, issuance_count)
                        VALUES (%s, 1)
                        ON CONFLICT (document_id) DO UPDATE
                        SET issuance_count = c.issuance_count + 1, updated_at = NOW()
                        RETURNING issuance_count
                        """
                    ).format(table=self._table),
                    (document_id,),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError(f"Issuance upsert returned no row for {document_id}")
        return int(row[0])

    def remove(self, document_id: str) -> None:
        with get_connection() as conn:
            conn.execute(
                sql.SQL("DELETE FROM {table} WHERE document_id = %s").format(
                    table=self._table
                ),
                (document_id,),
            )
            conn.commit()

    def get(self, document_id: str) -> int:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    sql.SQL(
                        "SELECT issuance_count FROM {table} WHERE document_id = %s"
                    ).format(table=self._table),
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            return 0
        return int(row[0])

    def snapshot(self) -> list[IssuanceRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    sql.SQL(
                        """
                        SELECT document_id, issuance_count
                        FROM {table}
                        ORDER BY document_id
                        """
                    ).format(table=self._table)
                )
                rows = cur.fetchall()

        return [
            IssuanceRecord(document_id=row["document_id"], count=row["issuance_count"])
            for row in rows
        ]
