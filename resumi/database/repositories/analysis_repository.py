from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from resumi.analysis.exceptions import DuplicateUniqueIdError, PersistenceError
from resumi.analysis.identifiers import require_valid_unique_id
from resumi.analysis.models import AnalysisMetadata, AnalysisRecord, SharedAnalysis
from resumi.analysis.normalizer import normalize_payload
from resumi.database.connection import get_connection

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS resume_analyses (
    id BIGSERIAL PRIMARY KEY,
    unique_id CHAR(16) NOT NULL UNIQUE,
    resume_text TEXT NOT NULL,
    analysis_data JSONB NOT NULL,
    metadata JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
)
"""


class AnalysisRepository:
    """Database operations for the resume_analyses table."""

    def ensure_schema(self) -> None:
        """Create the resume_analyses table if it does not exist yet.

        Raises:
            PersistenceError: if the database is unreachable or rejects the DDL.
        """
        try:
            with get_connection() as conn:
                conn.execute(SCHEMA_SQL)
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to create schema: {exc}") from exc

    def create(self, record: AnalysisRecord) -> AnalysisRecord:
        """Insert a new analysis and return it with its creation timestamp.

        Raises:
            DuplicateUniqueIdError: if ``record.unique_id`` is already taken.
            PersistenceError: on any other database failure.
        """
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO resume_analyses
                            (unique_id, resume_text, analysis_data, metadata)
                        VALUES (%s, %s, %s, %s)
                        RETURNING created_at
                        """,
                        (
                            record.unique_id,
                            record.resume_text,
                            Jsonb(record.analysis.to_dict()),
                            Jsonb(record.metadata.to_dict()),
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.errors.UniqueViolation as exc:
            raise DuplicateUniqueIdError(
                f"Analysis {record.unique_id} already exists"
            ) from exc
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to insert analysis: {exc}") from exc

        created_at = row[0] if row is not None else None
        return AnalysisRecord(
            unique_id=record.unique_id,
            resume_text=record.resume_text,
            analysis=record.analysis,
            metadata=record.metadata,
            created_at=created_at,
        )

    def find_by_unique_id(self, unique_id: str) -> SharedAnalysis | None:
        """Find a stored analysis by its public identifier.

        The resume text is never read back.

        Raises:
            InvalidInputError: if ``unique_id`` is malformed. No query runs.
            PersistenceError: on a database failure.
        """
        unique_id = require_valid_unique_id(unique_id)
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        """
                        SELECT unique_id, analysis_data, metadata, created_at
                        FROM resume_analyses
                        WHERE unique_id = %s
                        """,
                        (unique_id,),
                    )
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to fetch analysis: {exc}") from exc

        if row is None:
            return None
        return self._row_to_shared(row)

    @staticmethod
    def _row_to_shared(row: dict[str, Any]) -> SharedAnalysis:
        return SharedAnalysis(
            unique_id=row["unique_id"],
            analysis=normalize_payload(row["analysis_data"] or {}),
            metadata=AnalysisMetadata.from_dict(row["metadata"]),
            created_at=row["created_at"],
        )
