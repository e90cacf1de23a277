"""Database service for job enqueueing with one active job per scope."""

from __future__ import annotations

import hashlib
import json
from typing import Any

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from job_creator.domain import JobConfig, domain_job_config_to_payload

from .interfaces import JOB_NON_TERMINAL_STATUSES, JOB_STATUS_PENDING, JobRecord, JobRepositoryPort

_JOB_SCOPE_LOCK_SQL = text("SELECT pg_advisory_xact_lock(:key_1, :key_2)")

_JOB_ENQUEUE_SQL = text(
    "INSERT INTO jobs (config_type, scope, status, config, created_at_utc, updated_at_utc) "
    "SELECT :config_type, :scope, :status, CAST(:config AS jsonb), now(), now() "
    "WHERE NOT EXISTS ("
    "SELECT 1 FROM jobs WHERE scope = :scope AND status IN (:active_1, :active_2, :active_3)"
    ") "
    "RETURNING id"
)

_JOB_SELECT_BY_ID_SQL = text(
    "SELECT id, scope, config_type, status, config, created_at_utc, updated_at_utc "
    "FROM jobs "
    "WHERE id = :job_id"
)


class SQLAlchemyJobPersistenceService(JobRepositoryPort):
    """SQLAlchemy-backed job persistence service.

    A job is only inserted when its scope has no job in a non-terminal
    status. Enqueues for one scope are serialized by a transaction-scoped
    advisory lock, and a partial unique index on active scopes backs it up.
    """

    def __init__(self, engine: Engine):
        """Initialize job persistence service.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Returns:
            None: This initializer does not return a value.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_job_enqueue(self, scope: str, job_config: JobConfig) -> int | None:
        """Insert one pending job unless the scope already has a non-terminal job.

        Args:
            scope: Scope key, the connection identifier.
            job_config: Assembled job configuration.

        Returns:
            int | None: New job id, or None when a non-terminal job exists.

        Raises:
            ValueError: Raised when scope is blank.
            RuntimeError: Raised when persistence fails.
        """

        normalized_scope = scope.strip()
        if not normalized_scope:
            raise ValueError("scope must not be blank")

        advisory_key_1, advisory_key_2 = self._build_advisory_lock_keys(normalized_scope)
        active_1, active_2, active_3 = JOB_NON_TERMINAL_STATUSES
        try:
            with self._engine.begin() as connection:
                # Blocks until a concurrent enqueue for the scope commits, so the
                # guard below reads a snapshot that includes its row.
                connection.execute(_JOB_SCOPE_LOCK_SQL, {"key_1": advisory_key_1, "key_2": advisory_key_2})
                created_row = connection.execute(
                    _JOB_ENQUEUE_SQL,
                    {
                        "config_type": job_config.config_type.value,
                        "scope": normalized_scope,
                        "status": JOB_STATUS_PENDING,
                        "config": json.dumps(domain_job_config_to_payload(job_config), sort_keys=True),
                        "active_1": active_1,
                        "active_2": active_2,
                        "active_3": active_3,
                    },
                ).mappings().first()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to enqueue job") from error

        if created_row is None:
            return None
        return int(created_row["id"])

    def db_job_get_by_id(self, job_id: int) -> JobRecord | None:
        """Fetch one job by id.

        Args:
            job_id: Job identifier.

        Returns:
            JobRecord | None: Matching job or None.

        Raises:
            RuntimeError: Raised when database read fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(_JOB_SELECT_BY_ID_SQL, {"job_id": job_id}).mappings().first()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to fetch job by id") from error

        if row is None:
            return None
        return self._map_job_record(row)

    def _build_advisory_lock_keys(self, scope: str) -> tuple[int, int]:
        """Create deterministic advisory lock keys for one enqueue scope.

        Args:
            scope: Normalized scope key.

        Returns:
            tuple[int, int]: Two signed int32 lock keys for PostgreSQL advisory lock.

        Raises:
            ValueError: This helper does not raise value errors.
        """

        digest = hashlib.sha256(scope.encode("utf-8")).digest()
        key_1 = int.from_bytes(digest[0:4], byteorder="big", signed=True)
        key_2 = int.from_bytes(digest[4:8], byteorder="big", signed=True)
        return key_1, key_2

    def _map_job_record(self, row: Any) -> JobRecord:
        """Map SQLAlchemy row mapping to typed job record.

        Args:
            row: SQLAlchemy mapping row.

        Returns:
            JobRecord: Typed job record.

        Raises:
            TypeError: Raised when the stored config is not a JSON object.
        """

        config_value = row["config"]
        if isinstance(config_value, str):
            config_value = json.loads(config_value)
        if not isinstance(config_value, dict):
            raise TypeError("jobs.config must be a JSON object")

        return JobRecord(
            job_id=int(row["id"]),
            scope=row["scope"],
            config_type=row["config_type"],
            status=row["status"],
            config=config_value,
            created_at_utc=row["created_at_utc"],
            updated_at_utc=row["updated_at_utc"],
        )
