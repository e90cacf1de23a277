"""Typed interfaces for database-layer services.

All SQL access must remain in the db package and its submodules.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Final, Protocol

from job_creator.domain import HealthStatus, JobConfig

JOB_STATUS_PENDING: Final[str] = "pending"
JOB_NON_TERMINAL_STATUSES: Final[tuple[str, ...]] = ("pending", "running", "incomplete")


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


@dataclass(frozen=True)
class JobRecord:
    """Persistence model for one job row.

    Attributes:
        job_id: Job identifier.
        scope: Scope key, the connection identifier.
        config_type: Job kind value (`sync`, `reset_connection`).
        status: Job status.
        config: Stored job configuration payload.
        created_at_utc: Row creation timestamp in UTC.
        updated_at_utc: Last status change timestamp in UTC.
    """

    job_id: int
    scope: str
    config_type: str
    status: str
    config: dict[str, Any]
    created_at_utc: datetime
    updated_at_utc: datetime


class JobRepositoryPort(Protocol):
    """Port definition for job enqueue and lookup persistence."""

    def db_job_enqueue(self, scope: str, job_config: JobConfig) -> int | None:
        """Insert one pending job unless the scope already has a non-terminal job.

        Args:
            scope: Scope key, the connection identifier.
            job_config: Assembled job configuration.

        Returns:
            int | None: New job id, or None when a non-terminal job exists.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def db_job_get_by_id(self, job_id: int) -> JobRecord | None:
        """Fetch one job by id.

        Args:
            job_id: Job identifier.

        Returns:
            JobRecord | None: Matching job or None.

        Raises:
            RuntimeError: Raised when database read fails.
        """
