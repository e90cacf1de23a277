"""Database health service for jobs database connectivity and schema checks."""

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from job_creator.domain import HealthStatus

from .interfaces import DatabaseHealthPort


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Report whether the jobs database is reachable and migrated."""

    def __init__(self, engine: Engine):
        """Initialize database health service.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_connection_label(self) -> str:
        """Return the target database URL with the password masked.

        Returns:
            str: Rendered engine URL string.

        Raises:
            RuntimeError: Raised if URL rendering fails.
        """

        return self._engine.url.render_as_string(hide_password=True)

    def db_check_health(self) -> HealthStatus:
        """Verify connectivity and presence of the `jobs` table.

        Returns:
            HealthStatus: `ok` when the table exists, `degraded` when migrations are pending.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._engine.connect() as connection:
                jobs_table = connection.execute(text("SELECT to_regclass('public.jobs') AS jobs_table")).scalar()
        except SQLAlchemyError as error:
            raise ConnectionError("database connectivity check failed") from error

        if jobs_table is None:
            return HealthStatus(status="degraded", detail="jobs table missing; run alembic upgrade head")
        return HealthStatus(status="ok", detail="database connectivity and jobs schema verified")
