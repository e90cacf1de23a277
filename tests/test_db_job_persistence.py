"""Regression tests for guarded job enqueue SQL and job row mapping."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from job_creator.db import SQLAlchemyDatabaseHealthService, SQLAlchemyJobPersistenceService
from job_creator.domain import ConfiguredCatalog, ConnectionRecord, ResourceRequirements
from job_creator.jobs import job_build_reset_config

_RESOLVED = ResourceRequirements(cpu_request="1", cpu_limit="2", memory_request="1Gi", memory_limit="2Gi")


class _MappingResultStub:
    """Stub result wrapper for SQLAlchemy-like query responses."""

    def __init__(self, rows: list[dict]):
        """Initialize result rows.

        Args:
            rows: Row mappings returned by a query.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: This stub does not raise value errors.
        """

        self._rows = rows

    def mappings(self) -> _MappingResultStub:
        """Return self to emulate SQLAlchemy mappings chain.

        Returns:
            _MappingResultStub: This object.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        return self

    def first(self) -> dict | None:
        """Return the first row mapping or None.

        Returns:
            dict | None: First row.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        return self._rows[0] if self._rows else None

    def scalar(self) -> object:
        """Return the first column of the first row or None.

        Returns:
            object: Scalar value.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        first_row = self.first()
        if first_row is None:
            return None
        return next(iter(first_row.values()))


class _ConnectionStub:
    """Connection stub capturing executed SQL and parameters."""

    def __init__(self, rows: list[dict], error: Exception | None = None):
        """Initialize connection capture state.

        Args:
            rows: Query rows returned by execute().
            error: Optional exception raised by execute().

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: This stub does not raise value errors.
        """

        self._rows = rows
        self._error = error
        self.executed_queries: list[str] = []
        self.executed_parameters: list[dict] = []

    def __enter__(self) -> _ConnectionStub:
        return self

    def __exit__(self, exc_type, exc, traceback) -> bool:
        _ = (exc_type, exc, traceback)
        return False

    def execute(self, statement, parameters: dict | None = None) -> _MappingResultStub:
        """Capture execute input and return deterministic row result.

        Args:
            statement: SQLAlchemy text clause or raw string.
            parameters: Bound query parameters.

        Returns:
            _MappingResultStub: Query result stub.

        Raises:
            Exception: Configured error, when present.
        """

        self.executed_queries.append(getattr(statement, "text", str(statement)))
        self.executed_parameters.append(parameters or {})
        if self._error is not None:
            raise self._error
        return _MappingResultStub(rows=self._rows)


class _EngineStub:
    """Engine stub that returns a predefined connection object."""

    def __init__(self, connection: _ConnectionStub):
        self._connection = connection

    def connect(self) -> _ConnectionStub:
        return self._connection

    def begin(self) -> _ConnectionStub:
        return self._connection


def _build_job_config():
    """Build a reset job config with an empty catalog.

    Returns:
        JobConfig: Reset job configuration.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return job_build_reset_config(
        connection=ConnectionRecord(connection_id=uuid4(), catalog=ConfiguredCatalog()),
        destination_docker_image="airbyte/destination-postgres:0.4.0",
        destination_protocol_version="0.2.0",
        operations=[],
        orchestrator_resource_requirements=_RESOLVED,
        streams_to_reset=[],
        is_destination_custom_connector=False,
        workspace_id=uuid4(),
        destination_definition_version_id=uuid4(),
    )


def test_db_job_enqueue_inserts_only_when_scope_has_no_active_job() -> None:
    """Issue one guarded insert and return the new job id.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when SQL or parameters are unexpected.
    """

    connection = _ConnectionStub(rows=[{"id": 101}])
    service = SQLAlchemyJobPersistenceService(engine=_EngineStub(connection))

    job_id = service.db_job_enqueue(scope=" connection-1 ", job_config=_build_job_config())

    assert job_id == 101
    assert "pg_advisory_xact_lock" in connection.executed_queries[0]
    executed_query = connection.executed_queries[1]
    assert "INSERT INTO jobs" in executed_query
    assert "WHERE NOT EXISTS" in executed_query
    parameters = connection.executed_parameters[1]
    assert parameters["scope"] == "connection-1"
    assert parameters["status"] == "pending"
    assert parameters["config_type"] == "reset_connection"
    assert (parameters["active_1"], parameters["active_2"], parameters["active_3"]) == (
        "pending",
        "running",
        "incomplete",
    )
    assert json.loads(parameters["config"])["config_type"] == "reset_connection"


def test_db_job_enqueue_locks_on_stable_per_scope_keys() -> None:
    """Take the same advisory lock keys for one scope and different keys for another.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when lock keys are unstable or shared across scopes.
    """

    connection = _ConnectionStub(rows=[{"id": 1}])
    service = SQLAlchemyJobPersistenceService(engine=_EngineStub(connection))

    service.db_job_enqueue(scope="connection-1", job_config=_build_job_config())
    service.db_job_enqueue(scope=" connection-1", job_config=_build_job_config())
    service.db_job_enqueue(scope="connection-2", job_config=_build_job_config())

    lock_parameters = connection.executed_parameters[0::2]
    assert lock_parameters[0] == lock_parameters[1]
    assert lock_parameters[0] != lock_parameters[2]
    assert all(-(2**31) <= value < 2**31 for parameters in lock_parameters for value in parameters.values())


def test_db_job_enqueue_returns_none_when_guard_blocks_insert() -> None:
    """Return None when the guarded insert produces no row.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when a job id is returned.
    """

    service = SQLAlchemyJobPersistenceService(engine=_EngineStub(_ConnectionStub(rows=[])))

    assert service.db_job_enqueue(scope="connection-1", job_config=_build_job_config()) is None


def test_db_job_enqueue_wraps_database_errors() -> None:
    """Wrap SQLAlchemy failures in RuntimeError.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when the failure type is unexpected.
    """

    failing_connection = _ConnectionStub(rows=[], error=OperationalError("INSERT", {}, Exception("down")))
    service = SQLAlchemyJobPersistenceService(engine=_EngineStub(failing_connection))

    with pytest.raises(RuntimeError, match="failed to enqueue job"):
        service.db_job_enqueue(scope="connection-1", job_config=_build_job_config())


def test_db_job_enqueue_rejects_blank_scope() -> None:
    """Reject blank scope before touching the database.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when a blank scope is accepted.
    """

    connection = _ConnectionStub(rows=[{"id": 1}])
    service = SQLAlchemyJobPersistenceService(engine=_EngineStub(connection))

    with pytest.raises(ValueError):
        service.db_job_enqueue(scope="  ", job_config=_build_job_config())
    assert connection.executed_queries == []


def test_db_job_get_by_id_maps_row_with_text_config() -> None:
    """Map a job row whose config arrives as JSON text.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when mapping is unexpected.
    """

    timestamp = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
    connection = _ConnectionStub(
        rows=[
            {
                "id": 5,
                "scope": "connection-1",
                "config_type": "sync",
                "status": "pending",
                "config": json.dumps({"config_type": "sync"}),
                "created_at_utc": timestamp,
                "updated_at_utc": timestamp,
            }
        ]
    )
    service = SQLAlchemyJobPersistenceService(engine=_EngineStub(connection))

    job_record = service.db_job_get_by_id(5)

    assert job_record is not None
    assert job_record.job_id == 5
    assert job_record.config == {"config_type": "sync"}
    assert connection.executed_parameters[0] == {"job_id": 5}


def test_db_job_get_by_id_returns_none_when_missing() -> None:
    """Return None for an unknown job id.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when a record is returned.
    """

    service = SQLAlchemyJobPersistenceService(engine=_EngineStub(_ConnectionStub(rows=[])))

    assert service.db_job_get_by_id(404) is None


def test_db_health_reports_degraded_when_jobs_table_missing() -> None:
    """Report degraded health before migrations have created `jobs`.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when the status is unexpected.
    """

    missing_table_service = SQLAlchemyDatabaseHealthService(
        engine=_EngineStub(_ConnectionStub(rows=[{"jobs_table": None}]))
    )
    ready_service = SQLAlchemyDatabaseHealthService(engine=_EngineStub(_ConnectionStub(rows=[{"jobs_table": "jobs"}])))

    assert missing_table_service.db_check_health().status == "degraded"
    assert ready_service.db_check_health().status == "ok"
