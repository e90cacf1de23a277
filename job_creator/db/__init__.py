"""Database layer package for all SQL and persistence boundaries."""

from .health import SQLAlchemyDatabaseHealthService
from .interfaces import (
	JOB_NON_TERMINAL_STATUSES,
	JOB_STATUS_PENDING,
	DatabaseHealthPort,
	JobRecord,
	JobRepositoryPort,
)
from .job_persistence import SQLAlchemyJobPersistenceService
from .session import db_create_engine

__all__ = [
	"DatabaseHealthPort",
	"JOB_NON_TERMINAL_STATUSES",
	"JOB_STATUS_PENDING",
	"JobRecord",
	"JobRepositoryPort",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyJobPersistenceService",
	"db_create_engine",
]
