"""Job layer package for job configuration assembly and submission."""

from .interfaces import (
	JobCreatorPort,
	JobPersistencePort,
	ResetConnectionJobRequest,
	ResourceRequirementsProviderPort,
	SyncJobRequest,
)
from .job_config_builder import job_build_reset_config, job_build_sync_config
from .job_creator import DefaultJobCreator
from .reset_catalog import job_reset_rewrite_catalog
from .resource_requirements import CONNECTOR_LAYER_ROLES, job_resolve_resource_requirements

__all__ = [
	"CONNECTOR_LAYER_ROLES",
	"DefaultJobCreator",
	"JobCreatorPort",
	"JobPersistencePort",
	"ResetConnectionJobRequest",
	"ResourceRequirementsProviderPort",
	"SyncJobRequest",
	"job_build_reset_config",
	"job_build_sync_config",
	"job_reset_rewrite_catalog",
	"job_resolve_resource_requirements",
]
