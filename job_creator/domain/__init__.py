"""Domain models used across application layer boundaries."""

from .catalog import ConfiguredCatalog, ConfiguredStream, DestinationSyncMode, StreamIdentity, SyncMode
from .job_config import (
	JobConfig,
	JobResetConnectionConfig,
	JobSyncConfig,
	ResetSourceConfiguration,
	domain_job_config_to_payload,
)
from .models import (
	ActorDefinitionVersionRecord,
	ConnectionRecord,
	DestinationDefinitionRecord,
	HealthStatus,
	NamespaceDefinition,
	SourceDefinitionRecord,
	SyncOperation,
)
from .resources import (
	RESOURCE_REQUIREMENT_FIELDS,
	ConnectorResourceRequirements,
	JobKind,
	JobTypeResourceRequirements,
	ResourceRequirements,
	ResourceRole,
	domain_resource_requirements_merge,
)

__all__ = [
	"ActorDefinitionVersionRecord",
	"ConfiguredCatalog",
	"ConfiguredStream",
	"ConnectionRecord",
	"ConnectorResourceRequirements",
	"DestinationDefinitionRecord",
	"DestinationSyncMode",
	"HealthStatus",
	"JobConfig",
	"JobKind",
	"JobResetConnectionConfig",
	"JobSyncConfig",
	"JobTypeResourceRequirements",
	"NamespaceDefinition",
	"RESOURCE_REQUIREMENT_FIELDS",
	"ResetSourceConfiguration",
	"ResourceRequirements",
	"ResourceRole",
	"SourceDefinitionRecord",
	"StreamIdentity",
	"SyncMode",
	"SyncOperation",
	"domain_job_config_to_payload",
	"domain_resource_requirements_merge",
]
