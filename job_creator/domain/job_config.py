"""Job configuration union handed to the persistence layer.

A `JobConfig` is assembled in one step from fully resolved inputs and is
never modified afterwards.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any
from uuid import UUID

from .catalog import ConfiguredCatalog, StreamIdentity
from .models import NamespaceDefinition, SyncOperation
from .resources import JobKind, ResourceRequirements


@dataclass(frozen=True)
class JobSyncConfig:
    """Payload of a sync job.

    Attributes:
        namespace_definition: Destination namespace policy.
        namespace_format: Optional custom namespace format.
        prefix: Optional destination stream name prefix.
        source_docker_image: Source connector image reference.
        source_protocol_version: Protocol version spoken by the source.
        destination_docker_image: Destination connector image reference.
        destination_protocol_version: Protocol version spoken by the destination.
        operation_sequence: Post-sync operations in execution order.
        webhook_operation_configs: Optional webhook operation configuration.
        configured_catalog: Catalog passed through from the connection.
        resource_requirements: Resolved orchestrator requirements.
        source_resource_requirements: Resolved source requirements.
        destination_resource_requirements: Resolved destination requirements.
        is_source_custom_connector: Whether the source is a custom connector.
        is_destination_custom_connector: Whether the destination is a custom connector.
        workspace_id: Owning workspace identifier.
        source_definition_version_id: Source definition version identifier.
        destination_definition_version_id: Destination definition version identifier.
    """

    namespace_definition: NamespaceDefinition
    namespace_format: str | None
    prefix: str | None
    source_docker_image: str
    source_protocol_version: str
    destination_docker_image: str
    destination_protocol_version: str
    operation_sequence: tuple[SyncOperation, ...]
    webhook_operation_configs: dict[str, Any] | None
    configured_catalog: ConfiguredCatalog
    resource_requirements: ResourceRequirements
    source_resource_requirements: ResourceRequirements
    destination_resource_requirements: ResourceRequirements
    is_source_custom_connector: bool
    is_destination_custom_connector: bool
    workspace_id: UUID
    source_definition_version_id: UUID
    destination_definition_version_id: UUID


@dataclass(frozen=True)
class ResetSourceConfiguration:
    """Streams whose state the reset source clears.

    Attributes:
        streams_to_reset: Reset target streams, including ones absent from the catalog.
    """

    streams_to_reset: tuple[StreamIdentity, ...]


@dataclass(frozen=True)
class JobResetConnectionConfig:
    """Payload of a reset-connection job.

    No source connector runs during a reset, so only orchestrator
    requirements and destination connector fields are carried.

    Attributes:
        namespace_definition: Destination namespace policy.
        namespace_format: Optional custom namespace format.
        prefix: Optional destination stream name prefix.
        destination_docker_image: Destination connector image reference.
        destination_protocol_version: Protocol version spoken by the destination.
        operation_sequence: Post-sync operations in execution order.
        configured_catalog: Catalog rewritten for reset semantics.
        resource_requirements: Resolved orchestrator requirements.
        reset_source_configuration: Reset target streams.
        is_source_custom_connector: Always False for reset jobs.
        is_destination_custom_connector: Whether the destination is a custom connector.
        workspace_id: Owning workspace identifier.
        destination_definition_version_id: Destination definition version identifier.
    """

    namespace_definition: NamespaceDefinition
    namespace_format: str | None
    prefix: str | None
    destination_docker_image: str
    destination_protocol_version: str
    operation_sequence: tuple[SyncOperation, ...]
    configured_catalog: ConfiguredCatalog
    resource_requirements: ResourceRequirements
    reset_source_configuration: ResetSourceConfiguration
    is_source_custom_connector: bool
    is_destination_custom_connector: bool
    workspace_id: UUID
    destination_definition_version_id: UUID


@dataclass(frozen=True)
class JobConfig:
    """Tagged union over job kinds.

    Attributes:
        config_type: Job kind discriminator.
        sync: Sync payload, set only for `JobKind.SYNC`.
        reset_connection: Reset payload, set only for `JobKind.RESET_CONNECTION`.
    """

    config_type: JobKind
    sync: JobSyncConfig | None = None
    reset_connection: JobResetConnectionConfig | None = None

    def __post_init__(self) -> None:
        """Validate that exactly the payload matching `config_type` is set.

        Returns:
            None: Validation only.

        Raises:
            ValueError: Raised when the payload does not match the discriminator.
        """

        if self.config_type == JobKind.SYNC:
            if self.sync is None or self.reset_connection is not None:
                raise ValueError("sync job config requires only the sync payload")
        elif self.config_type == JobKind.RESET_CONNECTION:
            if self.reset_connection is None or self.sync is not None:
                raise ValueError("reset_connection job config requires only the reset_connection payload")
        else:
            raise ValueError(f"unsupported config_type={self.config_type}")


def domain_job_config_to_payload(job_config: JobConfig) -> dict[str, Any]:
    """Render a job config union as a JSON-compatible mapping.

    Args:
        job_config: Assembled job configuration.

    Returns:
        dict[str, Any]: Mapping keyed by `config_type` and the populated payload name.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    payload: dict[str, Any] = {"config_type": job_config.config_type.value}
    if job_config.sync is not None:
        payload["sync"] = _domain_to_json_value(asdict(job_config.sync))
    if job_config.reset_connection is not None:
        payload["reset_connection"] = _domain_to_json_value(asdict(job_config.reset_connection))
    return payload


def _domain_to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, dict):
        return {str(key): _domain_to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_domain_to_json_value(item) for item in value]
    return value
