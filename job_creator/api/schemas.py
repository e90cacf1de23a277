"""Request body models for job creation surfaces.

The same models back the HTTP endpoints and the CLI request files.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_creator.domain import (
    ActorDefinitionVersionRecord,
    ConfiguredCatalog,
    ConfiguredStream,
    ConnectionRecord,
    ConnectorResourceRequirements,
    DestinationDefinitionRecord,
    DestinationSyncMode,
    JobKind,
    JobTypeResourceRequirements,
    NamespaceDefinition,
    ResourceRequirements,
    SourceDefinitionRecord,
    StreamIdentity,
    SyncMode,
    SyncOperation,
)
from job_creator.jobs import ResetConnectionJobRequest, SyncJobRequest


class _RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ResourceRequirementsBody(_RequestModel):
    """Partial resource requirements; omitted fields are inherited."""

    cpu_request: str | None = Field(default=None, examples=["0.5"])
    cpu_limit: str | None = Field(default=None, examples=["1"])
    memory_request: str | None = Field(default=None, examples=["512Mi"])
    memory_limit: str | None = Field(default=None, examples=["1Gi"])

    @field_validator("cpu_request", "cpu_limit", "memory_request", "memory_limit")
    @classmethod
    def _validate_non_blank(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank; omit the field to inherit a default")
        return stripped_value

    def api_to_domain(self) -> ResourceRequirements:
        return ResourceRequirements(
            cpu_request=self.cpu_request,
            cpu_limit=self.cpu_limit,
            memory_request=self.memory_request,
            memory_limit=self.memory_limit,
        )


class JobTypeResourceRequirementsBody(_RequestModel):
    job_kind: JobKind
    resource_requirements: ResourceRequirementsBody


class ConnectorResourceRequirementsBody(_RequestModel):
    """Connector definition requirements with optional job-kind specific entries."""

    default: ResourceRequirementsBody | None = None
    job_specific: list[JobTypeResourceRequirementsBody] = Field(default_factory=list)

    def api_to_domain(self) -> ConnectorResourceRequirements:
        return ConnectorResourceRequirements(
            default=self.default.api_to_domain() if self.default is not None else None,
            job_specific=tuple(
                JobTypeResourceRequirements(
                    job_kind=entry.job_kind,
                    resource_requirements=entry.resource_requirements.api_to_domain(),
                )
                for entry in self.job_specific
            ),
        )


class StreamIdentityBody(_RequestModel):
    name: str = Field(min_length=1)
    namespace: str | None = None

    def api_to_domain(self) -> StreamIdentity:
        return StreamIdentity(name=self.name, namespace=self.namespace)


class ConfiguredStreamBody(_RequestModel):
    name: str = Field(min_length=1)
    namespace: str | None = None
    sync_mode: SyncMode
    destination_sync_mode: DestinationSyncMode
    cursor_field: list[str] = Field(default_factory=list)
    primary_key: list[list[str]] = Field(default_factory=list)

    def api_to_domain(self) -> ConfiguredStream:
        return ConfiguredStream(
            name=self.name,
            namespace=self.namespace,
            sync_mode=self.sync_mode,
            destination_sync_mode=self.destination_sync_mode,
            cursor_field=tuple(self.cursor_field),
            primary_key=tuple(tuple(key_path) for key_path in self.primary_key),
        )


class ConnectionBody(_RequestModel):
    """Connection settings and catalog for one job request."""

    connection_id: UUID
    namespace_definition: NamespaceDefinition = NamespaceDefinition.SOURCE
    namespace_format: str | None = None
    prefix: str | None = None
    streams: list[ConfiguredStreamBody] = Field(default_factory=list)
    resource_requirements: ResourceRequirementsBody | None = None

    def api_to_domain(self) -> ConnectionRecord:
        return ConnectionRecord(
            connection_id=self.connection_id,
            catalog=ConfiguredCatalog(streams=tuple(stream.api_to_domain() for stream in self.streams)),
            namespace_definition=self.namespace_definition,
            namespace_format=self.namespace_format,
            prefix=self.prefix,
            resource_requirements=(
                self.resource_requirements.api_to_domain() if self.resource_requirements is not None else None
            ),
        )


class SourceDefinitionBody(_RequestModel):
    source_definition_id: UUID
    name: str
    source_type: str | None = Field(default=None, examples=["database", "api"])
    custom: bool = False
    resource_requirements: ConnectorResourceRequirementsBody | None = None

    def api_to_domain(self) -> SourceDefinitionRecord:
        return SourceDefinitionRecord(
            source_definition_id=self.source_definition_id,
            name=self.name,
            source_type=self.source_type,
            custom=self.custom,
            resource_requirements=(
                self.resource_requirements.api_to_domain() if self.resource_requirements is not None else None
            ),
        )


class DestinationDefinitionBody(_RequestModel):
    destination_definition_id: UUID
    name: str
    custom: bool = False
    resource_requirements: ConnectorResourceRequirementsBody | None = None

    def api_to_domain(self) -> DestinationDefinitionRecord:
        return DestinationDefinitionRecord(
            destination_definition_id=self.destination_definition_id,
            name=self.name,
            custom=self.custom,
            resource_requirements=(
                self.resource_requirements.api_to_domain() if self.resource_requirements is not None else None
            ),
        )


class DefinitionVersionBody(_RequestModel):
    version_id: UUID
    docker_repository: str
    docker_image_tag: str

    def api_to_domain(self) -> ActorDefinitionVersionRecord:
        return ActorDefinitionVersionRecord(
            version_id=self.version_id,
            docker_repository=self.docker_repository,
            docker_image_tag=self.docker_image_tag,
        )


class SyncOperationBody(_RequestModel):
    operation_id: UUID
    name: str
    operator_type: str
    operator_configuration: dict[str, Any] = Field(default_factory=dict)

    def api_to_domain(self) -> SyncOperation:
        return SyncOperation(
            operation_id=self.operation_id,
            name=self.name,
            operator_type=self.operator_type,
            operator_configuration=dict(self.operator_configuration),
        )


class SyncJobRequestBody(_RequestModel):
    """Body of a sync job creation request."""

    connection: ConnectionBody
    source_docker_image: str = Field(min_length=1)
    source_protocol_version: str = Field(min_length=1)
    destination_docker_image: str = Field(min_length=1)
    destination_protocol_version: str = Field(min_length=1)
    operations: list[SyncOperationBody] = Field(default_factory=list)
    webhook_operation_configs: dict[str, Any] | None = None
    source_definition: SourceDefinitionBody
    destination_definition: DestinationDefinitionBody
    source_definition_version: DefinitionVersionBody
    destination_definition_version: DefinitionVersionBody
    workspace_id: UUID

    def api_to_domain(self) -> SyncJobRequest:
        """Map the body onto the job-layer request record.

        Returns:
            SyncJobRequest: Domain request for the job creator.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return SyncJobRequest(
            connection=self.connection.api_to_domain(),
            source_docker_image=self.source_docker_image,
            source_protocol_version=self.source_protocol_version,
            destination_docker_image=self.destination_docker_image,
            destination_protocol_version=self.destination_protocol_version,
            operations=tuple(operation.api_to_domain() for operation in self.operations),
            webhook_operation_configs=self.webhook_operation_configs,
            source_definition=self.source_definition.api_to_domain(),
            destination_definition=self.destination_definition.api_to_domain(),
            source_definition_version=self.source_definition_version.api_to_domain(),
            destination_definition_version=self.destination_definition_version.api_to_domain(),
            workspace_id=self.workspace_id,
        )


class ResetJobRequestBody(_RequestModel):
    """Body of a reset-connection job creation request."""

    connection: ConnectionBody
    destination_definition_version: DefinitionVersionBody
    destination_docker_image: str = Field(min_length=1)
    destination_protocol_version: str = Field(min_length=1)
    is_destination_custom_connector: bool = False
    operations: list[SyncOperationBody] = Field(default_factory=list)
    streams_to_reset: list[StreamIdentityBody] = Field(default_factory=list)
    workspace_id: UUID

    def api_to_domain(self) -> ResetConnectionJobRequest:
        """Map the body onto the job-layer request record.

        Returns:
            ResetConnectionJobRequest: Domain request for the job creator.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return ResetConnectionJobRequest(
            connection=self.connection.api_to_domain(),
            destination_definition_version=self.destination_definition_version.api_to_domain(),
            destination_docker_image=self.destination_docker_image,
            destination_protocol_version=self.destination_protocol_version,
            is_destination_custom_connector=self.is_destination_custom_connector,
            operations=tuple(operation.api_to_domain() for operation in self.operations),
            streams_to_reset=tuple(stream.api_to_domain() for stream in self.streams_to_reset),
            workspace_id=self.workspace_id,
        )
