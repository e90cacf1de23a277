"""Typed domain models shared across runtime layers.

Connection and connector definition records are read-only inputs to job
creation; they are owned by the caller for the duration of one request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID

from .catalog import ConfiguredCatalog
from .resources import ConnectorResourceRequirements, ResourceRequirements


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


class NamespaceDefinition(str, Enum):
    """Where destination namespaces come from."""

    SOURCE = "source"
    DESTINATION = "destination"
    CUSTOM_FORMAT = "customformat"


@dataclass(frozen=True)
class ConnectionRecord:
    """Connection settings consumed by job creation.

    Attributes:
        connection_id: Connection identifier, used as the job scope.
        catalog: Configured catalog of the connection.
        namespace_definition: Destination namespace policy.
        namespace_format: Optional custom namespace format.
        prefix: Optional destination stream name prefix.
        resource_requirements: Optional connection-level requirement override.
    """

    connection_id: UUID
    catalog: ConfiguredCatalog
    namespace_definition: NamespaceDefinition = NamespaceDefinition.SOURCE
    namespace_format: str | None = None
    prefix: str | None = None
    resource_requirements: ResourceRequirements | None = None


@dataclass(frozen=True)
class SourceDefinitionRecord:
    """Source connector definition attributes used for job creation.

    Attributes:
        source_definition_id: Definition identifier.
        name: Connector display name.
        source_type: Optional connector variant such as `database` or `api`.
        custom: Whether the connector is user-provided.
        resource_requirements: Optional connector-declared requirements.
    """

    source_definition_id: UUID
    name: str
    source_type: str | None = None
    custom: bool = False
    resource_requirements: ConnectorResourceRequirements | None = None


@dataclass(frozen=True)
class DestinationDefinitionRecord:
    """Destination connector definition attributes used for job creation.

    Attributes:
        destination_definition_id: Definition identifier.
        name: Connector display name.
        custom: Whether the connector is user-provided.
        resource_requirements: Optional connector-declared requirements.
    """

    destination_definition_id: UUID
    name: str
    custom: bool = False
    resource_requirements: ConnectorResourceRequirements | None = None


@dataclass(frozen=True)
class ActorDefinitionVersionRecord:
    """One released version of a connector definition.

    Attributes:
        version_id: Definition version identifier recorded on the job.
        docker_repository: Connector image repository.
        docker_image_tag: Connector image tag.
    """

    version_id: UUID
    docker_repository: str
    docker_image_tag: str


@dataclass(frozen=True)
class SyncOperation:
    """Post-sync operation attached to a connection.

    Attributes:
        operation_id: Operation identifier.
        name: Operation display name.
        operator_type: Operator kind such as `normalization` or `webhook`.
        operator_configuration: Operator-specific configuration payload.
    """

    operation_id: UUID
    name: str
    operator_type: str
    operator_configuration: dict[str, Any] = field(default_factory=dict)
