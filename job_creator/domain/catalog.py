"""Configured catalog contracts shared by job assembly and persistence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SyncMode(str, Enum):
    """Read mode of a configured stream."""

    FULL_REFRESH = "full_refresh"
    INCREMENTAL = "incremental"


class DestinationSyncMode(str, Enum):
    """Destination write mode of a configured stream."""

    APPEND = "append"
    OVERWRITE = "overwrite"
    APPEND_DEDUP = "append_dedup"


@dataclass(frozen=True)
class StreamIdentity:
    """Namespace-qualified stream name used as a set-membership key.

    Attributes:
        name: Stream name.
        namespace: Optional stream namespace.
    """

    name: str
    namespace: str | None = None


@dataclass(frozen=True)
class ConfiguredStream:
    """One catalog entry with its read and write modes.

    Attributes:
        name: Stream name.
        namespace: Optional stream namespace.
        sync_mode: Read mode.
        destination_sync_mode: Destination write mode.
        cursor_field: Cursor path for incremental reads.
        primary_key: Primary key paths used for deduplication.
    """

    name: str
    sync_mode: SyncMode
    destination_sync_mode: DestinationSyncMode
    namespace: str | None = None
    cursor_field: tuple[str, ...] = ()
    primary_key: tuple[tuple[str, ...], ...] = ()

    def stream_identity(self) -> StreamIdentity:
        """Return the identity of this stream.

        Returns:
            StreamIdentity: Namespace and name pair.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return StreamIdentity(name=self.name, namespace=self.namespace)


@dataclass(frozen=True)
class ConfiguredCatalog:
    """Ordered set of configured streams for one connection.

    Attributes:
        streams: Configured streams in connection order.
    """

    streams: tuple[ConfiguredStream, ...] = ()
