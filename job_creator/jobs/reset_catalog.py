"""Catalog rewrite applied to reset-connection jobs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from job_creator.domain import ConfiguredCatalog, ConfiguredStream, DestinationSyncMode, StreamIdentity, SyncMode


def job_reset_rewrite_catalog(
    catalog: ConfiguredCatalog,
    streams_to_reset: Iterable[StreamIdentity],
) -> ConfiguredCatalog:
    """Return a copy of `catalog` with reset semantics applied per stream.

    The reset source emits no records, so targeted streams are forced to
    full refresh with overwrite, which empties them in the destination.
    Streams that are not targeted must keep their data: overwrite is
    downgraded to append and every other write mode is kept.

    Targets that are not in the catalog do not appear in the result. Their
    state is still cleared by the reset source; only the destination side is
    left untouched.

    Args:
        catalog: Connection catalog. Not modified.
        streams_to_reset: Reset target stream identities.

    Returns:
        ConfiguredCatalog: Rewritten catalog in the original stream order.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    reset_targets = frozenset(streams_to_reset)
    return replace(
        catalog,
        streams=tuple(_job_reset_rewrite_stream(stream, reset_targets) for stream in catalog.streams),
    )


def _job_reset_rewrite_stream(stream: ConfiguredStream, reset_targets: frozenset[StreamIdentity]) -> ConfiguredStream:
    if stream.stream_identity() in reset_targets:
        return replace(
            stream,
            sync_mode=SyncMode.FULL_REFRESH,
            destination_sync_mode=DestinationSyncMode.OVERWRITE,
        )
    if stream.destination_sync_mode == DestinationSyncMode.OVERWRITE:
        return replace(stream, destination_sync_mode=DestinationSyncMode.APPEND)
    return stream
