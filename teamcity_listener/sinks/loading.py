"""Lookup and construction of sinks registered as entry points."""

import logging
from collections.abc import Mapping
from importlib.metadata import entry_points
from typing import Any

from teamcity_listener.sinks.base import MessageSink
from teamcity_listener.sinks.manifest import SinkManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "teamcity_listener.sinks"


class SinkNotFoundError(Exception):
    """No sink is registered under the requested key."""

    def __init__(self, key: str, available: list[str]) -> None:
        self.key = key
        self.available = available
        super().__init__(
            f"Sink '{key}' not found. Available sinks: {', '.join(available) or 'none'}"
        )


def available_sinks() -> list[str]:
    """Keys of every installed sink, sorted."""
    return sorted({entry.name for entry in entry_points(group=ENTRY_POINT_GROUP)})


def load_sink_manifest(key: str) -> SinkManifest[Any]:
    """Load the manifest registered under ``key`` in the sink entry point group.

    Raises:
        SinkNotFoundError: If no installed distribution registers ``key``

    """
    matches = entry_points(group=ENTRY_POINT_GROUP, name=key)
    if not matches:
        raise SinkNotFoundError(key, available_sinks())

    entry = next(iter(matches))
    log.debug("Loading sink %s from %s", key, entry.value)
    manifest: SinkManifest[Any] = entry.load()
    return manifest


def build_sink(key: str, config: Mapping[str, Any]) -> MessageSink:
    """Validate ``config`` against the sink's config model and create the sink.

    Raises:
        SinkNotFoundError: If no sink is registered under ``key``
        pydantic.ValidationError: If ``config`` does not match the config model

    """
    manifest = load_sink_manifest(key)
    return manifest.sink_factory(manifest.config_cls.model_validate(config))
