"""Sink manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from teamcity_listener.sinks.base import MessageSink

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class SinkManifest(Generic[ConfigT]):
    """Manifest describing a sink plugin.

    The manifest contains references to the configuration class and the
    sink factory function for lazy loading of sinks based on their key.
    """

    config_cls: type[ConfigT]
    sink_factory: Callable[[ConfigT], MessageSink]
