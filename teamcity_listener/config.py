"""Configuration for the step listener."""

import os
from collections.abc import Mapping

from pydantic import BaseModel

FLOW_ID_ENV_VAR = "TEAMCITY_FLOW_ID"


class ListenerConfig(BaseModel):
    """Configuration for TeamCityStepListener."""

    # Attached to every message so TeamCity can tell concurrent flows apart
    flow_id: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ListenerConfig":
        """Read the configuration from the process environment."""
        env = os.environ if environ is None else environ
        return cls(flow_id=env.get(FLOW_ID_ENV_VAR) or None)
