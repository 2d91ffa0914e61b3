from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProbeSettings(BaseModel):
    """A read-only view of the liveness or readiness probe fields of a configuration."""

    model_config = ConfigDict(frozen=True)

    delay_seconds: int
    period_seconds: int
    timeout_seconds: int
    path: Optional[str] = None
    port: Optional[int] = None

    @property
    def http_probe_configured(self) -> bool:
        return self.path is not None
