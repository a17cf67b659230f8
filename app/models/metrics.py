"""Metrics payloads returned by the API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UNAVAILABLE = "Unable to retrieve"


class SecurityDecision(BaseModel):
    reason: str
    origin: str
    action: str
    count: int = Field(ge=0)


class MemoryInfo(BaseModel):
    total: str = UNAVAILABLE
    used: str = UNAVAILABLE
    free: str = UNAVAILABLE


class DiskInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: str = UNAVAILABLE
    used: str = UNAVAILABLE
    available: str = UNAVAILABLE
    use_percentage: str = Field(default=UNAVAILABLE, alias="usePercentage")


class SystemSnapshot(BaseModel):
    """Point-in-time read of host uptime, load, memory and disk."""

    model_config = ConfigDict(populate_by_name=True)

    uptime: str = UNAVAILABLE
    load_average: str = Field(default=UNAVAILABLE, alias="loadAverage")
    memory: MemoryInfo = Field(default_factory=MemoryInfo)
    disk: DiskInfo = Field(default_factory=DiskInfo)
