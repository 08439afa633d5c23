"""Call statistics summary models."""

from datetime import datetime
from pydantic import BaseModel, Field


class CallStats(BaseModel):
    """Number of calls of each type handled by an instance."""
    ping: int = Field(0, ge=0, description="Ping calls")
    check: int = Field(0, ge=0, description="Check calls")
    check_all: int = Field(0, ge=0, description="Check-all calls")


class PingResults(BaseModel):
    """
    Summary returned to peers and the status page.

    Rebuilt from the call tally on every request, never stored.
    """
    boot_time: datetime = Field(..., description="When this instance started")
    received: CallStats = Field(default_factory=CallStats, description="Calls received")
