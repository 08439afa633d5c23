"""Runtime configuration for a pingmesh instance."""

import socket
from typing import List, Optional

from pydantic import BaseModel, Field


class PingerConfig(BaseModel):
    """
    Settings shared by the metrics context and the HTTP server.

    ``hostname`` is the reporting instance identity attached to every
    metric sample. Its format is not validated.
    """
    hostname: str = Field(
        default_factory=lambda: socket.gethostname(),
        min_length=1,
        description="Reporting instance identity"
    )
    host: str = Field("0.0.0.0", description="Address to bind the HTTP server to")
    port: int = Field(8080, ge=1, le=65535, description="HTTP server port")
    error_types: Optional[List[str]] = Field(
        None,
        description="Allowed error types; anything else is recorded as 'other'"
    )
