"""Client information domain model."""

from pydantic import BaseModel, ConfigDict


class ClientInfo(BaseModel):
    """Client information resolved from a single request."""

    model_config = ConfigDict(frozen=True)

    ip: str
    user_agent: str
    method: str
    path: str
