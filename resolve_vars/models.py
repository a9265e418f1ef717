"""Resolver data models."""

from pydantic import BaseModel, Field


class VariableEntry(BaseModel):
    """One locally tracked variable.

    ``value`` is None both before the first fetch and when the remote key is
    unset; ``resolved`` tells the two apart.
    """

    local_name: str = Field(..., description="Name callers use to look the value up")
    remote_key: str = Field(..., description="Key of the value in the remote store")
    value: str | None = Field(default=None, description="Last value observed")
    resolved: bool = Field(
        default=False,
        description="Whether a value has been read from or written to the store",
    )
