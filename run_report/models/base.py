"""Base model configuration for all input records."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with standard configuration.

    Records are immutable and accept both the runner's camelCase keys and
    the snake_case field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
