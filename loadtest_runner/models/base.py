"""Base model for data received from collaborators outside this package."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model; values are stripped of surrounding whitespace."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
