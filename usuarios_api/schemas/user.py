"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

NOMBRE_MIN_LENGTH: int = 3


class UserPayload(BaseModel):
    """Body accepted by create and update."""

    nombre: StrictStr = Field(min_length=NOMBRE_MIN_LENGTH)


class UserRead(BaseModel):
    id: int
    nombre: str

    model_config = ConfigDict(from_attributes=True)
