from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

RequiredStr = Annotated[str, StringConstraints(min_length=1)]


class BodySchema(BaseModel):
    model_config = ConfigDict(extra='forbid', strict=True)
