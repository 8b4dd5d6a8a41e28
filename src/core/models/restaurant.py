"""Pydantic model for restaurant records read from DynamoDB."""

from pydantic import BaseModel, ConfigDict


class Restaurant(BaseModel):
    # Attributes beyond the known ones are kept, not rejected
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    image: str | None = None
    themes: list[str] = []
