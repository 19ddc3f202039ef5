"""Schemas for the ``key`` category."""

from pydantic import BaseModel, ConfigDict


class KeyInfo(BaseModel):
    """Fields returned by the key ``info`` selection."""

    model_config = ConfigDict(populate_by_name=True)

    access_level: int
    access_type: str
    # category -> selections this key may request
    selections: dict[str, list[str]]
