from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=500)
    price: int = Field(..., gt=0)  # major units, rupees
    image: Optional[str] = Field(None, max_length=500)
    tag: Optional[str] = None
