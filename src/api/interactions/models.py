from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.config.constants import InteractionType


class CreateInteractionSchema(BaseModel):
    product_id: int = Field(..., gt=0, examples=[12])
    interaction_type: InteractionType = Field(..., examples=["view"])
    session_id: Optional[str] = Field(
        None, max_length=255, examples=["sess_7f3a9c"]
    )


class InteractionSchema(BaseModel):
    id: int = Field(..., examples=[1042])
    product_id: int = Field(..., examples=[12])
    user_id: Optional[str] = Field(None, examples=["Xy12AbC34dEf"])
    interaction_type: InteractionType
    timestamp: datetime
    session_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
