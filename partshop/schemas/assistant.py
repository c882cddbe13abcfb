from typing import List
from pydantic import BaseModel, ConfigDict, Field

from partshop.schemas.inventory import BikeSection


class AIAnalysisResponse(BaseModel):
    """Suggestion returned by the description assistant."""
    model_config = ConfigDict(populate_by_name=True)

    suggested_description: str = Field(..., alias="suggestedDescription")
    technical_specs: List[str] = Field(default_factory=list, alias="technicalSpecs")


class DescribeRequest(BaseModel):
    """Schema for asking the assistant to draft a description."""
    item_name: str = Field(..., min_length=1, description="Name of the part, as typed in the form.")
    section: BikeSection = Field(..., description="Part category, used as prompt context.")
