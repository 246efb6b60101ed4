"""Pydantic schemas for problem API endpoints."""

from pydantic import BaseModel, Field


class SampleTestResponse(BaseModel):
    """One sample input/output pair."""

    input: str
    output: str

    class Config:
        from_attributes = True


class ProblemResponse(BaseModel):
    """Response containing scraped problem information."""

    title: str
    time_limit: str = Field(alias="timeLimit")
    memory_limit: str = Field(alias="memoryLimit")
    description: str  # HTML of the statement legend
    input_description: str = Field(alias="inputDescription")
    output_description: str = Field(alias="outputDescription")
    tests: list[SampleTestResponse]

    class Config:
        from_attributes = True
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Response returned when a problem cannot be scraped."""

    error: str
