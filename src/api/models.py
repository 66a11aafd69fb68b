"""API request and response models."""

from pydantic import BaseModel, Field, field_validator


class GenerateRequest(BaseModel):
    """Request model for store name generation."""

    description: str = Field(
        description="Store type, products, target audience and style"
    )

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be blank")
        return value


class GenerateResponse(BaseModel):
    """Response model for store name generation."""

    names: list[str] = Field(description="Generated store names in model order")


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str = Field(description="Error detail")
