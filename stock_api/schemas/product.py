"""Product request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    stock: int = Field(default=0, ge=0)
    category_id: int = Field(..., ge=1, description="Id of an existing category")

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class ProductUpdate(BaseModel):
    """Partial update; explicit null is rejected for required columns."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    stock: int | None = Field(default=None, ge=0)
    category_id: int | None = Field(default=None, ge=1)

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("name", "price", "stock", "category_id")
    @classmethod
    def required_not_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field cannot be null")
        return v


class ProductResponse(BaseModel):
    """Product with its category name resolved at read time."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    price: float
    stock: int
    category_id: int
    category_name: str | None = None
    created_at: datetime
    updated_at: datetime
