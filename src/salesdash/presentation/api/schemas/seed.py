"""Pydantic schemas for database initialization."""

from pydantic import BaseModel, ConfigDict, Field


class InitializeDatabaseResponse(BaseModel):
    """Result of seeding the catalog."""

    message: str = Field(description="Confirmation message")
    inserted: int = Field(description="Number of records written")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Database initialized with seed data",
                "inserted": 60,
            },
        },
    )
