"""
Domain models for recordlens.

Defines the employee record queried by the engine. Records are frozen once
constructed; every engine operation returns new collections instead of
touching them.
"""
from __future__ import annotations

from datetime import date
from typing import Tuple

from pydantic import BaseModel, Field, field_validator


class Employee(BaseModel):
    """
    A single employee in the record store.
    """

    id: int = Field(..., description="Unique identifier within a store.")
    name: str = Field(..., min_length=1, description="Display name.")
    department: str = Field(..., description="Department label, matched case-insensitively.")
    salary: float = Field(..., ge=0, description="Annual salary.")
    joining_date: date = Field(..., alias="joiningDate", description="Date the employee joined.")
    projects: Tuple[str, ...] = Field(default=(), description="Project labels in assignment order.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


__all__ = ["Employee"]
