# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from typing import Any, Dict, Self, Tuple

from pydantic import BaseModel, ConfigDict

from model_accessors.accessors import AccessorMixin


class AccessorModel(AccessorMixin, BaseModel):
    """
    Base model for plain data objects.
    Declared fields are the model's annotated fields, in declaration order.
    Values are stored as given: assignment is never validated or coerced.
    """

    model_config = ConfigDict(
        extra="forbid",  # No dynamic fields
        arbitrary_types_allowed=True,
        validate_assignment=False,
    )

    @classmethod
    def declared_fields(cls) -> Tuple[str, ...]:
        return tuple(cls.model_fields)

    @classmethod
    def create_new(cls) -> Self:
        """Zero-valued instance: required fields start as None, the rest at their defaults."""
        values: Dict[str, Any] = {name: None for name, info in cls.model_fields.items() if info.is_required()}
        return cls.model_construct(**values)
