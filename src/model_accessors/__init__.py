# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from model_accessors.accessors import AccessorMixin, AccessorTable, FieldAccessor, accessor_table
from model_accessors.exceptions import AccessorError, MissingFieldError, UnknownOperationError
from model_accessors.models.base import Base
from model_accessors.naming import to_accessor_form, to_field_form
from model_accessors.schemas.base import AccessorModel

__all__ = [
    "AccessorError",
    "AccessorMixin",
    "AccessorModel",
    "AccessorTable",
    "Base",
    "FieldAccessor",
    "MissingFieldError",
    "UnknownOperationError",
    "accessor_table",
    "to_accessor_form",
    "to_field_form",
]
