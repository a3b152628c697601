# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from typing import Tuple

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase

from model_accessors.accessors import AccessorMixin


class Base(AccessorMixin, DeclarativeBase):
    """
    Declarative base for ORM-mapped records.
    Declared fields are the mapped column attributes; relationships are left out.
    """

    @classmethod
    def declared_fields(cls) -> Tuple[str, ...]:
        return tuple(prop.key for prop in sa_inspect(cls).column_attrs)
