# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
Naming Translator
Converts identifiers between field form (snake_case, used as mapping keys)
and accessor form (CapWords, used in getter/setter names).
"""

import re

OPERATION_PATTERN = re.compile(r"^(get|set)(.+)$")

_SEPARATORS = re.compile(r"[_\s]+")
_UPPERCASE = re.compile(r"([A-Z])")


def to_accessor_form(name: str, capitalize_first: bool = True) -> str:
    """
    Convert a field-form name to accessor form.

    `created_at` -> `CreatedAt` (or `createdAt` with capitalize_first=False).
    Only the first letter of each word is touched.
    """
    accessor = "".join(word[:1].upper() + word[1:] for word in _SEPARATORS.split(name))
    if not capitalize_first:
        accessor = accessor[:1].lower() + accessor[1:]
    return accessor


def to_field_form(name: str) -> str:
    """
    Convert an accessor-form name back to field form.

    `CreatedAt` -> `created_at`
    """
    name = name[:1].lower() + name[1:]
    return _UPPERCASE.sub(r"_\1", name).lower()


def getter_name(field: str) -> str:
    return f"get{to_accessor_form(field)}"


def setter_name(field: str) -> str:
    return f"set{to_accessor_form(field)}"
