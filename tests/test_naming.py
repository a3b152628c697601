# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import pytest

from model_accessors.naming import getter_name, setter_name, to_accessor_form, to_field_form


@pytest.mark.parametrize(
    "field, accessor",
    [
        ("created_at", "CreatedAt"),
        ("id", "Id"),
        ("order_line_item_id", "OrderLineItemId"),
        ("name", "Name"),
    ],
)
def test_to_accessor_form(field: str, accessor: str) -> None:
    assert to_accessor_form(field) == accessor


def test_to_accessor_form_keeps_inner_capitals() -> None:
    assert to_accessor_form("createdAt") == "CreatedAt"
    assert to_accessor_form("html_body") == "HtmlBody"


def test_to_accessor_form_lower_camel() -> None:
    assert to_accessor_form("created_at", capitalize_first=False) == "createdAt"


def test_to_accessor_form_splits_on_whitespace() -> None:
    assert to_accessor_form("created at") == "CreatedAt"


@pytest.mark.parametrize(
    "accessor, field",
    [
        ("CreatedAt", "created_at"),
        ("createdAt", "created_at"),
        ("Id", "id"),
        ("OrderLineItemId", "order_line_item_id"),
    ],
)
def test_to_field_form(accessor: str, field: str) -> None:
    assert to_field_form(accessor) == field


def test_single_word_is_fixed_point() -> None:
    assert to_field_form("name") == "name"
    assert to_field_form(to_accessor_form("name")) == "name"


@pytest.mark.parametrize("field", ["created_at", "a_b_c", "unit_price", "is_active", "x"])
def test_field_form_round_trip(field: str) -> None:
    assert to_field_form(to_accessor_form(field)) == field


def test_operation_names() -> None:
    assert getter_name("created_at") == "getCreatedAt"
    assert setter_name("created_at") == "setCreatedAt"
