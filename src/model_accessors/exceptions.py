# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
Accessor Layer Exceptions
"""


class AccessorError(AttributeError):
    """Base class for failures resolving a field or accessor on a model."""

    pass


class MissingFieldError(AccessorError):
    """Raised when a resolved field name is not declared on the model."""

    def __init__(self, model_name: str, field_name: str):
        self.model_name = model_name
        self.field_name = field_name
        super().__init__(f"Model {model_name} has no declared field '{field_name}'.")


class UnknownOperationError(AccessorError):
    """Raised when an operation is neither a declared field nor a get/set accessor."""

    def __init__(self, operation: str, model_name: str):
        self.operation = operation
        self.model_name = model_name
        super().__init__(f"Operation '{operation}' does not exist on model {model_name}.")
