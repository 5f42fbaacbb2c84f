#!/usr/bin/env python

"""
    errors.py:
    exception types raised by the custom resource runtime.
    Every error except EmitError is converted into a FAILED response
    by the dispatcher service.
"""


class CustomResourceError(Exception):
    """Base class for custom resource runtime errors."""


class DecodeError(CustomResourceError):
    """ResourceProperties could not be decoded into the handler fields."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ResourceTypeNotFoundError(DecodeError):

    def __init__(self, resource_type: str) -> None:
        super().__init__(
            field="ResourceType",
            message=f"Resource type {resource_type} is not registered with this provider."
        )
        self.resource_type = resource_type


class DuplicateRegistrationError(CustomResourceError):

    def __init__(self, resource_type: str) -> None:
        super().__init__(f"Resource type {resource_type} is already registered.")
        self.resource_type = resource_type


class RegistrySealedError(CustomResourceError):

    def __init__(self, resource_type: str) -> None:
        super().__init__(
            f"Unable to register {resource_type}; registration is closed once dispatching begins."
        )
        self.resource_type = resource_type


class UnsupportedOperationError(CustomResourceError):

    def __init__(self, request_type) -> None:
        super().__init__(
            f"Unsupported RequestType: {request_type}. Expected one of Create, Update, Delete."
        )
        self.request_type = request_type


class HandlerFailure(CustomResourceError):
    """Raised by handler logic (or on its behalf) to fail a lifecycle operation."""


class EmitError(CustomResourceError):
    """The response could not be delivered to the CloudFormation ResponseURL."""
