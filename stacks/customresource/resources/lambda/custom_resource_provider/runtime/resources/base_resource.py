#!/usr/bin/env python

"""
    base_resource.py:
    base class for custom resource handlers.

    A handler declares the ResourceProperties it expects as a list of
    ResourceProperty definitions and implements create, update and delete.
    Each lifecycle method receives the LifecycleEvent, a boto3 session and
    a request scoped logger, and returns a dict of attributes (or None)
    that CloudFormation exposes through Fn::GetAtt.

    CloudFormation delivers requests at least once. update and delete may
    be called more than once for the same physical resource and must be
    safe to repeat; the runtime does not deduplicate events.
"""

from typing import Any, List, Optional

from ..services.constants_service import ConstantsService
from ..services.errors import DecodeError

_MISSING = object()


class ResourceProperty:
    """A typed field read from the ResourceProperties of an event."""

    def __init__(
            self,
            name: str,
            type_: type = str,
            required: bool = True,
            default: Any = None,
            attribute: str = None
        ) -> None:
        self.name = name
        self.type_ = type_
        self.required = required
        self.default = default
        self.attribute = attribute or name

    def decode(self, raw: dict) -> Any:
        value = raw.get(self.name, _MISSING)

        if value is _MISSING or value is None:
            if self.required:
                raise DecodeError(self.name, f"Required property {self.name} is missing from ResourceProperties.")
            return self.default

        return self._coerce(value)

    def _coerce(self, value: Any) -> Any:
        expected = self.type_.__name__

        # bool is checked before int as bool is an int subclass
        if self.type_ is bool:
            if isinstance(value, bool):
                return value
            if isinstance(value, str) and value.lower() in ConstantsService.TRUE_VALUES:
                return True
            if isinstance(value, str) and value.lower() in ConstantsService.FALSE_VALUES:
                return False
            raise self._type_mismatch(value)

        if self.type_ in (int, float):
            if isinstance(value, bool):
                raise self._type_mismatch(value)
            if isinstance(value, (int, float, str)):
                try:
                    return self.type_(value)
                except ValueError:
                    raise DecodeError(self.name, f"Property {self.name} must be a valid {expected}, received {value!r}.") from None
            raise self._type_mismatch(value)

        if self.type_ is str:
            # scalars arrive as strings from CloudFormation but may be numbers in direct invocations
            if isinstance(value, (str, int, float)) and not isinstance(value, bool):
                return str(value)
            raise self._type_mismatch(value)

        if not isinstance(value, self.type_):
            raise self._type_mismatch(value)

        return value

    def _type_mismatch(self, value: Any) -> DecodeError:
        return DecodeError(
            self.name,
            f"Property {self.name} must be of type {self.type_.__name__}, received {type(value).__name__}."
        )


class BaseResource:
    """
        Base class for custom resource handlers. Subclasses must provide a
        zero argument constructor so they can be registered directly.
    """

    properties: List[ResourceProperty] = []

    # set to True to mask the returned Data in CloudFormation output
    no_echo = False

    def __init__(self) -> None:
        self.physical_resource_id: Optional[str] = None

    def populate(self, raw_properties: Any) -> "BaseResource":
        if not isinstance(raw_properties, dict):
            raise DecodeError(
                "ResourceProperties",
                f"ResourceProperties must be a JSON object, received {type(raw_properties).__name__}."
            )

        for resource_property in self.properties:
            if resource_property.name in ConstantsService.RESERVED_PROPERTIES:
                continue
            setattr(self, resource_property.attribute, resource_property.decode(raw_properties))

        return self

    def create(self, event, session, logger) -> Optional[dict]:
        raise NotImplementedError(f"{type(self).__name__} does not implement create")

    def update(self, event, session, logger) -> Optional[dict]:
        raise NotImplementedError(f"{type(self).__name__} does not implement update")

    def delete(self, event, session, logger) -> Optional[dict]:
        raise NotImplementedError(f"{type(self).__name__} does not implement delete")
