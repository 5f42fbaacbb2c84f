#!/usr/bin/env python

"""
    registry_service.py:
    service that maps a custom resource type (e.g. Custom::HelloWorldResource)
    to the constructor of the handler that serves it.

    The registry is populated once while the Lambda function is cold starting
    and sealed before the first event is dispatched. Registering the same
    resource type twice is an error.
"""

import logging
import types
from typing import Callable, List

from .errors import (DuplicateRegistrationError, RegistrySealedError,
                     ResourceTypeNotFoundError)

logger = logging.getLogger()


class RegistryService:
    """
        Service that maps custom resource types to handler constructors.
    """

    def __init__(self) -> None:
        self._constructors = {}
        self._sealed = False

    def get_service_name(self) -> str:
        return "registry service"


    def register(self, resource_type: str, constructor: Callable) -> None:
        if not isinstance(resource_type, str) or resource_type == "":
            raise ValueError("A resource type must be a non-empty string.")

        if not callable(constructor):
            raise ValueError(f"The constructor registered for {resource_type} must be callable.")

        if self._sealed:
            raise RegistrySealedError(resource_type)

        if resource_type in self._constructors:
            raise DuplicateRegistrationError(resource_type)

        self._constructors[resource_type] = constructor
        logger.debug(f"Registered custom resource type: {resource_type}")


    def seal(self) -> None:
        if self._sealed:
            return
        self._constructors = types.MappingProxyType(dict(self._constructors))
        self._sealed = True
        logger.debug(f"Registry sealed with types: {', '.join(self.registered_types())}")


    @property
    def sealed(self) -> bool:
        return self._sealed


    def lookup(self, resource_type: str) -> Callable:
        try:
            return self._constructors[resource_type]
        except (KeyError, TypeError):
            raise ResourceTypeNotFoundError(resource_type) from None


    def registered_types(self) -> List[str]:
        return sorted(self._constructors.keys())


    def __contains__(self, resource_type) -> bool:
        try:
            return resource_type in self._constructors
        except TypeError:
            return False


    def __len__(self) -> int:
        return len(self._constructors)
