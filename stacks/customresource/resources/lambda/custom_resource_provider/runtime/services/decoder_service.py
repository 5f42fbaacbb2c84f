#!/usr/bin/env python

"""
    decoder_service.py:
    service that turns the untyped ResourceProperties of an event into a
    populated handler instance for the requested resource type.
"""

import logging
from typing import Any

from .errors import DecodeError
from .registry_service import RegistryService

logger = logging.getLogger()


class DecoderService:
    """
        Service that decodes ResourceProperties into a handler instance.
    """

    def __init__(self, registry: RegistryService) -> None:
        self.registry = registry

    def get_service_name(self) -> str:
        return "decoder service"


    def decode(self, resource_type: str, raw_properties: Any):
        # raises ResourceTypeNotFoundError (a DecodeError) for unknown types
        constructor = self.registry.lookup(resource_type)

        handler = constructor()

        if not hasattr(handler, "populate"):
            raise DecodeError(
                "ResourceType",
                f"The handler registered for {resource_type} does not support decoding ResourceProperties."
            )

        handler.populate(raw_properties)

        logger.debug(f"Decoded ResourceProperties for {resource_type} into {type(handler).__name__}")

        return handler
