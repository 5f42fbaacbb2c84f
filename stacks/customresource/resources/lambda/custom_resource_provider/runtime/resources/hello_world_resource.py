#!/usr/bin/env python

"""
    hello_world_resource.py:
    Custom::HelloWorldResource handler. Echoes the Message property
    back as the Resource attribute on create.
"""

from .base_resource import BaseResource, ResourceProperty


class HelloWorldResource(BaseResource):
    """
        A simple proof of concept showing how to create custom resources.
    """

    properties = [
        ResourceProperty("Message", str, attribute="message")
    ]

    def create(self, event, session, logger) -> dict:
        logger.info(f"create: {self.message}")
        return {
            "Resource": f"Created message: {self.message}"
        }

    def update(self, event, session, logger) -> None:
        logger.info(f"update: {self.message}")
        return None

    def delete(self, event, session, logger) -> None:
        logger.info(f"delete: {self.message}")
        return None
