#!/usr/bin/env python

"""
    entry_point.py:
    Cloudformation custom resource lambda handler which performs the following tasks:
    *   decodes the lifecycle event into the handler registered for its ResourceType
    *   invokes the Create, Update or Delete operation of that handler
    *   sends a single SUCCESS or FAILED response to the CloudFormation ResponseURL
"""

import json
import logging
import os

from .models import LifecycleEvent, Response
from .resources.hello_world_resource import HelloWorldResource
from .services.constants_service import ConstantsService
from .services.dispatcher_service import DispatcherService
from .services.errors import EmitError
from .services.registry_service import RegistryService
from .services.response_service import ResponseService

# set logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', ConstantsService.DEFAULT_LOG_LEVEL).upper())


def build_registry() -> RegistryService:
    registry = RegistryService()
    registry.register(ConstantsService.HELLO_WORLD_RESOURCE_TYPE, HelloWorldResource)
    registry.seal()
    return registry


# built once per cold start and read only afterwards
registry = build_registry()
dispatcher_service = DispatcherService(registry)


class RequestLogger(logging.LoggerAdapter):
    """Prefixes every record with the Lambda request id."""

    def process(self, msg, kwargs):
        return f"[{self.extra['request_id']}] {msg}", kwargs


def request_logger(context) -> logging.LoggerAdapter:
    request_id = getattr(context, 'aws_request_id', None) or "local"
    return RequestLogger(logger, {'request_id': request_id})


def lambda_handler(event, context):

    # print the event details
    logger.debug(json.dumps(event, indent=2, default=str))

    scoped_logger = request_logger(context)

    try:
        lifecycle_event = LifecycleEvent.from_dict(event)
    except ValueError as e:
        logger.error(f"Malformed custom resource event: {str(e)}")
        return Response.failed(str(e)).to_dict()

    response = dispatcher_service.dispatch(lifecycle_event, context, scoped_logger)

    if lifecycle_event.response_url:
        try:
            ResponseService().emit(response, lifecycle_event)
        except EmitError as e:
            logger.error(str(e))
            raise

    output = response.to_dict(lifecycle_event)
    logger.info("Output: " + json.dumps(response.to_log_dict(lifecycle_event)))

    return output
