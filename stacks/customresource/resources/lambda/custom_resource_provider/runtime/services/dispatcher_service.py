#!/usr/bin/env python

"""
    dispatcher_service.py:
    service that routes a CloudFormation lifecycle event (Create, Update or Delete)
    to the matching method of the registered handler and normalizes the outcome
    into a SUCCESS or FAILED response.

    Every decode, verb or handler error becomes a FAILED response; dispatch never
    raises for them. No state is retained between events.
"""

import json
import logging
import traceback
from typing import Callable

import boto3

from ..models import LifecycleEvent, Response
from .constants_service import ConstantsService
from .decoder_service import DecoderService
from .errors import DecodeError, HandlerFailure, UnsupportedOperationError
from .registry_service import RegistryService

logger = logging.getLogger()


class DispatcherService:
    """
        Service that dispatches lifecycle events to custom resource handlers.
    """

    constants_service = ConstantsService()

    def __init__(
            self,
            registry: RegistryService,
            session_factory: Callable = boto3.session.Session
        ) -> None:
        self.decoder_service = DecoderService(registry)
        self.session_factory = session_factory

    def get_service_name(self) -> str:
        return "dispatcher service"


    @staticmethod
    def default_physical_resource_id(event: LifecycleEvent, context=None) -> str:
        if event.physical_resource_id:
            return event.physical_resource_id

        log_stream_name = getattr(context, "log_stream_name", None)
        if isinstance(log_stream_name, str) and log_stream_name:
            return log_stream_name

        return f"{event.logical_resource_id}-{event.request_id}"


    def dispatch(self, event: LifecycleEvent, context=None, request_logger=None) -> Response:
        request_logger = request_logger or logger
        physical_resource_id = self.default_physical_resource_id(event, context)

        method_name = self.constants_service.REQUEST_HANDLER_METHODS.get(event.request_type) \
            if isinstance(event.request_type, str) else None

        if method_name is None:
            err = UnsupportedOperationError(event.request_type)
            request_logger.error(str(err))
            return Response.failed(str(err), physical_resource_id=physical_resource_id)

        try:
            handler = self.decoder_service.decode(event.resource_type, event.resource_properties)
        except DecodeError as e:
            request_logger.error(f"Unable to decode {event.resource_type} request; field {e.field}: {str(e)}")
            return Response.failed(str(e), physical_resource_id=physical_resource_id)
        except Exception as e:
            traceback.print_exception(type(e), value=e, tb=e.__traceback__)
            reason = f"Unable to construct handler for {event.resource_type}: {str(e) or type(e).__name__}"
            request_logger.error(reason)
            return Response.failed(reason, physical_resource_id=physical_resource_id)

        request_logger.info(f"{event.request_type} {event.resource_type} ({event.logical_resource_id})")

        try:
            data = getattr(handler, method_name)(event, self.session_factory(), request_logger)

            if data is None:
                data = {}

            if not isinstance(data, dict):
                raise HandlerFailure(
                    f"{type(handler).__name__}.{method_name} must return a dict or None, received {type(data).__name__}"
                )

            try:
                json.dumps(data)
            except (TypeError, ValueError) as e:
                raise HandlerFailure(
                    f"{type(handler).__name__}.{method_name} returned data that is not JSON serializable: {str(e)}"
                ) from e

        except Exception as e:
            traceback.print_exception(type(e), value=e, tb=e.__traceback__)
            reason = str(e) or type(e).__name__
            request_logger.error(f"{event.request_type} {event.resource_type} failed: {reason}")
            return Response.failed(
                reason,
                physical_resource_id=getattr(handler, "physical_resource_id", None) or physical_resource_id
            )

        return Response.success(
            data,
            physical_resource_id=getattr(handler, "physical_resource_id", None) or physical_resource_id,
            no_echo=bool(getattr(handler, "no_echo", False))
        )
