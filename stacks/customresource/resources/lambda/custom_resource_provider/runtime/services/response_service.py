#!/usr/bin/env python

"""
    response_service.py:
    service that delivers the response of a lifecycle invocation to the
    presigned S3 ResponseURL supplied by CloudFormation.

    One ResponseService is created per invocation and sends at most one
    response. Delivery failures raise EmitError and are not retried.
"""

import json
import logging

import urllib3

from ..models import LifecycleEvent, Response
from .constants_service import ConstantsService
from .errors import EmitError

logger = logging.getLogger()


class ResponseService:
    """
        Service that sends a single custom resource response to CloudFormation.
    """

    constants_service = ConstantsService()

    def __init__(self, http: urllib3.PoolManager = None) -> None:
        self.http = http or urllib3.PoolManager(retries=False)
        self.sent = False

    def get_service_name(self) -> str:
        return "response service"


    def serialize(self, response: Response, event: LifecycleEvent) -> str:
        limit = self.constants_service.MAX_RESPONSE_BODY_BYTES
        try:
            body = json.dumps(response.to_dict(event))
        except (TypeError, ValueError) as e:
            logger.error(f"Unable to serialize {response.status} response: {str(e)}")
            response = Response.failed(
                f"Unable to serialize response data: {str(e)}",
                physical_resource_id=response.physical_resource_id
            )
            body = json.dumps(response.to_dict(event))

        body_size = len(body.encode("utf-8"))
        if body_size <= limit:
            return body

        if response.is_success:
            logger.error(f"Response body of {body_size} bytes exceeds the {limit} byte limit")
            response = Response.failed(
                self.constants_service.RESPONSE_TOO_LONG_REASON,
                physical_resource_id=response.physical_resource_id
            )
            return json.dumps(response.to_dict(event))

        # trim the reason of a failed response until the body fits
        overflow = body_size - limit
        reason = response.reason.encode("utf-8")[:max(len(response.reason.encode("utf-8")) - overflow - 3, 0)]
        response = Response.failed(
            reason.decode("utf-8", errors="ignore") + "...",
            physical_resource_id=response.physical_resource_id
        )
        return json.dumps(response.to_dict(event))


    def emit(self, response: Response, event: LifecycleEvent) -> bool:
        if self.sent:
            logger.warning(
                f"A response has already been sent for request {event.request_id}; "
                f"ignoring {response.status} response."
            )
            return False

        # no further send is attempted after the first, even if it fails
        self.sent = True

        if not event.response_url:
            raise EmitError(f"Request {event.request_id} has no ResponseURL to deliver the response to.")

        body = self.serialize(response, event)
        logged_body = json.loads(body)
        if response.no_echo and 'Data' in logged_body:
            logged_body['Data'] = self.constants_service.MASKED_DATA
        logger.debug(f"Response body: {json.dumps(logged_body)}")

        headers = {
            'content-type': '',
            'content-length': str(len(body.encode("utf-8")))
        }

        try:
            http_response = self.http.request(
                'PUT',
                event.response_url,
                headers=headers,
                body=body
            )
        except urllib3.exceptions.HTTPError as e:
            raise EmitError(f"Failed to send response for request {event.request_id}: {str(e)}") from e

        if not 200 <= http_response.status < 300:
            raise EmitError(
                f"Failed to send response for request {event.request_id}: "
                f"ResponseURL returned HTTP {http_response.status}"
            )

        logger.info(f"Sent {response.status} response for request {event.request_id}")
        return True
