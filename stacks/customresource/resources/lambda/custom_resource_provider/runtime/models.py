#!/usr/bin/env python

"""
    models.py:
    inbound CloudFormation lifecycle event and the outbound response
    produced for it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .services.constants_service import ConstantsService


@dataclass(frozen=True)
class LifecycleEvent:
    """
        A CloudFormation custom resource request.
        See https://docs.aws.amazon.com/AWSCloudFormation/latest/UserGuide/crpg-ref-requests.html
    """

    request_type: Any
    resource_type: Any
    resource_properties: Any
    service_token: Optional[str] = None
    response_url: Optional[str] = None
    stack_id: Optional[str] = None
    request_id: Optional[str] = None
    logical_resource_id: Optional[str] = None
    physical_resource_id: Optional[str] = None
    old_resource_properties: Any = None

    @staticmethod
    def from_dict(raw: dict) -> "LifecycleEvent":
        if not isinstance(raw, dict):
            raise ValueError(f"A lifecycle event must be a JSON object, received {type(raw).__name__}")

        properties = raw.get('ResourceProperties')
        if properties is None:
            properties = {}

        service_token = raw.get('ServiceToken')
        if service_token is None and isinstance(properties, dict):
            service_token = properties.get('ServiceToken')

        return LifecycleEvent(
            request_type=raw.get('RequestType'),
            resource_type=raw.get('ResourceType'),
            resource_properties=properties,
            service_token=service_token,
            response_url=raw.get('ResponseURL'),
            stack_id=raw.get('StackId'),
            request_id=raw.get('RequestId'),
            logical_resource_id=raw.get('LogicalResourceId'),
            physical_resource_id=raw.get('PhysicalResourceId'),
            old_resource_properties=raw.get('OldResourceProperties')
        )

    @property
    def stack_name(self) -> Optional[str]:
        # arn:aws:cloudformation:region:account:stack/<name>/<guid>
        if not self.stack_id or '/' not in self.stack_id:
            return None
        return self.stack_id.split('/')[1]


@dataclass(frozen=True)
class Response:
    """The outcome of one lifecycle invocation, sent once to CloudFormation."""

    status: str
    data: Dict[str, Any] = field(default_factory=dict)
    reason: Optional[str] = None
    physical_resource_id: Optional[str] = None
    no_echo: bool = False

    @staticmethod
    def success(data: Optional[dict] = None, physical_resource_id: str = None, no_echo: bool = False) -> "Response":
        return Response(
            status=ConstantsService.STATUS_SUCCESS,
            data=dict(data or {}),
            physical_resource_id=physical_resource_id,
            no_echo=no_echo
        )

    @staticmethod
    def failed(reason: str, physical_resource_id: str = None) -> "Response":
        return Response(
            status=ConstantsService.STATUS_FAILED,
            reason=reason,
            physical_resource_id=physical_resource_id
        )

    @property
    def is_success(self) -> bool:
        return self.status == ConstantsService.STATUS_SUCCESS

    def to_dict(self, event: Optional[LifecycleEvent] = None) -> dict:
        """Render the CloudFormation response body for the given event."""
        body = {'Status': self.status}

        if not self.is_success:
            body['Reason'] = self.reason

        if event is not None:
            body['PhysicalResourceId'] = self.physical_resource_id
            body['StackId'] = event.stack_id
            body['RequestId'] = event.request_id
            body['LogicalResourceId'] = event.logical_resource_id
            body['NoEcho'] = self.no_echo

        if self.is_success:
            body['Data'] = dict(self.data)

        return body

    def to_log_dict(self, event: Optional[LifecycleEvent] = None) -> dict:
        """Same as to_dict, with Data masked when no_echo is set."""
        body = self.to_dict(event)
        if self.no_echo and 'Data' in body:
            body['Data'] = ConstantsService.MASKED_DATA
        return body
