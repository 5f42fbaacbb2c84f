import dataclasses

import pytest
from expects import be_none, equal, expect

from runtime.models import LifecycleEvent, Response
from tests.utils.custom_resource_events import SERVICE_TOKEN, make_event


class TestLifecycleEvent:
    """
        Test case for LifecycleEvent
    """

    def test_from_dict(self):
        event = LifecycleEvent.from_dict(make_event("Update"))

        expect(event.request_type).to(equal("Update"))
        expect(event.resource_type).to(equal("Demo::Echo"))
        expect(event.resource_properties).to(equal({"ServiceToken": SERVICE_TOKEN, "Message": "hi"}))
        expect(event.old_resource_properties).to(equal({"ServiceToken": SERVICE_TOKEN, "Message": "hello"}))
        expect(event.physical_resource_id).to(equal("echo-physical-id"))
        expect(event.stack_name).to(equal("MyCustomResourceStack-test"))

    def test_service_token_falls_back_to_properties(self):
        raw = make_event("Create")
        del raw["ServiceToken"]

        expect(LifecycleEvent.from_dict(raw).service_token).to(equal(SERVICE_TOKEN))

    def test_missing_properties_are_empty(self):
        raw = make_event("Delete")
        del raw["ResourceProperties"]

        expect(LifecycleEvent.from_dict(raw).resource_properties).to(equal({}))

    def test_event_is_immutable(self):
        event = LifecycleEvent.from_dict(make_event("Create"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            event.request_type = "Delete"

    def test_stack_name_without_stack_id(self):
        expect(LifecycleEvent.from_dict({"RequestType": "Create"}).stack_name).to(be_none)

    def test_non_object_rejected(self):
        with pytest.raises(ValueError):
            LifecycleEvent.from_dict("Create")


class TestResponse:
    """
        Test case for Response
    """

    def test_success_shape(self):
        expect(Response.success({"Resource": "x"}).to_dict()).to(equal({"Status": "SUCCESS", "Data": {"Resource": "x"}}))

    def test_success_without_data(self):
        expect(Response.success().to_dict()).to(equal({"Status": "SUCCESS", "Data": {}}))

    def test_failed_shape(self):
        expect(Response.failed("boom").to_dict()).to(equal({"Status": "FAILED", "Reason": "boom"}))

    def test_wire_body_for_event(self):
        event = LifecycleEvent.from_dict(make_event("Create"))

        body = Response.failed("boom", physical_resource_id="pid").to_dict(event)

        expect(body).to(equal({
            "Status": "FAILED",
            "Reason": "boom",
            "PhysicalResourceId": "pid",
            "StackId": event.stack_id,
            "RequestId": event.request_id,
            "LogicalResourceId": "EchoResource",
            "NoEcho": False
        }))

    def test_log_body_masks_no_echo_data(self):
        response = Response.success({"Password": "p"}, no_echo=True)

        expect(response.to_log_dict()).to(equal({"Status": "SUCCESS", "Data": "*****"}))
        expect(response.to_dict()).to(equal({"Status": "SUCCESS", "Data": {"Password": "p"}}))

    def test_log_body_keeps_data_without_no_echo(self):
        expect(Response.success({"A": "b"}).to_log_dict()).to(equal({"Status": "SUCCESS", "Data": {"A": "b"}}))
