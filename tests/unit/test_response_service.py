import json
import logging
from datetime import datetime
from unittest.mock import MagicMock

import pytest
import urllib3
from expects import be_a, be_false, be_true, contain, equal, expect, have_key

from runtime.models import LifecycleEvent, Response
from runtime.services.errors import EmitError
from runtime.services.response_service import ResponseService
from tests.utils.custom_resource_events import RESPONSE_URL, make_event


@pytest.fixture
def http():
    http = MagicMock(spec=urllib3.PoolManager)
    http.request.return_value = MagicMock(status=200)
    return http


@pytest.fixture
def event() -> LifecycleEvent:
    return LifecycleEvent.from_dict(make_event("Create"))


def sent_body(http) -> dict:
    return json.loads(http.request.call_args.kwargs['body'])


class TestResponseService:
    """
        Test case for ResponseService
    """

    def test_emit_puts_response_to_response_url(self, http, event):
        response = Response.success({"Resource": "Created message: hi"}, physical_resource_id="pid")

        expect(ResponseService(http).emit(response, event)).to(be_true)

        http.request.assert_called_once()
        args, kwargs = http.request.call_args
        expect(args).to(equal(('PUT', RESPONSE_URL)))
        expect(kwargs['headers']).to(have_key('content-type', ''))
        expect(kwargs['headers']).to(have_key('content-length', str(len(kwargs['body'].encode("utf-8")))))
        expect(sent_body(http)).to(equal({
            "Status": "SUCCESS",
            "PhysicalResourceId": "pid",
            "StackId": event.stack_id,
            "RequestId": event.request_id,
            "LogicalResourceId": event.logical_resource_id,
            "NoEcho": False,
            "Data": {"Resource": "Created message: hi"}
        }))

    def test_failed_response_carries_reason(self, http, event):
        ResponseService(http).emit(Response.failed("boom", physical_resource_id="pid"), event)

        body = sent_body(http)
        expect(body).to(have_key("Status", "FAILED"))
        expect(body).to(have_key("Reason", "boom"))

    def test_emit_at_most_once(self, http, event):
        response_service = ResponseService(http)

        expect(response_service.emit(Response.success(), event)).to(be_true)
        expect(response_service.emit(Response.failed("later failure"), event)).to(be_false)

        http.request.assert_called_once()

    def test_no_second_send_after_delivery_failure(self, http, event):
        http.request.side_effect = urllib3.exceptions.MaxRetryError(None, RESPONSE_URL, "connection refused")
        response_service = ResponseService(http)

        with pytest.raises(EmitError):
            response_service.emit(Response.success(), event)

        expect(response_service.emit(Response.success(), event)).to(be_false)
        http.request.assert_called_once()

    def test_http_error_status_raises(self, http, event):
        http.request.return_value = MagicMock(status=403)

        with pytest.raises(EmitError) as err:
            ResponseService(http).emit(Response.success(), event)

        expect(str(err.value)).to(contain("403"))

    def test_missing_response_url_raises(self, http):
        event = LifecycleEvent.from_dict(make_event("Create", ResponseURL=None))

        with pytest.raises(EmitError):
            ResponseService(http).emit(Response.success(), event)

        http.request.assert_not_called()

    def test_oversized_success_is_replaced_by_failure(self, http, event):
        response = Response.success({"Blob": "x" * 5000}, physical_resource_id="pid")

        ResponseService(http).emit(response, event)

        body = sent_body(http)
        expect(body).to(have_key("Status", "FAILED"))
        expect(body).to(have_key("Reason", "Response object is too long."))
        expect(body).to(have_key("PhysicalResourceId", "pid"))

    def test_oversized_reason_is_truncated(self, http, event):
        ResponseService(http).emit(Response.failed("e" * 6000, physical_resource_id="pid"), event)

        raw_body = http.request.call_args.kwargs['body']
        assert len(raw_body.encode("utf-8")) <= 4096
        expect(json.loads(raw_body)["Reason"]).to(contain("..."))

    def test_default_pool_manager_does_not_retry(self):
        response_service = ResponseService()

        expect(response_service.http).to(be_a(urllib3.PoolManager))
        expect(response_service.http.connection_pool_kw).to(have_key("retries", False))

    def test_unserializable_data_is_replaced_by_failure(self, http, event):
        response = Response.success({"CreatedAt": datetime(2024, 1, 1)}, physical_resource_id="pid")

        expect(ResponseService(http).emit(response, event)).to(be_true)

        body = sent_body(http)
        expect(body).to(have_key("Status", "FAILED"))
        expect(body["Reason"]).to(contain("Unable to serialize response data"))
        expect(body).to(have_key("PhysicalResourceId", "pid"))

    def test_oversized_body_logs_encoded_size(self, http, event, caplog):
        response = Response.success({"Blob": "x" * 5000}, physical_resource_id="pid")
        body_size = len(json.dumps(response.to_dict(event)).encode("utf-8"))

        ResponseService(http).serialize(response, event)

        expect(caplog.text).to(contain(f"Response body of {body_size} bytes exceeds the 4096 byte limit"))

    def test_no_echo_data_is_masked_in_logs(self, http, event, caplog):
        caplog.set_level(logging.DEBUG)
        response = Response.success({"Password": "hunter2-secret"}, physical_resource_id="pid", no_echo=True)

        ResponseService(http).emit(response, event)

        expect(sent_body(http)).to(have_key("Data", {"Password": "hunter2-secret"}))
        expect(caplog.text).to(contain('"Data": "*****"'))
        assert "hunter2-secret" not in caplog.text
