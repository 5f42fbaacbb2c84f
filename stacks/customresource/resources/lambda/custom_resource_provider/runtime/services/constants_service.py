#!/usr/bin/env python

"""
    constants_service.py:
    service which provides runtime wide static constants.
"""


class ConstantsService:

    # custom resource types served by this provider
    HELLO_WORLD_RESOURCE_TYPE = "Custom::HelloWorldResource"

    # lifecycle verbs
    REQUEST_CREATE = "Create"
    REQUEST_UPDATE = "Update"
    REQUEST_DELETE = "Delete"

    # maps a lifecycle verb to the handler method name
    REQUEST_HANDLER_METHODS = {
        REQUEST_CREATE: "create",
        REQUEST_UPDATE: "update",
        REQUEST_DELETE: "delete"
    }

    # response statuses
    STATUS_SUCCESS = "SUCCESS"
    STATUS_FAILED = "FAILED"

    # CloudFormation rejects response bodies larger than 4096 bytes
    MAX_RESPONSE_BODY_BYTES = 4096
    RESPONSE_TOO_LONG_REASON = "Response object is too long."

    # ResourceProperties keys that are not handler fields
    RESERVED_PROPERTIES = ["ServiceToken"]

    # string forms accepted for bool properties
    TRUE_VALUES = ["true", "yes", "1"]
    FALSE_VALUES = ["false", "no", "0"]

    DEFAULT_LOG_LEVEL = "INFO"

    # logged in place of Data when a handler sets no_echo
    MASKED_DATA = "*****"
