from unittest.mock import MagicMock

import pytest

from runtime.services.registry_service import RegistryService
from tests.utils.custom_resource_events import ECHO_RESOURCE_TYPE, EchoResource


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context object."""
    context = MagicMock()
    context.function_name = "custom-resource-provider"
    context.aws_request_id = "test-request-id-12345"
    context.log_stream_name = "2024/01/01/[$LATEST]abcdef123456"
    context.get_remaining_time_in_millis = MagicMock(return_value=300000)
    return context


@pytest.fixture
def registry() -> RegistryService:
    registry = RegistryService()
    registry.register(ECHO_RESOURCE_TYPE, EchoResource)
    registry.seal()
    return registry


@pytest.fixture
def session_factory():
    return MagicMock(name="session_factory")
