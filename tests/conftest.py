import copy
import io
import json
import os
import pytest
from unittest.mock import Mock, patch
from botocore.exceptions import ClientError

from ciservices.ci_services import get_services
from test_data.service_payloads import CI_SERVICES_PAYLOAD


os.environ["AWS_DEFAULT_REGION"] = "us-east-1"

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def ci_services():
    """Fresh copy of the CI services fixture"""
    return get_services()


@pytest.fixture
def ci_services_payload():
    """CI services in the dashboard's camelCase wire form"""
    return copy.deepcopy(CI_SERVICES_PAYLOAD)


@pytest.fixture
def templated_service_data():
    """Raw data for a service sized by a layout template"""
    return {
        "id": "templated",
        "name": "ASD-templated",
        "url": "http://localhost:8000/asd/templated",
        "type": "web",
        "template": "twoByTwo",
        "maxInstances": 20,
        "config": {},
    }


@pytest.fixture
def services_file(tmp_path, ci_services_payload):
    """services.json written to a temporary directory"""
    path = tmp_path / "services.json"
    path.write_text(json.dumps(ci_services_payload), encoding="utf-8")
    return path


@pytest.fixture
def mock_s3_client(ci_services_payload):
    """Mock boto3 S3 client serving the CI services as services.json"""
    body = json.dumps(ci_services_payload).encode("utf-8")
    mock_client = Mock()
    mock_client.get_object.side_effect = lambda **kwargs: {"Body": io.BytesIO(body)}
    with patch("ciservices.loader.get_s3_client", return_value=mock_client):
        yield mock_client


@pytest.fixture
def mock_s3_client_error():
    """Mock boto3 S3 client that raises ClientError"""
    mock_client = Mock()
    mock_client.get_object.side_effect = ClientError(
        {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
        "GetObject",
    )
    with patch("ciservices.loader.get_s3_client", return_value=mock_client):
        yield mock_client
