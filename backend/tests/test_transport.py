from unittest import mock

import pytest
import requests

from infracanvas.compiler import compile_graph
from infracanvas.errors import BackendError, ClientSideError
from infracanvas.transport import DeployClient


def fake_response(status=200, json_body=None, text=""):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status
    response.ok = status < 400
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def aws_payload(valid_aws_graph):
    return compile_graph(valid_aws_graph, "aws").payload


@pytest.fixture
def gcp_payload(gcp_graph):
    return compile_graph(gcp_graph, "gcp").payload


@pytest.fixture
def post():
    with mock.patch("infracanvas.transport.client.requests.post") as patched:
        patched.return_value = fake_response(json_body={"message": "ok"})
        yield patched


def test_aws_deploy_posts_wire_payload(post, aws_payload):
    client = DeployClient(base_url="http://backend:8000/", timeout=5)
    result = client.aws_deploy(aws_payload)

    post.assert_called_once_with(
        "http://backend:8000/aws/deploy", json=aws_payload.to_wire(), timeout=5
    )
    assert result.ok
    assert result.status_code == 200
    assert result.message == "ok"


@pytest.mark.parametrize("method, path", [("aws_compile", "/aws/compile"), ("aws_bootstrap", "/aws/bootstrap")])
def test_aws_endpoints(post, aws_payload, method, path):
    getattr(DeployClient(base_url="http://b"), method)(aws_payload)
    assert post.call_args.args[0] == f"http://b{path}"


def test_aws_destroy_sends_empty_body(post):
    DeployClient(base_url="http://b").aws_destroy()
    assert post.call_args.args[0] == "http://b/aws/destroy"
    assert post.call_args.kwargs["json"] == {}


def test_bootstrap_requires_region(post, aws_payload):
    payload = aws_payload.model_copy(update={"region": "  "})
    with pytest.raises(ClientSideError):
        DeployClient(base_url="http://b").aws_bootstrap(payload)
    post.assert_not_called()


def test_gcp_up_wraps_payload_with_location(post, gcp_payload):
    DeployClient(base_url="http://b").gcp_up(gcp_payload)
    body = post.call_args.kwargs["json"]
    assert post.call_args.args[0] == "http://b/gcp/up"
    assert body["ir"]["location"] == "europe-west1"
    assert body["ir"]["nodes"][0]["kind"] == "gcp.storage"


def test_gcp_preview_and_destroy(post, gcp_payload):
    client = DeployClient(base_url="http://b")
    client.gcp_preview(gcp_payload)
    assert post.call_args.kwargs["json"] == {"ir": gcp_payload.to_wire()}

    client.gcp_destroy(gcp_payload)
    assert post.call_args.args[0] == "http://b/gcp/destroy"
    assert post.call_args.kwargs["json"] == gcp_payload.to_wire()


def test_message_falls_back_to_output(post, aws_payload):
    post.return_value = fake_response(json_body={"output": "Apply complete!"})
    assert DeployClient(base_url="http://b").aws_deploy(aws_payload).message == "Apply complete!"


def test_non_json_success_has_no_message(post, aws_payload):
    post.return_value = fake_response(text="done")
    assert DeployClient(base_url="http://b").aws_compile(aws_payload).message is None


@pytest.mark.parametrize(
    "response, expected",
    [
        (fake_response(500, {"detail": "terraform exploded"}), "terraform exploded"),
        (fake_response(400, {"error": "bad ir"}), "bad ir"),
        (fake_response(502, text="Bad Gateway"), "Bad Gateway"),
        (fake_response(503), "Deploy failed (503)"),
    ],
)
def test_backend_errors(post, aws_payload, response, expected):
    post.return_value = response
    with pytest.raises(BackendError) as excinfo:
        DeployClient(base_url="http://b").aws_deploy(aws_payload)
    assert str(excinfo.value) == expected
    assert excinfo.value.status_code == response.status_code


def test_uses_session_when_given(aws_payload):
    session = mock.Mock(spec=requests.Session)
    session.post.return_value = fake_response(json_body={})
    DeployClient(base_url="http://b", session=session).aws_compile(aws_payload)
    session.post.assert_called_once()