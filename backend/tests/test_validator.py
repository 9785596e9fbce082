import pytest

from infracanvas.ir import GraphNode
from infracanvas.validation import (
    S3_BUCKET_RE,
    ValidationSeverity,
    are_all_services_configured,
    validate_all_services,
    validate_service,
    validate_services,
)

from conftest import make_node


def node(*args, **kwargs):
    return GraphNode.model_validate(make_node(*args, **kwargs))


def test_unconfigured_node():
    messages = validate_service(node("s1", "s3", "Logs Bucket"))
    assert messages == [
        "Logs Bucket has not been configured. Please click on the service to configure it."
    ]


def test_bad_bucket_name_is_flagged():
    messages = validate_service(node("s1", "s3", "Logs", region="us-east-1", bucketName="AB"))
    assert len(messages) == 1
    assert "Bucket name must be 3-63 chars" in messages[0]


def test_good_bucket_passes():
    assert validate_service(node("s1", "s3", "Logs", region="us-east-1", bucketName="my-logs")) == []


def test_region_from_details_is_accepted():
    n = GraphNode.model_validate(
        {"id": "s1", "visualType": "s3", "config": {"details": {"region": "us-east-1", "bucketName": "my-logs"}}}
    )
    assert validate_service(n) == []


@pytest.mark.parametrize(
    "visual_type, details, expected",
    [
        ("lambda", {}, ["f: Runtime is required", "f: Handler is required"]),
        ("sqs", {}, ["f: Queue name is required"]),
        ("sns", {}, ["f: Topic name is required"]),
        ("dynamodb", {}, ["f: Table name is required"]),
        ("kinesis", {"streamName": "  "}, ["f: Stream name is required"]),
        ("cloud-run", {}, ["f: Container image is required"]),
        ("pubsub", {}, ["f: Topic name is required"]),
        ("firestore", {}, ["f: Location ID is required"]),
        ("gcs", {"bucketName": "ab"}, ["f: Bucket name must be 3-63 characters"]),
        ("apigateway", {}, []),
    ],
)
def test_required_fields(visual_type, details, expected):
    assert validate_service(node("f", visual_type, region="r1", **details)) == expected


def test_missing_region():
    n = GraphNode.model_validate(
        {"id": "q", "visualType": "sqs", "displayLabel": "Jobs", "config": {"details": {"queueName": "jobs"}}}
    )
    assert validate_service(n) == ["Jobs: Region is required"]


def test_unmodelled_kind_is_a_warning_only():
    result = validate_services([node("db", "rds", region="us-east-1")])
    assert result.is_valid
    assert result.warning_count == 1
    assert result.issues[0].severity is ValidationSeverity.WARNING
    assert result.issues[0].code == "UNMODELLED_KIND"


def test_validate_all_services_only_lists_failing_nodes(valid_aws_graph):
    nodes = list(valid_aws_graph.nodes) + [node("bad", "sqs", "Broken", region="us-east-1")]
    assert validate_all_services(nodes) == {"bad": ["Broken: Queue name is required"]}
    assert not are_all_services_configured(nodes)
    assert are_all_services_configured(valid_aws_graph.nodes)


def test_result_to_dict():
    data = validate_services([node("s1", "s3")]).to_dict()
    assert data["is_valid"] is False
    assert data["error_count"] == 1
    assert data["issues"][0]["code"] == "NOT_CONFIGURED"
    assert data["errors"] == {"s1": [data["issues"][0]["message"]]}


@pytest.mark.parametrize("name", ["my-logs", "a.b.c", "abc", "x" * 63])
def test_bucket_pattern_accepts(name):
    assert S3_BUCKET_RE.match(name)


@pytest.mark.parametrize("name", ["AB", "ab", "-abc", "abc-", "a--b", "192.168.0.1", "x" * 64, "ab.-c"])
def test_bucket_pattern_rejects(name):
    assert not S3_BUCKET_RE.match(name)
