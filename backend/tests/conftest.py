import pytest

from infracanvas.ir import CanvasGraph


def make_node(node_id, visual_type, label="", region=None, **details):
    node = {"id": node_id, "visualType": visual_type, "displayLabel": label}
    if region is not None or details:
        node["config"] = {"name": "", "region": region or "", "details": details}
    return node


def make_graph(nodes, edges=()):
    return CanvasGraph.model_validate(
        {
            "nodes": nodes,
            "edges": [{"sourceNodeId": s, "targetNodeId": t} for s, t in edges],
        }
    )


@pytest.fixture
def s3_lambda_graph():
    """Bucket feeding a function; the function has no region of its own."""
    return CanvasGraph.model_validate(
        {
            "nodes": [
                {
                    "id": "s3-1",
                    "visualType": "s3",
                    "config": {"region": "us-east-1", "details": {"bucketName": "my-logs"}},
                },
                {
                    "id": "lambda-1",
                    "visualType": "lambda",
                    "config": {"details": {"runtime": "python3.12", "handler": "app.handler"}},
                },
            ],
            "edges": [{"sourceNodeId": "s3-1", "targetNodeId": "lambda-1"}],
        }
    )


@pytest.fixture
def valid_aws_graph():
    return make_graph(
        [
            make_node("api-1", "apigateway", "Public API", region="us-east-1"),
            make_node(
                "fn-1", "lambda", "Order Handler", region="us-east-1",
                runtime="python3.12", handler="app.handler",
            ),
            make_node("q-1", "sqs", "Orders", region="us-east-1", queueName="orders"),
        ],
        [("api-1", "fn-1"), ("q-1", "fn-1")],
    )


@pytest.fixture
def gcp_graph():
    return make_graph(
        [
            make_node("bkt", "gcs", "Uploads", region="europe-west1", bucketName="uploads-bucket"),
            make_node("topic", "pubsub", "Events", region="europe-west1", topicName="events"),
            make_node("svc", "cloud-run", "Worker", region="europe-west1", image="gcr.io/p/worker"),
            make_node("sec", "secretmanager", "Api Key", region="europe-west1"),
        ],
        [("bkt", "topic"), ("topic", "svc"), ("svc", "sec")],
    )
