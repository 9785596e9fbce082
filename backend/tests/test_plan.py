from infracanvas.catalog import PlanNodeType
from infracanvas.compiler.plan import build_plan, resolve_region
from infracanvas.ir import CanvasGraph

from conftest import make_graph, make_node


def test_plan_nodes(s3_lambda_graph):
    plan = build_plan(s3_lambda_graph)

    assert plan.region == "us-east-1"
    s3 = plan.node("s3-1")
    assert s3.type is PlanNodeType.S3
    assert s3.name == "s3-1"
    assert s3.props["bucketName"] == "my-logs"
    assert s3.props["region"] == "us-east-1"
    assert plan.node("lambda-1").props["region"] == ""


def test_plan_edge_type_and_storage_props(s3_lambda_graph):
    plan = build_plan(s3_lambda_graph)

    assert len(plan.edges) == 1
    edge = plan.edges[0]
    assert edge.type == "s3_to_lambda"
    assert (edge.from_id, edge.to_id) == ("s3-1", "lambda-1")
    assert edge.props == {"prefix": "", "suffix": ""}


def test_storage_prefix_copied_but_edge_props_win():
    graph = CanvasGraph.model_validate(
        {
            "nodes": [
                make_node("b", "s3", region="us-east-1", bucketName="b", prefix="uploads/", suffix=".jpg"),
                make_node("q", "sqs", region="us-east-1"),
            ],
            "edges": [{"source": "b", "target": "q", "props": {"suffix": ".png"}}],
        }
    )
    edge = build_plan(graph).edges[0]
    assert edge.props == {"prefix": "uploads/", "suffix": ".png"}


def test_dangling_edges_are_dropped():
    graph = make_graph(
        [make_node("a", "sqs"), make_node("b", "lambda")],
        [("a", "b"), ("a", "ghost")],
    )
    plan = build_plan(graph)
    assert len(plan.edges) == 1
    assert plan.edges[0].to_id == "b"


def test_names_prefer_config_name_then_label_then_id():
    graph = CanvasGraph.model_validate(
        {
            "nodes": [
                {"id": "n1", "visualType": "s3", "displayLabel": "Label One",
                 "config": {"name": " Images Bucket ", "details": {}}},
                {"id": "n2", "visualType": "s3", "displayLabel": "Label Two"},
                {"id": "N3", "visualType": "s3"},
            ]
        }
    )
    plan = build_plan(graph)
    assert [n.name for n in plan.nodes] == ["images-bucket", "label-two", "n3"]


def test_region_defaults_per_provider():
    graph = make_graph([make_node("a", "lambda")])
    assert build_plan(graph, "aws").region == "ap-southeast-2"
    assert build_plan(graph, "gcp").region == "us-central1"


def test_region_from_details():
    graph = CanvasGraph.model_validate(
        {
            "nodes": [
                make_node("a", "lambda"),
                {"id": "b", "visualType": "sqs", "config": {"details": {"region": "eu-west-1"}}},
                make_node("c", "sqs", region="us-west-2"),
            ]
        }
    )
    assert resolve_region(graph.nodes) == "eu-west-1"


def test_variables():
    graph = make_graph(
        [
            make_node("b1", "s3", "Logs", region="us-east-1", bucketName="acme-logs"),
            make_node("q1", "sqs", "Jobs", region="us-east-1"),
            make_node("f1", "lambda", "Worker", region="us-east-1", functionName="worker-fn"),
            make_node("t1", "sns", "Alerts", region="us-east-1"),
        ]
    )
    assert build_plan(graph).variables == {
        "bucket_b1_name": "acme-logs",
        "queue_q1_name": "jobs",
        "lambda_f1_name": "worker-fn",
    }


def test_plan_to_dict_uses_wire_names(s3_lambda_graph):
    data = build_plan(s3_lambda_graph).to_dict()
    assert data["edges"][0]["from"] == "s3-1"
    assert data["edges"][0]["to"] == "lambda-1"
    assert data["nodes"][0]["type"] == "s3"


def test_blank_names_are_stable_across_builds():
    graph = CanvasGraph.model_validate(
        {"nodes": [{"id": "a", "visualType": "s3", "displayLabel": "Logs"}, {"id": " ", "visualType": "sqs"}]}
    )
    first = build_plan(graph)
    second = build_plan(graph)
    assert first.node(" ").name == "res-1"
    assert first.to_dict() == second.to_dict()
