import pytest

from infracanvas.catalog import Intent, ResourceKind as K
from infracanvas.compiler.intents import classify_intent


@pytest.mark.parametrize(
    "source, target, expected",
    [
        (K.AWS_S3, K.AWS_SQS, Intent.NOTIFY),
        (K.AWS_S3, K.AWS_LAMBDA, Intent.NOTIFY),
        (K.AWS_SNS, K.AWS_SQS, Intent.DELIVER),
        (K.AWS_SQS, K.AWS_LAMBDA, Intent.CONSUME),
        (K.AWS_EVENTS_RULE, K.AWS_LAMBDA, Intent.NOTIFY),
        (K.AWS_APIGW, K.AWS_LAMBDA, Intent.INVOKE),
        (K.AWS_DYNAMODB, K.AWS_LAMBDA, Intent.CONSUME),
        (K.AWS_LAMBDA, K.AWS_DYNAMODB, Intent.WRITE),
        (K.AWS_LAMBDA, K.AWS_SFN, Intent.INVOKE),
        (K.AWS_KINESIS, K.AWS_LAMBDA, Intent.CONSUME),
        (K.GCP_STORAGE, K.GCP_PUBSUB, Intent.NOTIFY),
        (K.GCP_PUBSUB, K.GCP_RUN, Intent.NOTIFY),
        (K.GCP_RUN, K.GCP_SECRET_MANAGER, Intent.ACCESS),
    ],
)
def test_rules(source, target, expected):
    assert classify_intent(source, target) is expected


def test_accepts_strings_and_plan_types():
    assert classify_intent("aws.sqs", "aws.lambda") is Intent.CONSUME
    assert classify_intent("apigateway", "lambda") is Intent.INVOKE
    assert classify_intent("run", "secretmanager") is Intent.ACCESS


@pytest.mark.parametrize(
    "source, target",
    [
        ("unknown-kind-x", "unknown-kind-y"),
        (K.AWS_LAMBDA, K.AWS_S3),
        (K.AWS_SQS, K.AWS_SNS),
        (None, K.AWS_LAMBDA),
        (K.AWS_OTHER, K.AWS_LAMBDA),
    ],
)
def test_fallback_is_notify(source, target):
    assert classify_intent(source, target) is Intent.NOTIFY
