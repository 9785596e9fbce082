"""
Edge Intent Classifier

Ordered (source, targets, intent) rules over resource kinds.
First match wins; unmatched pairs fall back to NOTIFY.
"""

from typing import FrozenSet, List, Tuple, Union

from infracanvas.catalog import Intent, PlanNodeType, ResourceKind, parse_kind

K = ResourceKind

_Rule = Tuple[ResourceKind, FrozenSet[ResourceKind], Intent]

INTENT_RULES: List[_Rule] = [
    # S3 notifications
    (K.AWS_S3, frozenset({K.AWS_SQS, K.AWS_LAMBDA, K.AWS_SNS, K.AWS_EVENTS_RULE}), Intent.NOTIFY),
    # SNS fan-out
    (K.AWS_SNS, frozenset({K.AWS_LAMBDA, K.AWS_SQS}), Intent.DELIVER),
    (K.AWS_SQS, frozenset({K.AWS_LAMBDA}), Intent.CONSUME),
    (K.AWS_EVENTS_RULE, frozenset({K.AWS_LAMBDA}), Intent.NOTIFY),
    (K.AWS_APIGW, frozenset({K.AWS_LAMBDA}), Intent.INVOKE),
    # DynamoDB streams
    (K.AWS_DYNAMODB, frozenset({K.AWS_LAMBDA}), Intent.CONSUME),
    # default grant is write; reads are modelled with a separate edge
    (K.AWS_LAMBDA, frozenset({K.AWS_DYNAMODB}), Intent.WRITE),
    (K.AWS_LAMBDA, frozenset({K.AWS_SFN}), Intent.INVOKE),
    (K.AWS_KINESIS, frozenset({K.AWS_LAMBDA}), Intent.CONSUME),
    # GCP
    (K.GCP_STORAGE, frozenset({K.GCP_PUBSUB}), Intent.NOTIFY),
    (K.GCP_PUBSUB, frozenset({K.GCP_RUN}), Intent.NOTIFY),
    (K.GCP_RUN, frozenset({K.GCP_SECRET_MANAGER}), Intent.ACCESS),
]

FALLBACK_INTENT = Intent.NOTIFY

KindLike = Union[str, ResourceKind, PlanNodeType, None]


def classify_intent(source: KindLike, target: KindLike) -> Intent:
    """
    Intent of an edge from *source* to *target*.
    Accepts resource kinds, kind strings or plan-type tags ("s3", "gcs").
    """
    src = parse_kind(source)
    tgt = parse_kind(target)
    if src is None or tgt is None:
        return FALLBACK_INTENT

    for rule_source, rule_targets, intent in INTENT_RULES:
        if src is rule_source and tgt in rule_targets:
            return intent
    return FALLBACK_INTENT
