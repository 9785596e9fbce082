from typing import Any, Dict, Type, Union

from infracanvas.catalog import ResourceKind, parse_kind
from infracanvas.ir import props as p

# -------------------------
# Kind -> property schema
# -------------------------

PROPS_MODELS: Dict[ResourceKind, Type[p.KindProps]] = {
    ResourceKind.AWS_LAMBDA: p.LambdaProps,
    ResourceKind.AWS_S3: p.S3Props,
    ResourceKind.AWS_SQS: p.SqsProps,
    ResourceKind.AWS_SNS: p.SnsProps,
    ResourceKind.AWS_EVENTS_RULE: p.EventsRuleProps,
    ResourceKind.AWS_APIGW: p.ApiGatewayProps,
    ResourceKind.AWS_DYNAMODB: p.DynamoDbProps,
    ResourceKind.AWS_SFN: p.SfnProps,
    ResourceKind.AWS_KINESIS: p.KinesisProps,
    ResourceKind.GCP_STORAGE: p.GcsProps,
    ResourceKind.GCP_PUBSUB: p.PubSubProps,
    ResourceKind.GCP_RUN: p.CloudRunProps,
    ResourceKind.GCP_SECRET_MANAGER: p.SecretManagerProps,
    ResourceKind.GCP_FIRESTORE: p.FirestoreProps,
}

# kinds that keep the raw blob as-is
PASSTHROUGH_KINDS = {ResourceKind.AWS_OTHER, ResourceKind.GCP_OTHER}

_unmapped = set(ResourceKind) - set(PROPS_MODELS) - PASSTHROUGH_KINDS
if _unmapped:
    raise RuntimeError(f"resource kinds without a property schema: {sorted(k.value for k in _unmapped)}")


def normalize_props(kind: Union[str, ResourceKind], raw_details: Any) -> Dict[str, Any]:
    """
    Map loosely-typed panel details onto the fixed property set of *kind*.
    Unknown and ``other`` kinds get a shallow copy of the raw details.
    """
    model = PROPS_MODELS.get(parse_kind(kind))
    if model is None:
        return dict(raw_details) if isinstance(raw_details, dict) else {}
    return model.model_validate(raw_details).to_props()
