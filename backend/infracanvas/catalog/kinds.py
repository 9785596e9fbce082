# backend/infracanvas/catalog/kinds.py
"""
Resource Kind Catalog - visual type -> plan type -> provider wire kind

The canvas palette keeps short visual ids (s3, lambda, pubsub, ...). The plan
builder works with provider-agnostic plan types and the payload builder emits
provider-qualified resource kinds. Visual types are matched whole (case and
whitespace ignored); anything the catalog does not list resolves to the
provider's ``other`` kind. Provider arguments must name a Provider.
"""

import re
from enum import Enum
from typing import Dict, Optional, Union


class Provider(str, Enum):
    AWS = "aws"
    GCP = "gcp"


class PlanNodeType(str, Enum):
    """Provider-agnostic node tag used inside a Plan"""
    S3 = "s3"
    SQS = "sqs"
    LAMBDA = "lambda"
    DYNAMODB = "dynamodb"
    APIGATEWAY = "apigateway"
    SNS = "sns"
    EVENTS_RULE = "events_rule"
    SFN = "sfn"
    KINESIS = "kinesis"
    GCS = "gcs"
    PUBSUB = "pubsub"
    CLOUD_RUN = "run"
    SECRET_MANAGER = "secretmanager"
    FIRESTORE = "firestore"
    OTHER = "other"


class ResourceKind(str, Enum):
    """Provider-qualified resource kind sent over the wire"""
    AWS_S3 = "aws.s3"
    AWS_LAMBDA = "aws.lambda"
    AWS_SQS = "aws.sqs"
    AWS_SNS = "aws.sns"
    AWS_DYNAMODB = "aws.dynamodb"
    AWS_APIGW = "aws.apigw"
    AWS_EVENTS_RULE = "aws.events.rule"
    AWS_SFN = "aws.sfn"
    AWS_KINESIS = "aws.kinesis"
    AWS_OTHER = "aws.other"
    GCP_STORAGE = "gcp.storage"
    GCP_PUBSUB = "gcp.pubsub"
    GCP_RUN = "gcp.run"
    GCP_SECRET_MANAGER = "gcp.secretmanager"
    GCP_FIRESTORE = "gcp.firestore"
    GCP_OTHER = "gcp.other"

    @property
    def provider(self) -> Provider:
        return Provider(self.value.split(".", 1)[0])


class Intent(str, Enum):
    """Semantic relationship carried by an edge"""
    NOTIFY = "notify"
    CONSUME = "consume"
    INVOKE = "invoke"
    READ = "read"
    WRITE = "write"
    DELIVER = "deliver"
    ACCESS = "access"


class Family(Enum):
    """Role a resource plays in the graph, independent of provider"""
    STORAGE = "storage"
    QUEUE = "queue"
    FUNCTION = "function"
    TOPIC = "topic"
    TABLE = "table"
    API_GATEWAY = "api_gateway"
    EVENT_RULE = "event_rule"
    WORKFLOW = "workflow"
    STREAM = "stream"
    SERVICE = "service"
    SECRET = "secret"
    DOCUMENT_DB = "document_db"
    OTHER = "other"


# ============================================================
# VISUAL TYPE TABLES
# ============================================================

# Checked before the AWS table: GCP ids win whenever both could apply.
GCP_VISUAL_TYPES: Dict[str, PlanNodeType] = {
    "gcs": PlanNodeType.GCS,
    "storage": PlanNodeType.GCS,
    "gcpstorage": PlanNodeType.GCS,
    "gcp-storage": PlanNodeType.GCS,
    "cloudstorage": PlanNodeType.GCS,
    "pubsub": PlanNodeType.PUBSUB,
    "gcppubsub": PlanNodeType.PUBSUB,
    "run": PlanNodeType.CLOUD_RUN,
    "cloudrun": PlanNodeType.CLOUD_RUN,
    "cloud-run": PlanNodeType.CLOUD_RUN,
    "gcpcloudrun": PlanNodeType.CLOUD_RUN,
    "secretmanager": PlanNodeType.SECRET_MANAGER,
    "secret-manager": PlanNodeType.SECRET_MANAGER,
    "gcpsecretmanager": PlanNodeType.SECRET_MANAGER,
    "firestore": PlanNodeType.FIRESTORE,
    "gcpfirestore": PlanNodeType.FIRESTORE,
}

AWS_VISUAL_TYPES: Dict[str, PlanNodeType] = {
    "s3": PlanNodeType.S3,
    "sqs": PlanNodeType.SQS,
    "lambda": PlanNodeType.LAMBDA,
    "dynamodb": PlanNodeType.DYNAMODB,
    "apigateway": PlanNodeType.APIGATEWAY,
    "apigw": PlanNodeType.APIGATEWAY,
    "sns": PlanNodeType.SNS,
    "kinesis": PlanNodeType.KINESIS,
    "sfn": PlanNodeType.SFN,
    "stepfunctions": PlanNodeType.SFN,
    "events": PlanNodeType.EVENTS_RULE,
    "events.rule": PlanNodeType.EVENTS_RULE,
    "events_rule": PlanNodeType.EVENTS_RULE,
    "eventbridge": PlanNodeType.EVENTS_RULE,
    # provider-prefixed palette ids
    "awss3": PlanNodeType.S3,
    "aws-s3": PlanNodeType.S3,
    "awslambda": PlanNodeType.LAMBDA,
    "aws-lambda": PlanNodeType.LAMBDA,
    "awssqs": PlanNodeType.SQS,
    "aws-sqs": PlanNodeType.SQS,
    "awssns": PlanNodeType.SNS,
    "aws-sns": PlanNodeType.SNS,
    "awsdynamodb": PlanNodeType.DYNAMODB,
    "aws-dynamodb": PlanNodeType.DYNAMODB,
    # palette entries without a modelled kind
    "rds": PlanNodeType.OTHER,
    "ec2": PlanNodeType.OTHER,
    "cloudfront": PlanNodeType.OTHER,
}

# ============================================================
# KIND TABLES
# ============================================================

# Native kind of every modelled plan type. Providers that do not own the
# plan type resolve it to their own ``other`` kind.
_NATIVE_KIND: Dict[PlanNodeType, ResourceKind] = {
    PlanNodeType.S3: ResourceKind.AWS_S3,
    PlanNodeType.SQS: ResourceKind.AWS_SQS,
    PlanNodeType.LAMBDA: ResourceKind.AWS_LAMBDA,
    PlanNodeType.DYNAMODB: ResourceKind.AWS_DYNAMODB,
    PlanNodeType.APIGATEWAY: ResourceKind.AWS_APIGW,
    PlanNodeType.SNS: ResourceKind.AWS_SNS,
    PlanNodeType.EVENTS_RULE: ResourceKind.AWS_EVENTS_RULE,
    PlanNodeType.SFN: ResourceKind.AWS_SFN,
    PlanNodeType.KINESIS: ResourceKind.AWS_KINESIS,
    PlanNodeType.GCS: ResourceKind.GCP_STORAGE,
    PlanNodeType.PUBSUB: ResourceKind.GCP_PUBSUB,
    PlanNodeType.CLOUD_RUN: ResourceKind.GCP_RUN,
    PlanNodeType.SECRET_MANAGER: ResourceKind.GCP_SECRET_MANAGER,
    PlanNodeType.FIRESTORE: ResourceKind.GCP_FIRESTORE,
}

_OTHER_KIND: Dict[Provider, ResourceKind] = {
    Provider.AWS: ResourceKind.AWS_OTHER,
    Provider.GCP: ResourceKind.GCP_OTHER,
}

FAMILY: Dict[ResourceKind, Family] = {
    ResourceKind.AWS_S3: Family.STORAGE,
    ResourceKind.AWS_LAMBDA: Family.FUNCTION,
    ResourceKind.AWS_SQS: Family.QUEUE,
    ResourceKind.AWS_SNS: Family.TOPIC,
    ResourceKind.AWS_DYNAMODB: Family.TABLE,
    ResourceKind.AWS_APIGW: Family.API_GATEWAY,
    ResourceKind.AWS_EVENTS_RULE: Family.EVENT_RULE,
    ResourceKind.AWS_SFN: Family.WORKFLOW,
    ResourceKind.AWS_KINESIS: Family.STREAM,
    ResourceKind.AWS_OTHER: Family.OTHER,
    ResourceKind.GCP_STORAGE: Family.STORAGE,
    ResourceKind.GCP_PUBSUB: Family.TOPIC,
    ResourceKind.GCP_RUN: Family.SERVICE,
    ResourceKind.GCP_SECRET_MANAGER: Family.SECRET,
    ResourceKind.GCP_FIRESTORE: Family.DOCUMENT_DB,
    ResourceKind.GCP_OTHER: Family.OTHER,
}


# ============================================================
# LOOKUPS
# ============================================================

def _lookup_key(visual_type: str) -> str:
    """Whole visual type, lowercased with whitespace removed."""
    return re.sub(r"\s+", "", str(visual_type or "")).lower()


def plan_type_of(visual_type: str) -> PlanNodeType:
    """Resolve a canvas visual type to its plan type. Unknown -> OTHER."""
    key = _lookup_key(visual_type)
    if key in GCP_VISUAL_TYPES:
        return GCP_VISUAL_TYPES[key]
    return AWS_VISUAL_TYPES.get(key, PlanNodeType.OTHER)


def as_plan_type(value: Union[str, PlanNodeType, None]) -> PlanNodeType:
    if isinstance(value, PlanNodeType):
        return value
    try:
        return PlanNodeType(value)
    except ValueError:
        return PlanNodeType.OTHER


def as_provider(value: Union[str, Provider, None]) -> Provider:
    """None means AWS. Anything that is not a Provider value raises ValueError."""
    if isinstance(value, Provider):
        return value
    return Provider(str(value or Provider.AWS.value).lower())


def wire_kind(plan_type: Union[str, PlanNodeType], provider: Union[str, Provider] = Provider.AWS) -> ResourceKind:
    """Provider-qualified kind for a plan type; foreign or unknown types -> <provider>.other"""
    provider = as_provider(provider)
    native = _NATIVE_KIND.get(as_plan_type(plan_type))
    if native is None or native.provider is not provider:
        return _OTHER_KIND[provider]
    return native


def kind_of(visual_type: str, provider: Union[str, Provider] = Provider.AWS) -> ResourceKind:
    """
    Canvas visual type -> resource kind for *provider*.
    Total over visual types; *provider* must name a Provider.
    """
    return wire_kind(plan_type_of(visual_type), provider)


def native_kind_of(visual_type: str) -> Optional[ResourceKind]:
    """Kind in the provider that owns the visual type, None when unmodelled."""
    return _NATIVE_KIND.get(plan_type_of(visual_type))


def parse_kind(value: Union[str, ResourceKind, PlanNodeType, None]) -> Optional[ResourceKind]:
    """
    Lift a kind string or a plan-type tag to a ResourceKind.
    Plan-type tags resolve to their native kind. Returns None for anything else.
    """
    if isinstance(value, ResourceKind):
        return value
    if value is None:
        return None
    text = value.value if isinstance(value, PlanNodeType) else str(value)
    try:
        return ResourceKind(text)
    except ValueError:
        pass
    try:
        return _NATIVE_KIND.get(PlanNodeType(text))
    except ValueError:
        return None


def family_of(kind: Union[str, ResourceKind, PlanNodeType, None]) -> Family:
    resolved = parse_kind(kind)
    if resolved is None:
        return Family.OTHER
    return FAMILY[resolved]


# ============================================================
# CATALOG INTEGRITY
# ============================================================

def _check_catalog() -> None:
    """Every kind needs a family and every modelled plan type a native kind."""
    missing_family = [k.value for k in ResourceKind if k not in FAMILY]
    if missing_family:
        raise RuntimeError(f"resource kinds without a family: {missing_family}")

    missing_kind = [
        t.value for t in PlanNodeType
        if t is not PlanNodeType.OTHER and t not in _NATIVE_KIND
    ]
    if missing_kind:
        raise RuntimeError(f"plan types without a resource kind: {missing_kind}")

    unreachable = [
        k.value for k in ResourceKind
        if k not in _OTHER_KIND.values() and k not in _NATIVE_KIND.values()
    ]
    if unreachable:
        raise RuntimeError(f"resource kinds no plan type resolves to: {unreachable}")


_check_catalog()
