"""
Per-kind property schemas.

Each model is the fixed, typed property set a resource kind carries in the
deployment payload. Raw panel input goes through ``_migrate`` first: blank
values are dropped, legacy key aliases are renamed to their wire names and
values are coerced leniently, so building a model never fails and absent or
unusable values fall back to the declared default.
"""

import math
from typing import Any, ClassVar, Dict, Optional, Tuple, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]

_DROP = object()


def to_number(value: Any) -> Optional[Number]:
    """Numeric coercion; None when the value has no numeric reading."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return int(number)
    return number


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _shape(annotation: Any) -> str:
    if annotation is Any:
        return "any"
    args = get_args(annotation) if get_origin(annotation) is Union else (annotation,)
    bases = {get_origin(a) or a for a in args if a is not type(None)}
    if bases == {bool}:
        return "flag"
    if bases and bases <= {int, float}:
        return "number"
    if bases == {str}:
        return "text"
    if bases == {dict}:
        return "mapping"
    return "any"


def _coerce(shape: str, value: Any) -> Any:
    if shape == "flag":
        return bool(value)
    if shape == "number":
        number = to_number(value)
        return _DROP if number is None else number
    if shape == "text":
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return _DROP
        return str(value)
    if shape == "mapping":
        return dict(value) if isinstance(value, dict) else _DROP
    return value


class KindProps(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    # wire name -> legacy names, first present one wins
    LEGACY_KEYS: ClassVar[Dict[str, Tuple[str, ...]]] = {}

    @classmethod
    def prepare_raw(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Kind-specific reshaping after alias migration."""
        return data

    @model_validator(mode="before")
    @classmethod
    def _migrate(cls, raw: Any) -> Dict[str, Any]:
        data = {k: v for k, v in (raw or {}).items() if not _is_blank(v)} if isinstance(raw, dict) else {}

        for wire_key, legacy in cls.LEGACY_KEYS.items():
            if wire_key in data:
                continue
            for old_key in legacy:
                if old_key in data:
                    data[wire_key] = data[old_key]
                    break

        data = cls.prepare_raw(data)

        clean: Dict[str, Any] = {}
        for name, info in cls.model_fields.items():
            key = info.alias or name
            if key not in data or _is_blank(data[key]):
                continue
            value = _coerce(_shape(info.annotation), data[key])
            if value is not _DROP:
                clean[key] = value
        return clean

    def to_props(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# ============================================================
# AWS
# ============================================================

class LambdaProps(KindProps):
    LEGACY_KEYS = {
        "memory": ("memory_mb", "memoryMB"),
        "timeout": ("timeout_s", "timeoutSec"),
        "codeUri": ("package_path",),
    }

    runtime: str = "python3.12"
    memory: Number = 256
    timeout: Number = 30
    handler: str = "app.lambda_handler"
    code_uri: str = "src/processor"


class S3Props(KindProps):
    versioning: bool = True
    event_bridge: Optional[bool] = None  # resolved from connectivity


class SqsProps(KindProps):
    LEGACY_KEYS = {
        "visibilityTimeout": ("visibilityTimeoutSec",),
        "dlq": ("deadLetterTargetArn",),
        "physicalName": ("queueName",),
    }

    visibility_timeout: Number = 60
    dlq: Any = None
    physical_name: Optional[str] = None


class SnsProps(KindProps):
    LEGACY_KEYS = {"physicalName": ("topicName",)}

    display_name: Optional[str] = None
    physical_name: Optional[str] = None


class EventsRuleProps(KindProps):
    pattern: Any = None


class ApiGatewayProps(KindProps):
    api_name: Optional[str] = None


class DynamoDbProps(KindProps):
    LEGACY_KEYS = {
        "billing": ("billingMode",),
        "stream": ("streamEnabled",),
        "physicalName": ("tableName",),
    }

    partition_key: str = "pk"
    sort_key: Optional[str] = None
    billing: str = "PAY_PER_REQUEST"
    stream: bool = True
    physical_name: Optional[str] = None

    @classmethod
    def prepare_raw(cls, data):
        # the config panel stores keys as {"name": ..., "type": "S"}
        for key in ("partitionKey", "sortKey"):
            value = data.get(key)
            if isinstance(value, dict):
                name = value.get("name")
                if _is_blank(name):
                    data.pop(key)
                else:
                    data[key] = name
        return data


class SfnProps(KindProps):
    physical_name: Optional[str] = None


class KinesisProps(KindProps):
    LEGACY_KEYS = {
        "shards": ("shardCount",),
        "physicalName": ("streamName",),
    }

    shards: Number = 1
    physical_name: Optional[str] = None


# ============================================================
# GCP
# ============================================================

class GcsProps(KindProps):
    bucket_name: Optional[str] = None
    uniform_access: bool = True
    force_destroy: bool = False
    labels: Dict[str, Any] = {}


class PubSubProps(KindProps):
    topic_name: Optional[str] = None
    labels: Dict[str, Any] = {}


class CloudRunProps(KindProps):
    image: str = "gcr.io/cloudrun/hello"
    cpu: str = "1000m"
    memory: str = "512Mi"
    min_instances: Number = 0
    max_instances: Number = 10
    concurrency: Number = 80
    allow_unauthenticated: bool = True
    env: Dict[str, Any] = {}


class SecretManagerProps(KindProps):
    secret_id: Optional[str] = None
    secret_value: Optional[str] = None
    labels: Dict[str, Any] = {}


class FirestoreProps(KindProps):
    location_id: str = "us-central"
    database_id: str = "(default)"
