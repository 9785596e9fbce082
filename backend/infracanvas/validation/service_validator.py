"""
Service Validator - checks every canvas node carries the fields its kind needs.

Runs before compile, deploy and autosave. Pure: it only reads the nodes, so it
is safe to call speculatively on every edit.

Catches:
- Services never configured
- Missing region
- Missing per-kind required fields (runtime, bucket name, image, ...)
- Bucket names that are not DNS-compatible
- Node types without a modelled resource kind (warning only)
"""

import re
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from infracanvas.catalog import ResourceKind, native_kind_of
from infracanvas.ir.graph import GraphNode


class ValidationSeverity(Enum):
    ERROR = "error"      # blocks compile / deploy / autosave
    WARNING = "warning"  # compiles, but probably not what the user meant


S3_BUCKET_RE = re.compile(
    r"^(?!\d+\.)(?!-)(?!.*--)(?!.*\.$)(?!.*\.-)[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$"
)


@dataclass
class ValidationIssue:
    """A single problem found on one service node"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    node_id: str
    field_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "node_id": self.node_id,
            "field": self.field_name,
        }


@dataclass
class ServiceValidationResult:
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    def errors_by_node(self) -> Dict[str, List[str]]:
        """node id -> error messages, only for nodes with at least one error"""
        grouped: Dict[str, List[str]] = OrderedDict()
        for issue in self.issues:
            if issue.severity == ValidationSeverity.ERROR:
                grouped.setdefault(issue.node_id, []).append(issue.message)
        return dict(grouped)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "issues": [i.to_dict() for i in self.issues],
            "errors": self.errors_by_node(),
        }


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class ServiceValidator:
    """
    Validates canvas nodes against the per-kind required fields.

    Usage:
        result = ServiceValidator().validate(nodes)
        if not result.is_valid:
            for node_id, messages in result.errors_by_node().items():
                ...
    """

    def __init__(self):
        self._kind_checks: Dict[ResourceKind, Callable[[GraphNode, str, Dict[str, Any]], List[ValidationIssue]]] = {
            ResourceKind.AWS_LAMBDA: self._check_lambda,
            ResourceKind.AWS_S3: self._check_s3,
            ResourceKind.AWS_SQS: self._required("queueName", "Queue name"),
            ResourceKind.AWS_SNS: self._required("topicName", "Topic name"),
            ResourceKind.AWS_DYNAMODB: self._required("tableName", "Table name"),
            ResourceKind.AWS_KINESIS: self._required("streamName", "Stream name"),
            ResourceKind.GCP_STORAGE: self._check_gcs,
            ResourceKind.GCP_PUBSUB: self._required("topicName", "Topic name"),
            ResourceKind.GCP_RUN: self._required("image", "Container image"),
            ResourceKind.GCP_FIRESTORE: self._required("locationId", "Location ID"),
        }

    def validate(self, nodes: Iterable[GraphNode]) -> ServiceValidationResult:
        issues: List[ValidationIssue] = []
        for node in nodes:
            issues.extend(self.validate_node(node))
        return ServiceValidationResult(issues=issues)

    def validate_node(self, node: GraphNode) -> List[ValidationIssue]:
        label = node.display_label or node.id

        if node.config is None:
            return [self._error(
                node, "NOT_CONFIGURED",
                f"{label} has not been configured. Please click on the service to configure it.",
            )]

        details = node.details
        issues: List[ValidationIssue] = []

        if not (_text(node.config.region) or _text(details.get("region"))):
            issues.append(self._error(node, "REGION_REQUIRED", f"{label}: Region is required", "region"))

        kind = native_kind_of(node.visual_type)
        if kind is None:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.WARNING,
                code="UNMODELLED_KIND",
                message=f"{label}: '{node.visual_type}' has no dedicated resource kind and deploys as 'other'",
                node_id=node.id,
            ))
            return issues

        check = self._kind_checks.get(kind)
        if check:
            issues.extend(check(node, label, details))
        return issues

    # ---------- helpers ----------

    @staticmethod
    def _error(node: GraphNode, code: str, message: str, field_name: Optional[str] = None) -> ValidationIssue:
        return ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code=code,
            message=message,
            node_id=node.id,
            field_name=field_name,
        )

    def _required(self, key: str, title: str):
        def check(node: GraphNode, label: str, details: Dict[str, Any]) -> List[ValidationIssue]:
            if _text(details.get(key)):
                return []
            return [self._error(node, "FIELD_REQUIRED", f"{label}: {title} is required", key)]
        return check

    # ---------- per-kind checks ----------

    def _check_lambda(self, node, label, details):
        issues = []
        if not _text(details.get("runtime")):
            issues.append(self._error(node, "FIELD_REQUIRED", f"{label}: Runtime is required", "runtime"))
        if not _text(details.get("handler")):
            issues.append(self._error(node, "FIELD_REQUIRED", f"{label}: Handler is required", "handler"))
        return issues

    def _check_s3(self, node, label, details):
        bucket = _text(details.get("bucketName"))
        if not bucket:
            return [self._error(node, "FIELD_REQUIRED", f"{label}: Bucket name is required", "bucketName")]
        if not S3_BUCKET_RE.match(bucket):
            return [self._error(
                node, "INVALID_BUCKET_NAME",
                f"{label}: Bucket name must be 3-63 chars, lowercase letters, numbers, dots, hyphens",
                "bucketName",
            )]
        return []

    def _check_gcs(self, node, label, details):
        bucket = _text(details.get("bucketName"))
        if not bucket:
            return [self._error(node, "FIELD_REQUIRED", f"{label}: Bucket name is required", "bucketName")]
        if not 3 <= len(bucket) <= 63:
            return [self._error(
                node, "INVALID_BUCKET_NAME",
                f"{label}: Bucket name must be 3-63 characters",
                "bucketName",
            )]
        return []


def validate_services(nodes: Iterable[GraphNode]) -> ServiceValidationResult:
    return ServiceValidator().validate(nodes)


def validate_service(node: GraphNode) -> List[str]:
    """Error messages for one node; empty when it is fully configured."""
    return [
        issue.message
        for issue in ServiceValidator().validate_node(node)
        if issue.severity == ValidationSeverity.ERROR
    ]


def validate_all_services(nodes: Iterable[GraphNode]) -> Dict[str, List[str]]:
    """node id -> error messages, for failing nodes only."""
    return validate_services(nodes).errors_by_node()


def are_all_services_configured(nodes: Iterable[GraphNode]) -> bool:
    return validate_services(nodes).is_valid
