"""
Validation module for canvas service configuration.
"""

from infracanvas.validation.service_validator import (
    S3_BUCKET_RE,
    ServiceValidationResult,
    ServiceValidator,
    ValidationIssue,
    ValidationSeverity,
    are_all_services_configured,
    validate_all_services,
    validate_service,
    validate_services,
)

__all__ = [
    "S3_BUCKET_RE",
    "ServiceValidationResult",
    "ServiceValidator",
    "ValidationIssue",
    "ValidationSeverity",
    "are_all_services_configured",
    "validate_all_services",
    "validate_service",
    "validate_services",
]
