"""Diagnostics recorded when a graph mutation is rejected."""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Severity level of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueKind(str, Enum):
    """Why a request was rejected."""

    VALIDATION = "validation"  # a precondition failed
    CONSISTENCY = "consistency"  # connector bookkeeping was already broken


@dataclass
class Diagnostic:
    """A single rejected request."""

    kind: IssueKind
    message: str
    severity: Severity
    operation: str
    request: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"{self.severity.value.upper()}: {self.kind.value} "
            f"[{self.operation}] - {self.message}"
        )


@dataclass
class DiagnosticLog:
    """Collects rejections and forwards them to the logging system."""

    issues: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        """Get all error-level diagnostics."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        """Get all warning-level diagnostics."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def consistency_errors(self) -> list[Diagnostic]:
        """Get diagnostics reporting broken connector bookkeeping."""
        return [i for i in self.issues if i.kind == IssueKind.CONSISTENCY]

    @property
    def messages(self) -> list[str]:
        """Reason strings in the order they were reported."""
        return [i.message for i in self.issues]

    @property
    def is_clean(self) -> bool:
        """True when nothing has been rejected."""
        return not self.issues

    def reject(
        self, operation: str, message: str, request: BaseModel | dict | None = None
    ) -> None:
        """Record a failed precondition for ``request``."""
        self._report(IssueKind.VALIDATION, Severity.WARNING, operation, message, request)

    def inconsistent(
        self, operation: str, message: str, request: BaseModel | dict | None = None
    ) -> None:
        """Record a connector bookkeeping violation found while handling ``request``."""
        self._report(IssueKind.CONSISTENCY, Severity.ERROR, operation, message, request)

    def add(self, diagnostic: Diagnostic) -> None:
        """Add an already-built diagnostic without logging it."""
        self.issues.append(diagnostic)

    def merge(self, other: "DiagnosticLog") -> None:
        """Merge another log into this one."""
        self.issues.extend(other.issues)

    def _report(
        self,
        kind: IssueKind,
        severity: Severity,
        operation: str,
        message: str,
        request: BaseModel | dict | None,
    ) -> None:
        payload = _serialize(request)
        level = logging.ERROR if severity == Severity.ERROR else logging.WARNING
        logger.log(level, "%s", message)
        logger.log(level, "%s", json.dumps(payload, sort_keys=True))
        self.issues.append(
            Diagnostic(
                kind=kind,
                message=message,
                severity=severity,
                operation=operation,
                request=payload,
            )
        )


def _serialize(request: BaseModel | dict | None) -> dict[str, Any]:
    if request is None:
        return {}
    if isinstance(request, BaseModel):
        return request.model_dump(mode="json")
    return dict(request)
