# =============================================================================
# File: validation_report.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Severity(str, Enum):
    CRITICAL = "critical"
    MISSING = "missing"
    WARNING = "warning"
    INFO = "info"


class ValidationOutcome(str, Enum):
    HALT = "halt"
    PROCEED = "proceed"


class Finding(BaseModel):
    """
    A single configuration validation result.

    Attributes:
        severity (Severity): How serious the finding is.
        setting (str): Name of the environment setting the finding is about.
        message (str): Human-readable description for the operator.
    """

    severity: Severity = Field(description="Finding severity")
    setting: str = Field(description="Originating setting name")
    message: str = Field(description="Human-readable finding message")


class ValidationReport(BaseModel):
    """
    Findings of one validation run, grouped by severity in check order.
    """

    mode: str = Field(description="Runtime mode the snapshot was validated under")
    critical: List[Finding] = Field(default_factory=list)
    missing: List[Finding] = Field(default_factory=list)
    warnings: List[Finding] = Field(default_factory=list)
    info: List[Finding] = Field(default_factory=list)
    outcome: ValidationOutcome = Field(default=ValidationOutcome.PROCEED)

    @property
    def should_halt(self) -> bool:
        return self.outcome is ValidationOutcome.HALT

    def messages(self, severity: Severity) -> List[str]:
        """Return the messages recorded for one severity, in order."""
        bucket = {
            Severity.CRITICAL: self.critical,
            Severity.MISSING: self.missing,
            Severity.WARNING: self.warnings,
            Severity.INFO: self.info,
        }[Severity(severity)]
        return [finding.message for finding in bucket]
