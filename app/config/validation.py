# =============================================================================
# File: validation.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional

from app.config import settings_catalog as catalog
from app.logger import get_logger
from app.models.validation_report import (
    Finding,
    Severity,
    ValidationOutcome,
    ValidationReport,
)
from app.utils.log_sanitizer import sanitize_for_log
from app.utils.type_checker import parse_leading_int

_CHAT_ID = re.compile(r"-?[0-9]+", re.ASCII)


@dataclass(frozen=True)
class Rule:
    """
    One configuration check.

    ``check`` receives the raw setting value and yields the offending parts;
    each yielded part produces one finding with ``message`` formatted using
    ``{value}``. Rules with ``require_present`` are skipped when the setting
    is absent or empty.
    """

    setting: str
    severity: Severity
    message: str
    check: Callable[[Optional[str]], Iterable[str]]
    require_present: bool = True


def _when(predicate: Callable[[Optional[str]], bool]) -> Callable[[Optional[str]], List[str]]:
    return lambda value: [value or ""] if predicate(value) else []


def _int_below(minimum: int) -> Callable[[Optional[str]], bool]:
    def predicate(value: Optional[str]) -> bool:
        parsed = parse_leading_int(value)
        return parsed is None or parsed < minimum

    return predicate


def _port_out_of_range(value: Optional[str]) -> bool:
    port = parse_leading_int(value)
    return port is None or port < catalog.MIN_PORT or port > catalog.MAX_PORT


def _bad_origins(value: Optional[str]) -> List[str]:
    offending = []
    for origin in (value or "").split(","):
        trimmed = origin.strip()
        if trimmed and not trimmed.startswith(("http://", "https://")):
            offending.append(trimmed)
    return offending


RULES = (
    Rule(
        "JWT_SECRET",
        Severity.CRITICAL,
        f"JWT_SECRET must be at least {catalog.MIN_JWT_SECRET_LENGTH} characters long for security",
        _when(lambda v: len(v) < catalog.MIN_JWT_SECRET_LENGTH),
    ),
    Rule(
        "JWT_SECRET",
        Severity.CRITICAL,
        "JWT_SECRET is using default value - CHANGE IT IMMEDIATELY!",
        _when(lambda v: v == catalog.DEFAULT_JWT_SECRET),
    ),
    Rule(
        "JWT_SECRET",
        Severity.CRITICAL,
        "JWT_SECRET appears to be using example value",
        _when(lambda v: catalog.EXAMPLE_JWT_SECRET_MARKER in v),
    ),
    Rule(
        "TELEGRAM_BOT_TOKEN",
        Severity.WARNING,
        "TELEGRAM_BOT_TOKEN appears to be using example value",
        _when(lambda v: catalog.EXAMPLE_BOT_TOKEN_MARKER in v),
    ),
    # An absent PORT is reported here as well as under missing settings.
    Rule(
        "PORT",
        Severity.WARNING,
        f"PORT should be a valid port number ({catalog.MIN_PORT}-{catalog.MAX_PORT})",
        _when(_port_out_of_range),
        require_present=False,
    ),
    Rule(
        "RATE_LIMIT_WINDOW_MS",
        Severity.WARNING,
        f"RATE_LIMIT_WINDOW_MS should be at least {catalog.MIN_RATE_LIMIT_WINDOW_MS}ms",
        _when(_int_below(catalog.MIN_RATE_LIMIT_WINDOW_MS)),
    ),
    Rule(
        "RATE_LIMIT_MAX_REQUESTS",
        Severity.WARNING,
        "RATE_LIMIT_MAX_REQUESTS should be a positive number",
        _when(_int_below(catalog.MIN_RATE_LIMIT_MAX_REQUESTS)),
    ),
    Rule(
        "TELEGRAM_CHAT_ID",
        Severity.WARNING,
        "TELEGRAM_CHAT_ID should be a numeric value",
        _when(lambda v: _CHAT_ID.fullmatch(v) is None),
    ),
    Rule(
        "ALLOWED_ORIGINS",
        Severity.WARNING,
        "Invalid origin format: {value}. Should start with http:// or https://",
        _bad_origins,
    ),
)


class ConfigValidator:
    """
    Validates a snapshot of environment settings before the server starts.

    The validator only reads the snapshot and writes to its reporter; it
    never raises for bad values and never ends the process. Callers act on
    ``ValidationReport.outcome``.
    """

    def __init__(self, reporter: Optional[logging.Logger] = None, rules=RULES):
        self.reporter = reporter or get_logger("config_validation")
        self.rules = tuple(rules)

    def validate(self, environ: Mapping[str, str], mode: str) -> ValidationReport:
        """
        Run every check against ``environ`` and report the findings.

        Args:
            environ: Setting name to value mapping, usually ``os.environ``
            mode: Runtime mode such as "development" or "production"

        Returns:
            ValidationReport: Findings grouped by severity and the outcome
        """
        report = self.evaluate(environ, mode)
        self._report(report)
        return report

    def evaluate(self, environ: Mapping[str, str], mode: str) -> ValidationReport:
        """Compute findings and outcome without writing to the reporter."""
        mode = mode or ""
        report = ValidationReport(mode=mode)

        for name in catalog.REQUIRED_SETTINGS:
            if not environ.get(name):
                report.missing.append(
                    Finding(severity=Severity.MISSING, setting=name, message=name)
                )

        for rule in self.rules:
            value = environ.get(rule.setting) or None
            if value is None and rule.require_present:
                continue
            for part in rule.check(value):
                message = rule.message.format(value=sanitize_for_log(part))
                self._bucket(report, rule.severity).append(
                    Finding(severity=rule.severity, setting=rule.setting, message=message)
                )

        if mode == catalog.DEVELOPMENT:
            for name in catalog.OPTIONAL_SETTINGS:
                if not environ.get(name):
                    report.info.append(
                        Finding(severity=Severity.INFO, setting=name, message=name)
                    )

        halted_by_critical = bool(report.critical) and mode == catalog.PRODUCTION
        if report.missing or halted_by_critical:
            report.outcome = ValidationOutcome.HALT
        return report

    @staticmethod
    def _bucket(report: ValidationReport, severity: Severity) -> List[Finding]:
        if severity is Severity.CRITICAL:
            return report.critical
        if severity is Severity.MISSING:
            return report.missing
        if severity is Severity.WARNING:
            return report.warnings
        return report.info

    def _report(self, report: ValidationReport) -> None:
        log = self.reporter

        if report.critical:
            log.critical("CRITICAL SECURITY ISSUES:")
            for finding in report.critical:
                log.critical(f"   - {finding.message}")
            if report.mode == catalog.PRODUCTION:
                log.critical("Cannot start in production with critical security issues!")
                return

        if report.missing:
            log.error("Missing required environment variables:")
            for finding in report.missing:
                log.error(f"   - {finding.message}")
            log.error("Please check your .env file and .env.example")
            return

        if report.warnings:
            log.warning("Environment warnings:")
            for finding in report.warnings:
                log.warning(f"   - {finding.message}")

        log.info("Environment variables validated")

        if report.info:
            log.info("Optional environment variables not set:")
            for finding in report.info:
                log.info(f"   - {finding.message}")


def validate_config(
    environ: Mapping[str, str], mode: str, reporter: Optional[logging.Logger] = None
) -> ValidationReport:
    """Validates ``environ`` under ``mode`` with a default validator."""
    return ConfigValidator(reporter=reporter).validate(environ, mode)
