"""
Startup validation utilities to check configuration before a demo runs.

Every demo talks to hosted APIs, so the only thing worth checking up front is
that the keys it needs are present; optional keys only produce warnings.
"""

import os
from typing import Iterable, List, Optional

from llm_playground.utils.logger import logger


class StartupValidator:
    """Collects missing API keys for one demo and reports them."""

    def __init__(self, required_keys: Iterable[str], optional_keys: Optional[Iterable[str]] = None):
        self.required_keys = list(required_keys)
        self.optional_keys = list(optional_keys or [])
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate_all(self) -> bool:
        """
        Run all validation checks.

        Returns:
            True if all critical checks pass, False otherwise.
        """
        self.errors = []
        self.warnings = []

        self._validate_required_keys()
        self._validate_optional_keys()

        self._report_results()

        return len(self.errors) == 0

    def _validate_required_keys(self) -> None:
        missing = [key for key in self.required_keys if not os.environ.get(key)]
        if missing:
            self.errors.append(f"Missing required environment variables: {', '.join(missing)}")

    def _validate_optional_keys(self) -> None:
        for key in self.optional_keys:
            if not os.environ.get(key):
                self.warnings.append(f"Optional config {key} not set, mock data will be used")

    def _report_results(self) -> None:
        """Report validation results."""
        if self.errors:
            logger.error("StartupValidator: %d critical errors found:", len(self.errors))
            for error in self.errors:
                logger.error("  - %s", error)

        if self.warnings:
            logger.warning("StartupValidator: %d warnings found:", len(self.warnings))
            for warning in self.warnings:
                logger.warning("  - %s", warning)

        if not self.errors and not self.warnings:
            logger.info("StartupValidator: All validation checks passed successfully")
        elif not self.errors:
            logger.info("StartupValidator: Critical validation passed with %d warnings", len(self.warnings))


def validate_demo_environment(
    demo_name: str,
    required_keys: Iterable[str],
    optional_keys: Optional[Iterable[str]] = None,
) -> bool:
    """
    Validate the environment for ``demo_name``.

    Returns:
        True if every required key is set, False otherwise.
    """
    logger.info("StartupValidator: Validating environment for demo '%s'", demo_name)
    validator = StartupValidator(required_keys, optional_keys)
    return validator.validate_all()
