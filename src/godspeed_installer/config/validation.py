"""Configuration validation for the installer.

Unknown keys produce warnings with a "did you mean" suggestion; values of
the wrong type are errors that stop the run before anything is installed.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set

from godspeed_installer.core.logging import get_logger

LOGGER = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config cannot be used
    WARNING = "warning"  # Likely mistake but config usable


@dataclass
class ConfigValidationIssue:
    """A validation issue for configuration with severity."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        text = f"{self.source}: {self.message}"
        if self.suggestion:
            text += f" (did you mean '{self.suggestion}'?)"
        return text


VALID_TOP_LEVEL_KEYS: Set[str] = {
    "version",
    "shell_profile",
    "versions",
    "packages",
    "daemon",
    "secrets",
}

# Section name -> {key: expected type}
SECTION_SCHEMAS: Dict[str, Dict[str, type]] = {
    "versions": {"daemon": str, "nvm": str},
    "packages": {"cli": str, "rag_node": str, "pnpm": str},
    "daemon": {"set_executable": bool},
    "secrets": {"env_key": str},
}


def _suggest_key(key: str, valid_keys: Iterable[str]) -> Optional[str]:
    matches = get_close_matches(key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(issue: ConfigValidationIssue) -> None:
    LOGGER.warning(str(issue))


def _unknown_key(
    key: str, valid_keys: Iterable[str], source: str, prefix: str = ""
) -> ConfigValidationIssue:
    issue = ConfigValidationIssue(
        message=f"Unknown key '{prefix}{key}'",
        source=source,
        severity=ValidationSeverity.WARNING,
        key=f"{prefix}{key}",
        suggestion=_suggest_key(key, valid_keys),
    )
    _log_warning(issue)
    return issue


def _type_error(key: str, expected: str, value: Any, source: str) -> ConfigValidationIssue:
    return ConfigValidationIssue(
        message=f"'{key}' must be {expected}, got {type(value).__name__}",
        source=source,
        severity=ValidationSeverity.ERROR,
        key=key,
    )


def _unquoted_number(key: str, value: float, source: str) -> ConfigValidationIssue:
    return ConfigValidationIssue(
        message=f"'{key}' must be a quoted string, got the number {value!r}; quote the version as written",
        source=source,
        severity=ValidationSeverity.ERROR,
        key=key,
    )


def validate_config(data: Dict[str, Any], source: str) -> List[ConfigValidationIssue]:
    """Validate a configuration dictionary.

    Args:
        data: Parsed configuration mapping.
        source: File path used in messages.

    Returns:
        All issues found; callers decide what to do with errors.
    """
    issues: List[ConfigValidationIssue] = []

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            issues.append(_unknown_key(key, VALID_TOP_LEVEL_KEYS, source))

    version = data.get("version")
    if version is not None and (isinstance(version, bool) or not isinstance(version, int)):
        issues.append(_type_error("version", "an integer", version, source))

    shell_profile = data.get("shell_profile")
    if shell_profile is not None and not isinstance(shell_profile, str):
        issues.append(_type_error("shell_profile", "a string", shell_profile, source))

    for section, schema in SECTION_SCHEMAS.items():
        section_data = data.get(section)
        if section_data is None:
            continue
        if not isinstance(section_data, dict):
            issues.append(_type_error(section, "a mapping", section_data, source))
            continue

        for key, value in section_data.items():
            expected = schema.get(key)
            if expected is None:
                issues.append(_unknown_key(key, schema.keys(), source, prefix=f"{section}."))
                continue
            if value is None:
                continue
            if expected is str and isinstance(value, float):
                # YAML reads an unquoted 1.10 as the float 1.1.
                issues.append(_unquoted_number(f"{section}.{key}", value, source))
                continue
            if expected is str and isinstance(value, int) and not isinstance(value, bool):
                continue
            if not isinstance(value, expected):
                article = "a boolean" if expected is bool else "a string"
                issues.append(_type_error(f"{section}.{key}", article, value, source))

    return issues


def has_errors(issues: Iterable[ConfigValidationIssue]) -> bool:
    return any(issue.severity is ValidationSeverity.ERROR for issue in issues)
