"""Manifest validation for pmshim.

Validates known manifest keys and warns on unknown ones. Manifests are often
a full ``package.json``, so unknown keys never fail loading.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from pmshim.core.logging import get_logger

LOGGER = get_logger(__name__)

# Keys pmshim reads
VALID_TOP_LEVEL_KEYS: Set[str] = {
    "name",
    "version",
    "repository",
    "binary",
    "install_root",
}

# Keys commonly found in package.json style manifests, accepted silently
PASSTHROUGH_KEYS: Set[str] = {
    "description",
    "license",
    "homepage",
    "bugs",
    "author",
    "keywords",
    "bin",
    "main",
    "scripts",
    "files",
    "engines",
    "os",
    "cpu",
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "publishConfig",
    "private",
}

VALID_REPOSITORY_KEYS: Set[str] = {
    "type",
    "url",
    "directory",
}


@dataclass
class ManifestValidationWarning:
    """A validation warning for a manifest."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_manifest(
    data: Dict[str, Any],
    source: str,
) -> List[ManifestValidationWarning]:
    """Validate a manifest dictionary.

    Does not raise exceptions - returns warnings instead. Missing required
    fields are reported by the loader, not here.

    Args:
        data: Manifest dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ManifestValidationWarning] = []

    if not isinstance(data, dict):
        warnings.append(ManifestValidationWarning(
            message=f"Manifest must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings

    for key in data.keys():
        if key in VALID_TOP_LEVEL_KEYS or key in PASSTHROUGH_KEYS:
            continue
        warning = ManifestValidationWarning(
            message=f"Unknown top-level key '{key}'",
            source=source,
            key=key,
            suggestion=_suggest_key(key, VALID_TOP_LEVEL_KEYS),
        )
        warnings.append(warning)
        _log_warning(warning)

    for key in ("name", "version", "binary"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            warning = ManifestValidationWarning(
                message=f"'{key}' must be a string, got {type(value).__name__}",
                source=source,
                key=key,
            )
            warnings.append(warning)
            _log_warning(warning)

    repository = data.get("repository")
    if repository is not None:
        if isinstance(repository, dict):
            for key in repository.keys():
                if key not in VALID_REPOSITORY_KEYS:
                    warning = ManifestValidationWarning(
                        message=f"Unknown key 'repository.{key}'",
                        source=source,
                        key=f"repository.{key}",
                        suggestion=_suggest_key(key, VALID_REPOSITORY_KEYS),
                    )
                    warnings.append(warning)
                    _log_warning(warning)
        elif not isinstance(repository, str):
            warning = ManifestValidationWarning(
                message=(
                    "'repository' must be a string or a mapping, "
                    f"got {type(repository).__name__}"
                ),
                source=source,
                key="repository",
            )
            warnings.append(warning)
            _log_warning(warning)

    return warnings


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo."""
    matches = get_close_matches(invalid_key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ManifestValidationWarning) -> None:
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)
