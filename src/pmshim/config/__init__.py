"""Configuration module for pmshim.

Provides package manifest loading, parsing, and validation with support for:
- YAML or JSON (package.json style) manifests
- Manifest selection via --manifest or PMSHIM_MANIFEST
- Environment variable expansion
"""

from pmshim.config.models import (
    DEFAULT_BINARY_NAME,
    PackageIdentity,
    ShimConfig,
)
from pmshim.config.loader import find_manifest, load_manifest
from pmshim.config.validation import validate_manifest, ManifestValidationWarning

__all__ = [
    "DEFAULT_BINARY_NAME",
    "PackageIdentity",
    "ShimConfig",
    "find_manifest",
    "load_manifest",
    "validate_manifest",
    "ManifestValidationWarning",
]
