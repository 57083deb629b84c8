"""Manifest file loading.

Handles loading the package manifest from YAML (or JSON, which YAML reads)
with:
- Explicit manifest path (--manifest)
- PMSHIM_MANIFEST environment variable
- The manifest bundled with the package
- Environment variable expansion (${VAR})
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pmshim.config.models import DEFAULT_BINARY_NAME, PackageIdentity, ShimConfig
from pmshim.config.validation import validate_manifest
from pmshim.core.errors import ConfigError
from pmshim.core.logging import get_logger

LOGGER = get_logger(__name__)

# Environment variable pointing at a manifest file
PMSHIM_MANIFEST_ENV = "PMSHIM_MANIFEST"

# Manifest shipped inside the package
BUNDLED_MANIFEST_PATH = Path(__file__).resolve().parent.parent / "manifest.yml"

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def load_manifest(cli_manifest_path: Optional[Path] = None) -> ShimConfig:
    """Load the package manifest.

    Precedence (highest to lowest):
    1. Custom manifest file (cli_manifest_path)
    2. PMSHIM_MANIFEST environment variable
    3. Manifest bundled with the package

    Args:
        cli_manifest_path: Optional path to a manifest file (--manifest flag).

    Returns:
        Typed ShimConfig instance.

    Raises:
        ConfigError: If the manifest doesn't exist, can't be parsed, or lacks
            a name or version.
    """
    path = find_manifest(cli_manifest_path)
    if not path.exists():
        raise ConfigError(f"Manifest file not found: {path}")

    try:
        data = load_yaml_file(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read manifest {path}: {e}") from e

    validate_manifest(data, source=str(path))
    config = dict_to_config(data, base_dir=path.parent)
    config.manifest_source = str(path)

    LOGGER.debug(f"Manifest loaded from {path}")
    return config


def find_manifest(cli_manifest_path: Optional[Path] = None) -> Path:
    """Pick the manifest file to load.

    Args:
        cli_manifest_path: Path given on the command line, if any.

    Returns:
        Path to the manifest. It is not checked for existence.
    """
    if cli_manifest_path:
        return Path(cli_manifest_path).expanduser()

    env_path = os.environ.get(PMSHIM_MANIFEST_ENV)
    if env_path:
        return Path(env_path).expanduser()

    return BUNDLED_MANIFEST_PATH


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML manifest file.

    Performs environment variable expansion on string values.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed dictionary.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
        FileNotFoundError: If file doesn't exist.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Manifest must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in manifest values.

    Supports ${VAR} and ${VAR:-default} syntax.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def dict_to_config(data: Dict[str, Any], base_dir: Optional[Path] = None) -> ShimConfig:
    """Convert a manifest dict to a typed ShimConfig.

    Args:
        data: Manifest dictionary.
        base_dir: Directory that a relative ``install_root`` is resolved
            against. Defaults to the current directory.

    Returns:
        Typed ShimConfig instance.

    Raises:
        ConfigError: If ``name`` or ``version`` is missing.
    """
    name = data.get("name")
    if not name:
        raise ConfigError("Package name not found in manifest")

    version = data.get("version")
    if not version:
        raise ConfigError("Package version not found in manifest")
    version = str(version).strip()
    if version.startswith("v"):
        version = version[1:]

    package = PackageIdentity(
        name=str(name),
        version=version,
        repository_url=_repository_url(data.get("repository")),
    )

    install_root: Optional[Path] = None
    raw_root = data.get("install_root")
    if raw_root:
        install_root = Path(str(raw_root)).expanduser()
        if not install_root.is_absolute():
            install_root = (base_dir or Path.cwd()) / install_root

    return ShimConfig(
        package=package,
        binary_name=str(data.get("binary") or DEFAULT_BINARY_NAME),
        install_root=install_root,
    )


def _repository_url(repository: Any) -> Optional[str]:
    """Extract the URL from ``repository: {url: ...}`` or ``repository: "..."``."""
    if isinstance(repository, dict):
        url = repository.get("url")
    else:
        url = repository
    if not url or not isinstance(url, str):
        return None
    return url
