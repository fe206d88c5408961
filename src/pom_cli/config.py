import logging
import tomllib
from pathlib import Path
from typing import Any

from pom_linter.manifest import DEFAULT_MANIFEST_PATTERNS

logger = logging.getLogger(__name__)


class LintConfig:
    """Handles loading and validation of .pom-sort-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.select: list[str] = ["unsorted"]
        self.ignore: list[str] = []
        self.manifest_patterns: list[str] = list(DEFAULT_MANIFEST_PATTERNS)

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            # Fallback to defaults if parsing fails
            logger.warning("Could not read config %s, using defaults: %s", path, e)
            return

        lint_data = data.get("tool", {}).get("pom-sort-lint", {})
        self.select = lint_data.get("select", self.select)
        self.ignore = lint_data.get("ignore", self.ignore)
        self.manifest_patterns = lint_data.get("manifest-patterns", self.manifest_patterns)

    def apply_to_registry(self, registry: Any) -> list[Any]:
        """Return list of enabled rules based on this config"""
        return registry.get_enabled_rules(select=self.select, ignore=self.ignore)
