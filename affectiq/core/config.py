# ========================================
# 📁 affectiq/core/config.py
# ========================================
import os
import re
import json
import logging
from typing import List, Optional, Literal, Pattern, Dict, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".affectiq.json"

# Root-level manifests and lockfiles (package.json, yarn.lock, ...) invalidate the whole workspace.
DEFAULT_REQUIRED_FILES: List[str] = [r"(?i)^[a-z0-9]+\.(json|lock)$"]


def _default_parallelism() -> int:
    raw = os.getenv("AFFECTIQ_PARALLELISM")
    if raw is None:
        return 5
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer AFFECTIQ_PARALLELISM={raw!r}; using 5.")
        return 5
    return value if value >= 1 else 5


class DetectConfig(BaseModel):
    """
    Settings for a single detection run.

    required_files: regular expressions; a changed path matching any of them marks
        every project dirty.
    root: workspace root. When unset the git toplevel is used.
    transitive: follow reverse dependencies after direct matching.
    parallelism: maximum number of concurrent dependency lookups.
    dependency_source: "npm" runs `npm list` per project, "declared" uses the
        workspaceDependencies reported by yarn.
    """
    required_files: List[str] = Field(default_factory=lambda: list(DEFAULT_REQUIRED_FILES))
    root: Optional[str] = None
    transitive: bool = True
    parallelism: int = Field(default_factory=_default_parallelism, ge=1)
    dependency_source: Literal["npm", "declared"] = "npm"

    model_config = {"extra": "ignore"}

    @field_validator("required_files")
    @classmethod
    def _patterns_compile(cls, value: List[str]) -> List[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid required_files pattern {pattern!r}: {e}") from e
        return value

    def compiled_patterns(self) -> List[Pattern[str]]:
        return [re.compile(p) for p in self.required_files]

    def merged(self, **overrides: Any) -> "DetectConfig":
        """Returns a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return DetectConfig(**{**self.model_dump(), **updates})


def read_config_file(path: str) -> Dict[str, Any]:
    """Reads and parses a JSON config file. Raises ConfigurationError on any problem."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file is not valid JSON: {e}", path=path) from e
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a JSON object.", path=path)
    return data


def load_config(path: Optional[str] = None) -> DetectConfig:
    """
    Loads the detection config, falling back to defaults.
    A missing file is not an error. A malformed one is logged and ignored.
    """
    config_path = path or os.path.join(os.getcwd(), DEFAULT_CONFIG_FILENAME)
    if not os.path.exists(config_path):
        logger.debug(f"No config found at {config_path}, using defaults.")
        return DetectConfig()

    logger.info(f"Found config path of {config_path}")
    try:
        data = read_config_file(config_path)
        unknown = sorted(set(data) - set(DetectConfig.model_fields))
        if unknown:
            logger.warning(f"Ignoring unknown config key(s) in {config_path}: {', '.join(unknown)}")
        try:
            return DetectConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config values: {e}", path=config_path) from e
    except ConfigurationError as e:
        logger.warning(f"{e} ({e.path}). Falling back to default configuration.")
        return DetectConfig()
