"""Settings loading from YAML, .env files and environment variables."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import dotenv_values

logger = logging.getLogger("infiniax-proxy")

UPSTREAM_URL = "https://infiniax.ai/api/chat/stream"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_TIMEOUT = 60.0
DEFAULT_LOG_LEVEL = "INFO"

CONFIG_PATH_ENV = "INFINIAX_PROXY_CONFIG"
DEFAULT_ENV_FILE = ".env"

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class ProxySettings:
    """Process-wide settings, built once at startup and passed by reference."""

    cookie: str = ""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def has_credential(self) -> bool:
        return bool(self.cookie)


def _to_int(value: Any, default: int, name: str) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s value %r; using %s", name, value, default)
        return default


def _to_float(value: Any, default: float, name: str) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s value %r; using %s", name, value, default)
        return default


def _substitute_env_vars(obj: Any, env_values: Mapping[str, str]) -> Any:
    """Recursively substitute ``${VAR}`` and ``$VAR`` references in strings.

    Unknown variables keep their literal placeholder.
    """
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v, env_values) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_substitute_env_vars(item, env_values) for item in obj]
    if isinstance(obj, str):

        def replace_var(match):
            var_name = match.group(1) or match.group(2)
            value = env_values.get(var_name)
            if value is None:
                logger.warning(
                    "CONFIG ERROR: Environment variable '$%s' is not set; "
                    "the literal placeholder will be used.",
                    var_name,
                )
                return match.group(0)
            return value

        return _ENV_PATTERN.sub(replace_var, obj)
    return obj


def load_env_values(env_path: Path) -> dict[str, str]:
    """Load values from a .env file without mutating os.environ."""
    if not env_path.exists():
        return {}
    raw_values = dotenv_values(env_path)
    return {key: value for key, value in raw_values.items() if value is not None}


def load_config(path: str | Path, env_values: Mapping[str, str]) -> dict:
    """Load a YAML config file, substituting environment references.

    Raises:
        RuntimeError: If the file does not exist.
    """
    config_path = Path(path)
    logger.info("Loading configuration from %s", config_path)
    if not config_path.exists():
        raise RuntimeError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise RuntimeError(f"Config file must contain a mapping: {config_path}")
    return _substitute_env_vars(data, env_values)


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    env_file: str | Path | None = DEFAULT_ENV_FILE,
) -> ProxySettings:
    """Build :class:`ProxySettings` from every configured source.

    Priority, lowest first: defaults, the YAML file named by
    ``INFINIAX_PROXY_CONFIG``, the ``.env`` file, then the process
    environment.

    Args:
        environ: Environment mapping to read; defaults to ``os.environ``.
        env_file: Path of the .env file, or ``None`` to skip it.
    """
    process_env = dict(os.environ if environ is None else environ)
    env_values: dict[str, str] = {}
    if env_file is not None:
        env_values.update(load_env_values(Path(env_file)))
    env_values.update(process_env)

    file_config: dict = {}
    config_path = env_values.get(CONFIG_PATH_ENV)
    if config_path:
        file_config = load_config(config_path, env_values)

    def pick(env_name: str, file_key: str) -> Any:
        value = env_values.get(env_name)
        if value is not None and value != "":
            return value
        return file_config.get(file_key)

    settings = ProxySettings(
        cookie=str(pick("INFINIAX_COOKIE", "cookie") or ""),
        host=str(pick("HOST", "host") or DEFAULT_HOST),
        port=_to_int(pick("PORT", "port"), DEFAULT_PORT, "port"),
        timeout=_to_float(pick("INFINIAX_TIMEOUT", "timeout"), DEFAULT_TIMEOUT, "timeout"),
        log_level=str(pick("LOG_LEVEL", "log_level") or DEFAULT_LOG_LEVEL).upper(),
    )
    if not settings.has_credential:
        logger.warning("INFINIAX_COOKIE is not set; upstream calls will be rejected")
    return settings
