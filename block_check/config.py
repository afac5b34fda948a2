"""Configuration loading for the checker front-ends."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from block_check.domain.policy import PasswordPolicy


_TRUE_VALUES = {"1", "true", "yes", "on", "y"}
_FALSE_VALUES = {"0", "false", "no", "off", "n"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class CheckerConfig:
    """Runtime configuration for the password policy and the selected adapter."""

    min_length: int = 8
    max_length: int = 12
    block_threshold: int = 2
    adapter_name: str = "terminal"
    mask_input: bool = True
    log_level: str = "WARNING"
    env_file: str = ".env"

    @property
    def policy(self) -> PasswordPolicy:
        return PasswordPolicy(
            min_length=self.min_length,
            max_length=self.max_length,
            block_threshold=self.block_threshold,
        )


def load_config(env_file: str = ".env") -> CheckerConfig:
    """Load checker config from an env file, falling back to defaults."""

    env = _parse_env_file(env_file)

    min_length = _env_int(env, "CHECKER_MIN_LENGTH", default=8, minimum=1)
    max_length = _env_int(env, "CHECKER_MAX_LENGTH", default=12, minimum=1)
    if max_length < min_length:
        _warn_env(
            f"CHECKER_MAX_LENGTH={max_length} is below CHECKER_MIN_LENGTH={min_length}. "
            "Using 8..12."
        )
        min_length, max_length = 8, 12
    block_threshold = _env_int(env, "CHECKER_BLOCK_THRESHOLD", default=2, minimum=1)
    adapter_name = env.get("CHECKER_ADAPTER", "terminal").strip() or "terminal"
    mask_input = _env_bool(env, "CHECKER_MASK_INPUT", default=True)
    log_level = _env_log_level(env, "CHECKER_LOG_LEVEL", default="WARNING")

    return CheckerConfig(
        min_length=min_length,
        max_length=max_length,
        block_threshold=block_threshold,
        adapter_name=adapter_name,
        mask_input=mask_input,
        log_level=log_level,
        env_file=env_file,
    )


def _warn_env(msg: str) -> None:
    print(f"Warning: {msg}", file=sys.stderr)


def _parse_env_file(path: str) -> dict[str, str]:
    env_path = Path(path)
    if not env_path.exists():
        return {}

    env: dict[str, str] = {}
    for lineno, line in enumerate(env_path.read_text(encoding="utf-8").splitlines(), start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        if text.startswith("export "):
            text = text[7:].strip()
        if "=" not in text:
            _warn_env(f"Ignoring invalid env line {lineno} in {path!r}: {line!r}")
            continue

        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]

        if key:
            env[key] = value

    return env


def _env_int(env: dict[str, str], key: str, default: int, minimum: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        parsed = int(raw)
    except ValueError:
        _warn_env(f"{key} must be an integer, got {raw!r}. Using {default}.")
        return default
    if parsed < minimum:
        _warn_env(f"{key} must be >= {minimum}, got {parsed}. Using {default}.")
        return default
    return parsed


def _env_bool(env: dict[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw == "":
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _warn_env(f"{key} must be a boolean, got {raw!r}. Using {default}.")
    return default


def _env_log_level(env: dict[str, str], key: str, default: str) -> str:
    raw = env.get(key)
    if raw is None or raw == "":
        return default

    value = raw.strip().upper()
    if value in _LOG_LEVELS:
        return value
    _warn_env(f"{key} must be one of {', '.join(sorted(_LOG_LEVELS))}, got {raw!r}. Using {default}.")
    return default
