"""ConfigManager — environment profiles, runtime settings and logging setup."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from blueprintgen.config import DEFAULT_OUTPUT_DIR, GENERATION_DELAY_S

logger = logging.getLogger(__name__)

CONFIG_DIR = ".blueprintgen"

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "BLUEPRINT_ENV": {"default": "development", "description": "Environment profile"},
    "BLUEPRINT_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
    "BLUEPRINT_OUTPUT_DIR": {
        "default": str(DEFAULT_OUTPUT_DIR),
        "description": "Directory for exported drawings",
    },
    "BLUEPRINT_GENERATION_DELAY": {
        "default": str(GENERATION_DELAY_S),
        "description": "Simulated generation latency in seconds",
    },
    "BLUEPRINT_DEFAULT_COUNTRY": {"default": "US", "description": "Country code used when none is given"},
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "BLUEPRINT_ENV": "development",
        "BLUEPRINT_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "BLUEPRINT_ENV": "production",
        "BLUEPRINT_LOG_LEVEL": "WARNING",
    },
    "testing": {
        "BLUEPRINT_ENV": "testing",
        "BLUEPRINT_LOG_LEVEL": "DEBUG",
        "BLUEPRINT_GENERATION_DELAY": "0",
    },
}


@dataclass(frozen=True)
class Settings:
    """Typed view of the merged configuration."""

    env: str
    log_level: str
    output_dir: Path
    generation_delay: float
    default_country: str

    @classmethod
    def from_mapping(cls, config: dict[str, str]) -> Settings:
        try:
            delay = float(config["BLUEPRINT_GENERATION_DELAY"])
        except ValueError:
            logger.warning(
                "Invalid BLUEPRINT_GENERATION_DELAY %r, using %s",
                config["BLUEPRINT_GENERATION_DELAY"], GENERATION_DELAY_S,
            )
            delay = GENERATION_DELAY_S
        return cls(
            env=config["BLUEPRINT_ENV"],
            log_level=config["BLUEPRINT_LOG_LEVEL"].upper(),
            output_dir=Path(config["BLUEPRINT_OUTPUT_DIR"]),
            generation_delay=max(delay, 0.0),
            default_country=config["BLUEPRINT_DEFAULT_COUNTRY"].upper(),
        )


class ConfigManager:
    """Manage blueprintgen configuration across environments."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Create .env.example with all config keys.

        Returns the path to the generated file.
        """
        root = Path(project_path)
        env_path = root / ".env.example"

        lines = ["# blueprintgen configuration template", "# Copy to .env and adjust values", ""]
        for key, info in _CONFIG_KEYS.items():
            lines.append(f"# {info['description']}")
            lines.append(f"{key}={info['default']}")
            lines.append("")

        env_path.write_text("\n".join(lines), encoding="utf-8")
        return env_path

    def load_config(self, project_path: str | Path = ".") -> dict[str, str]:
        """Load merged config: defaults -> profile -> config.json -> .env -> env vars."""
        root = Path(project_path)
        config: dict[str, str] = {key: str(info["default"]) for key, info in _CONFIG_KEYS.items()}

        env_name = os.environ.get("BLUEPRINT_ENV", config["BLUEPRINT_ENV"])
        config.update(_PROFILES.get(env_name, {}))

        config_json = root / CONFIG_DIR / "config.json"
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
                for k, v in data.items():
                    config[k] = str(v)
            except (json.JSONDecodeError, OSError):
                logger.debug("Could not read %s", config_json, exc_info=True)

        env_file = root / ".env"
        if env_file.is_file():
            try:
                for line in env_file.read_text(encoding="utf-8").splitlines():
                    line = line.strip()
                    if not line or line.startswith("#") or "=" not in line:
                        continue
                    k, v = line.split("=", 1)
                    config[k.strip()] = v.strip()
            except OSError:
                logger.debug("Could not read %s", env_file, exc_info=True)

        for key in _CONFIG_KEYS:
            env_val = os.environ.get(key)
            if env_val is not None:
                config[key] = env_val

        return config

    def load_settings(self, project_path: str | Path = ".") -> Settings:
        return Settings.from_mapping(self.load_config(project_path))


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the root logger at *level*.

    Only entry points call this; library modules just create loggers.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    logging.getLogger("blueprintgen").setLevel(numeric)
    # matplotlib's font manager is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(max(numeric, logging.INFO))
