"""
Configuration management for Passerelle.

Hybrid configuration system using YAML files and environment variables.
Priority: Environment variables > YAML config > Pydantic defaults
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Passerelle configuration schema.

    Loads configuration from:
    1. Environment variables (highest priority, PASSERELLE_ prefix)
    2. YAML configuration files
    3. Pydantic defaults (lowest priority)

    Configuration files:
        - config/default.yaml: Base defaults
        - config/production.yaml: Production overrides
        - config/development.yaml: Development overrides
        - config/test.yaml: Test overrides
    """

    model_config = SettingsConfigDict(
        env_prefix="PASSERELLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Passerelle"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="production", description="Environment name")

    # Remote pairing
    relay_url: str = Field(
        default="https://bridge.walletconnect.org",
        description="Pairing relay (bridge) endpoint",
    )
    signing_methods: List[str] = Field(
        default_factory=lambda: [
            "keplr_enable_wallet_connect_v1",
            "keplr_sign_amino_wallet_connect_v1",
        ],
        description="Custom signing methods allowed over the relay",
    )
    remote_method_prefix: str = Field(
        default="walletconnect",
        min_length=1,
        description="Method ids starting with this prefix use remote pairing",
    )

    # Broker
    request_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Reject unsettled requests after this many seconds "
        "(disabled when unset)",
    )

    # Broadcast
    chain_rest_endpoints: Dict[str, str] = Field(
        default_factory=dict,
        description="REST base URL per chain id",
    )
    broadcast_timeout_seconds: float = Field(default=30.0, gt=0, le=300)

    # Logging
    log_level: str = Field(default="info")
    log_dir: Optional[str] = Field(default=None)
    verbose: int = Field(default=1, ge=0, le=3)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @field_validator("relay_url")
    @classmethod
    def validate_relay_url(cls, v: str) -> str:
        """Relay must be an http(s) or ws(s) endpoint."""
        if not v.startswith(("http://", "https://", "ws://", "wss://")):
            raise ValueError("relay_url must be an http(s) or ws(s) URL")
        return v.rstrip("/")

    @field_validator("chain_rest_endpoints")
    @classmethod
    def validate_chain_rest_endpoints(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Strip trailing slashes so paths can be appended."""
        return {chain_id: url.rstrip("/") for chain_id, url in v.items()}


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override

    Returns:
        Settings instance

    Raises:
        ValidationError: If a value fails validation
    """
    # Component root (passerelle/), 4 levels up from this file
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("PASSERELLE_ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.development", "test.yaml"),
    }

    # Load .env file FIRST (before Settings initialization)
    default_env_file, default_config_file = env_map.get(
        environment, (".env.production", "production.yaml")
    )
    if env_file is None:
        env_file = default_env_file
    if config_file is None:
        config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    merged_config = {"ENV": environment}

    default_config_path = config_dir / "default.yaml"
    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    env_config_path = config_dir / config_file
    if env_config_path.exists():
        with open(env_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    # Environment variables beat YAML: drop YAML keys set in the environment
    env_keys = {k.upper() for k in os.environ}
    for key in list(merged_config):
        if f"PASSERELLE_{key}".upper() in env_keys:
            merged_config.pop(key)

    return Settings(**merged_config)


# Global settings singleton (lazy initialization)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or initialize global settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """
    Override global settings (for testing).

    Args:
        new_settings: New Settings instance to use
    """
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """
    Reset settings to force re-initialization (for testing).
    """
    global _settings
    _settings = None
