"""Configuration handling for the Reddit voice skill."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml
from dotenv import load_dotenv

DEFAULT_SUPPORTED_TOPICS = ["news", "world news", "jokes"]


@dataclass
class MonitoringConfig:
    """Monitoring configuration."""

    enable_prometheus: bool = False
    prometheus_port: int = 8000


@dataclass
class ApiConfig:
    """HTTP endpoint configuration."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class Config:
    """Application configuration combining environment variables and YAML config."""

    # Skill identity from environment; empty disables the application id check
    app_id: str = ""

    # Reddit endpoint
    api_host: str = "api.reddit.com"
    api_port: int = 443
    user_agent: str = "reddit-sdk-1.0"
    request_timeout_sec: Optional[float] = None

    supported_topics: List[str] = field(default_factory=lambda: list(DEFAULT_SUPPORTED_TOPICS))
    log_level: str = "INFO"
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    @property
    def base_url(self) -> str:
        """Root URL every resource path is appended to."""
        return f"https://{self.api_host}:{self.api_port}/"

    @classmethod
    def from_files(cls, config_path: str, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from YAML file and environment variables.

        Args:
            config_path: Path to YAML configuration file
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config instance with merged configuration
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        config = cls()

        # Load and merge YAML config
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as file:
                yaml_config = yaml.safe_load(file)

                if yaml_config:
                    for key, value in yaml_config.items():
                        if key not in ("monitoring", "api") and hasattr(config, key):
                            setattr(config, key, value)

                    if "monitoring" in yaml_config and isinstance(yaml_config["monitoring"], dict):
                        monitoring_config = MonitoringConfig()
                        for key, value in yaml_config["monitoring"].items():
                            if hasattr(monitoring_config, key):
                                setattr(monitoring_config, key, value)
                        config.monitoring = monitoring_config

                    if "api" in yaml_config and isinstance(yaml_config["api"], dict):
                        api_config = ApiConfig()
                        for key, value in yaml_config["api"].items():
                            if hasattr(api_config, key):
                                setattr(api_config, key, value)
                        config.api = api_config

        # Environment wins over YAML
        config.app_id = os.getenv("ALEXA_APP_ID", config.app_id)
        config.user_agent = os.getenv("REDDIT_USER_AGENT", config.user_agent)
        config.log_level = os.getenv("LOGLEVEL", config.log_level)
        if os.getenv("REDDIT_TIMEOUT_SEC"):
            config.request_timeout_sec = float(os.environ["REDDIT_TIMEOUT_SEC"])

        return config

    def validate(self) -> List[str]:
        """
        Validate configuration and return a list of validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.api_host:
            errors.append("api_host must not be empty")
        if self.api_port <= 0:
            errors.append("api_port must be a positive integer")
        if not self.user_agent:
            errors.append("Missing REDDIT_USER_AGENT")
        if self.request_timeout_sec is not None and self.request_timeout_sec <= 0:
            errors.append("request_timeout_sec must be greater than 0")
        if not isinstance(self.supported_topics, list):
            errors.append("supported_topics must be a list")
        if self.monitoring.enable_prometheus and self.monitoring.prometheus_port <= 0:
            errors.append("prometheus_port must be a positive integer")
        if self.api.port <= 0:
            errors.append("api.port must be a positive integer")

        return errors
