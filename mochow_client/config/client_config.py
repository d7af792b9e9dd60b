"""
Client configuration: endpoint, credentials and HTTP behaviour.
Values not given explicitly fall back to environment settings; a YAML file
can hold a full configuration.
"""

from typing import Any, Dict, Optional, Union
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, ValidationError

from mochow_client.config.settings import settings
from mochow_client.exceptions import ConfigurationError
from mochow_client.utils.logger import LoggerMixin


class Credential(BaseModel):
    """Account and API key used to build the Authorization header."""
    account: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1)


class ClientConfiguration(BaseModel):
    """Everything the transport needs to reach the service."""
    endpoint: str = Field(..., min_length=1, description="e.g. http://127.0.0.1:8287")
    credential: Credential
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0)
    retry_backoff_factor: float = Field(default=1.0, ge=0)
    url_version_prefix: str = Field(default="v1")

    @classmethod
    def from_settings(
        cls,
        endpoint: Optional[str] = None,
        account: Optional[str] = None,
        api_key: Optional[str] = None,
        **overrides: Any
    ) -> "ClientConfiguration":
        """
        Build a configuration, taking missing values from settings.

        Raises:
            ConfigurationError: If endpoint, account or api key is missing
        """
        endpoint = endpoint or settings.ENDPOINT
        account = account or settings.ACCOUNT
        api_key = api_key or settings.API_KEY

        if not endpoint:
            raise ConfigurationError("The endpoint is required for creating mochow client.")
        if not account or not api_key:
            raise ConfigurationError("The account and api key are required for creating mochow client.")

        values: Dict[str, Any] = {
            "timeout_seconds": settings.TIMEOUT_SECONDS,
            "max_retries": settings.MAX_RETRIES,
            "retry_backoff_factor": settings.RETRY_BACKOFF_FACTOR,
            "url_version_prefix": settings.URL_VERSION_PREFIX,
        }
        values.update(overrides)
        try:
            return cls(
                endpoint=endpoint,
                credential=Credential(account=account, api_key=api_key),
                **values
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e

    @property
    def base_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/{self.url_version_prefix}"

    @property
    def authorization(self) -> str:
        token = f"account={self.credential.account}&api_key={self.credential.api_key}"
        return f"Bearer {token}"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.authorization,
            "Content-Type": "application/json",
        }


class ClientConfigManager(LoggerMixin):
    """Loads and saves client configurations as YAML."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ClientConfiguration:
        """
        Load a configuration from YAML, completing it from settings.

        Expected layout:

            endpoint: http://127.0.0.1:8287
            credential:
              account: root
              api_key: secret
            timeout_seconds: 10

        Args:
            config_path: Path to YAML configuration file

        Returns:
            ClientConfiguration instance

        Raises:
            ConfigurationError: If the file is unreadable or the result is incomplete
        """
        if config_path:
            self.config_path = Path(config_path)

        config_data: Dict[str, Any] = {}
        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    config_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                self.logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise ConfigurationError(f"Cannot read client config {self.config_path}: {e}") from e
            self.logger.info(f"Loaded client config from {self.config_path}")
        else:
            self.logger.info("No config file found, using settings")

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Client config {self.config_path} must be a mapping, got {type(config_data).__name__}"
            )
        credential = config_data.pop("credential", None) or {}
        if not isinstance(credential, dict):
            raise ConfigurationError(
                f"'credential' in {self.config_path} must be a mapping with account and api_key"
            )
        return ClientConfiguration.from_settings(
            endpoint=config_data.pop("endpoint", None),
            account=credential.get("account"),
            api_key=credential.get("api_key"),
            **config_data
        )

    def save_config(self, config: ClientConfiguration, path: Optional[Union[str, Path]] = None) -> None:
        """
        Save a configuration to YAML.

        Args:
            config: ClientConfiguration to save
            path: Optional path to save to, uses self.config_path if not provided
        """
        save_path = Path(path) if path else self.config_path
        if not save_path:
            raise ValueError("No save path specified")

        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, 'w') as f:
            yaml.dump(config.model_dump(mode='json'), f, default_flow_style=False, indent=2)

        self.logger.info(f"Saved client config to {save_path}")
