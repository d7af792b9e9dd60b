"""Python client for the Mochow vector database."""

from mochow_client.models import *
from mochow_client.api import *
from mochow_client.config.client_config import ClientConfiguration, ClientConfigManager, Credential

__version__ = "1.0.0"
