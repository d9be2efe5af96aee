import json

from azure.appconfiguration import AzureAppConfigurationClient, SecretReferenceConfigurationSetting
from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.keyvault.secrets import KeyVaultSecretIdentifier, SecretClient

from .config import Config
from .errors import ConfigurationError, SecretResolutionError
from .logger import PipelineLogger
from .models import PictureFrameConfiguration


class ConfigLoader:
    """Resolves settings and Key Vault secret references from App Configuration."""

    def __init__(
        self,
        config: Config,
        logger: PipelineLogger,
        credential,
        app_config_client=None,
        secret_client_factory=None,
    ):
        self.config = config
        self.logger = logger
        self.credential = credential
        self.app_config_client = app_config_client or AzureAppConfigurationClient(
            config.APP_CONFIGURATION_ENDPOINT, credential
        )
        self.secret_client_factory = secret_client_factory or SecretClient
        self._secret_clients = {}

    def load_configuration(self) -> PictureFrameConfiguration:
        """Fetch every named setting; any missing value aborts the load."""
        self.logger.info(f"Loading configuration from {self.config.APP_CONFIGURATION_ENDPOINT}")

        generate_params = self._load_generate_params()
        configuration = PictureFrameConfiguration(
            generate_params=generate_params,
            openai_secret_key=self.get_secret(self.config.OPENAI_SECRET_KEY),
            communication_service_connection_string=self.get_secret(self.config.COMMUNICATION_SERVICE_KEY),
            sender_email_address=self.get_setting(self.config.SENDER_EMAIL_KEY),
            picture_frame_email_address=self.get_setting(self.config.PICTURE_FRAME_EMAIL_KEY),
            storage_account_url=self._require_local("STORAGE_ACCOUNT_URL"),
            storage_container=self._require_local("STORAGE_CONTAINER"),
        )

        self.logger.info(f"Configuration loaded: {configuration.number_of_images} image(s) requested")
        return configuration

    def get_setting(self, key: str) -> str:
        """Return the plain value of a setting."""
        setting = self._fetch(key)
        if not setting.value or not str(setting.value).strip():
            raise ConfigurationError(f"Setting '{key}' is empty")
        return setting.value

    def get_secret(self, key: str) -> str:
        """Follow a secret reference setting into Key Vault and return the secret value."""
        setting = self._fetch(key)
        if not isinstance(setting, SecretReferenceConfigurationSetting):
            raise ConfigurationError(f"Setting '{key}' is not a Key Vault reference")

        try:
            identifier = KeyVaultSecretIdentifier(setting.secret_id)
            secret_client = self._secret_client(identifier.vault_url)
            secret = secret_client.get_secret(identifier.name, identifier.version)
        except (AzureError, ValueError) as e:
            self.logger.error(f"Failed to resolve secret reference '{key}': {e}")
            raise SecretResolutionError(f"Could not resolve secret '{key}': {e}") from e

        if not secret.value:
            raise SecretResolutionError(f"Secret for '{key}' is empty")

        self.logger.debug(f"Resolved secret '{identifier.name}' from {identifier.vault_url}")
        return secret.value

    def _load_generate_params(self) -> dict:
        if self.config.GENERATE_PARAMS_KEY:
            raw = self.get_setting(self.config.GENERATE_PARAMS_KEY)
            try:
                params = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Setting '{self.config.GENERATE_PARAMS_KEY}' is not valid JSON: {e}") from e
            if not isinstance(params, dict) or not params.get("prompt"):
                raise ConfigurationError(
                    f"Setting '{self.config.GENERATE_PARAMS_KEY}' must be an object with a prompt"
                )
            params.setdefault("n", 1)
        else:
            params = {
                "prompt": self.get_setting(self.config.PROMPT_KEY),
                "n": self.get_setting(self.config.NUMBER_OF_IMAGES_KEY),
            }

        params["n"] = self._parse_image_count(params["n"])
        params.setdefault("response_format", self.config.RESPONSE_FORMAT)
        params.setdefault("size", self.config.IMAGE_SIZE)
        return params

    def _parse_image_count(self, value) -> int:
        try:
            count = int(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Number of images must be an integer, got {value!r}")
        if count < 1:
            raise ConfigurationError(f"Number of images must be positive, got {count}")
        return count

    def _fetch(self, key: str):
        try:
            return self.app_config_client.get_configuration_setting(key=key)
        except ResourceNotFoundError as e:
            self.logger.error(f"Configuration setting not found: {key}")
            raise ConfigurationError(f"Missing configuration setting '{key}'") from e

    def _secret_client(self, vault_url: str):
        if vault_url not in self._secret_clients:
            self._secret_clients[vault_url] = self.secret_client_factory(vault_url, self.credential)
        return self._secret_clients[vault_url]

    def _require_local(self, name: str) -> str:
        value = getattr(self.config, name, None)
        if not value:
            raise ConfigurationError(f"{name} is not configured")
        return value
