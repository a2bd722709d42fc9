"""
Secret material for provider-backed network profiles.

Values come from the process environment or a ``.env`` file and are only read
when a ``DeploySecrets`` instance is created. Profiles that do not need secrets
never create one.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import MissingConfigError, MissingSecretError

# Environment variable keys
ENV_PRIVATE_KEY = "PRIVATE_KEY"
ENV_SEPOLIA_URL = "SEPOLIA_URL"

DEFAULT_ENV_FILE = ".env"


class DeploySecrets(BaseSettings):
    """Signing key and RPC endpoints used by wallet-backed networks."""

    private_key: Optional[str] = None
    sepolia_url: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def declares(cls, variable: str) -> bool:
        """True if ``variable`` maps to a field of this model."""
        return variable.lower() in cls.model_fields

    def get(self, variable: str) -> Optional[str]:
        """Return the value for an environment variable name, or None if unset or empty.

        Raises:
            MissingConfigError: If ``variable`` is not a field of this model
        """
        if not self.declares(variable):
            raise MissingConfigError(
                f"{variable} is not a known deploy secret; add a '{variable.lower()}' field to DeploySecrets"
            )
        value = getattr(self, variable.lower())
        if not value:
            return None
        return value

    def require(self, variable: str, network: Optional[str] = None) -> str:
        """Return the value for ``variable``.

        Raises:
            MissingSecretError: If the variable is unset or empty
        """
        value = self.get(variable)
        if value is None:
            raise MissingSecretError(variable, source=DEFAULT_ENV_FILE, network=network)
        return value

    def missing(self, *variables: str) -> tuple:
        """Names from ``variables`` that have no usable value."""
        return tuple(name for name in variables if self.get(name) is None)

    def __repr__(self) -> str:
        # Never leak key material through logs or tracebacks
        fields = ", ".join(
            f"{name}={'<set>' if getattr(self, name) else None}" for name in type(self).model_fields
        )
        return f"DeploySecrets({fields})"

    __str__ = __repr__
