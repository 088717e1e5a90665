"""Credential loading and connection descriptor construction."""

import logging

from pydantic import BaseModel

from imagefn.config import Settings
from imagefn.core.errors import ConfigurationError

ENV_ORACLE_USERNAME = "ORACLE_USERNAME"
ENV_ORACLE_PASSWORD = "ORACLE_PASSWORD"
ENV_ORACLE_SERVICENAME = "ORACLE_SERVICENAME"

SECRET_PLACEHOLDER = "secret"


class CredentialSet(BaseModel):
    """Database account credentials for a single invocation."""

    username: str
    password: str
    service_name: str

    @property
    def descriptor(self) -> str:
        """Connection descriptor in ``username/password@service`` form."""
        return f"{self.username}/{self.password}@{self.service_name}"

    @property
    def masked_descriptor(self) -> str:
        """Connection descriptor with the password replaced by a placeholder."""
        return f"{self.username}/{SECRET_PLACEHOLDER}@{self.service_name}"

    def __repr__(self) -> str:
        return f"<CredentialSet({self.masked_descriptor})>"

    __str__ = __repr__


def load_credentials(settings: Settings, logger: logging.Logger) -> CredentialSet:
    """
    Build the credential set from settings.

    Args:
        settings: Settings read from the environment
        logger: Invocation logger

    Returns:
        CredentialSet with all three values present

    Raises:
        ConfigurationError: If any of the three variables is unset
    """
    required = (
        (ENV_ORACLE_USERNAME, settings.oracle_username),
        (ENV_ORACLE_PASSWORD, settings.oracle_password),
        (ENV_ORACLE_SERVICENAME, settings.oracle_servicename),
    )
    for variable, value in required:
        if value is None:
            error = ConfigurationError(variable)
            logger.error(str(error))
            raise error

    credentials = CredentialSet(
        username=settings.oracle_username,
        password=settings.oracle_password,
        service_name=settings.oracle_servicename,
    )
    logger.info(f"Generated connect:{credentials.masked_descriptor}")
    return credentials
