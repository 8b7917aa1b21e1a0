import json
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from product_writer.infrastructure.secrets import (
    SecretAccessDeniedError,
    SecretNotFoundError,
    SecretsManager,
)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "GetSecretValue")


class TestSecretsManager:
    @pytest.fixture
    def client(self):
        client = MagicMock()
        client.get_secret_value.return_value = {"SecretString": json.dumps({"KEY": "value"})}
        return client

    def test_get_secret_parses_json(self, client) -> None:
        manager = SecretsManager(client=client)

        assert manager.get_secret("config") == {"KEY": "value"}

    def test_get_secret_is_cached(self, client) -> None:
        manager = SecretsManager(client=client)

        manager.get_secret("config")
        manager.get_secret("config")

        client.get_secret_value.assert_called_once_with(SecretId="config")

    def test_not_found(self, client) -> None:
        client.get_secret_value.side_effect = _client_error("ResourceNotFoundException")

        with pytest.raises(SecretNotFoundError):
            SecretsManager(client=client).get_secret("missing")

    def test_access_denied(self, client) -> None:
        client.get_secret_value.side_effect = _client_error("AccessDeniedException")

        with pytest.raises(SecretAccessDeniedError):
            SecretsManager(client=client).get_secret("locked")

    def test_other_errors_propagate(self, client) -> None:
        client.get_secret_value.side_effect = _client_error("ThrottlingException")

        with pytest.raises(ClientError):
            SecretsManager(client=client).get_secret("config")
