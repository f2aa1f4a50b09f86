"""Lazy provider factories for tomo-networks library."""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import ValidationError
from web3 import Web3
from web3.middleware import SignAndSendRawMiddlewareBuilder

from .constants import HD_PATH_TEMPLATE, MNEMONIC_ENV, RPC_TIMEOUT
from .exceptions import InvalidSecretError, MissingSecretError

logger = logging.getLogger(__name__)


def read_secret(variable: str, environ: Optional[Mapping[str, str]] = None, hint: str = "") -> str:
    """
    Read a secret from the environment at call time.

    Args:
        variable: Environment variable name
        environ: Mapping to read from (defaults to os.environ)
        hint: Context included in the error message

    Returns:
        The stripped secret value

    Raises:
        MissingSecretError: If the variable is unset or blank
    """
    if environ is None:
        environ = os.environ

    value = environ.get(variable, "").strip()
    if not value:
        raise MissingSecretError(variable, hint)
    return value


def http_connection(rpc_url: str, timeout: int = RPC_TIMEOUT) -> Web3:
    """Create an unsigned HTTP connection. No request is made until first use."""
    return Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))


def signing_connection(account: LocalAccount, rpc_url: str, timeout: int = RPC_TIMEOUT) -> Web3:
    """
    Create an HTTP connection that signs outgoing transactions with ``account``.

    Args:
        account: Local signing account
        rpc_url: RPC endpoint URL
        timeout: HTTP request timeout in seconds

    Returns:
        Web3 instance with ``account`` as default account
    """
    w3 = http_connection(rpc_url, timeout)
    w3.middleware_onion.inject(SignAndSendRawMiddlewareBuilder.build(account), layer=0)
    w3.eth.default_account = account.address
    return w3


@dataclass(frozen=True)
class HDWalletProviderFactory:
    """Builds a signing provider from a mnemonic phrase held in the environment."""

    rpc_url: str
    secret_env: str = MNEMONIC_ENV
    account_index: int = 0
    environ: Optional[Mapping[str, str]] = field(
        default=None, compare=False, hash=False, repr=False
    )

    def account(self) -> LocalAccount:
        """
        Derive the signing account from the mnemonic.

        Raises:
            MissingSecretError: If the mnemonic variable is not set
            InvalidSecretError: If the mnemonic is not a valid BIP-39 phrase
        """
        mnemonic = read_secret(self.secret_env, self.environ, self.rpc_url)

        Account.enable_unaudited_hdwallet_features()
        try:
            return Account.from_mnemonic(
                mnemonic, account_path=HD_PATH_TEMPLATE.format(index=self.account_index)
            )
        except (ValueError, ValidationError):
            raise InvalidSecretError(
                f"Environment variable '{self.secret_env}' is not a valid mnemonic phrase"
            ) from None

    def __call__(self) -> Web3:
        account = self.account()
        logger.debug(
            "Built HD wallet provider for %s (account index %d, address %s)",
            self.rpc_url,
            self.account_index,
            account.address,
        )
        return signing_connection(account, self.rpc_url)


@dataclass(frozen=True)
class PrivateKeyProviderFactory:
    """Builds a signing provider from a hex private key held in the environment."""

    rpc_url: str
    secret_env: str
    environ: Optional[Mapping[str, str]] = field(
        default=None, compare=False, hash=False, repr=False
    )

    def account(self) -> LocalAccount:
        """
        Load the signing account from the private key.

        Raises:
            MissingSecretError: If the key variable is not set
            InvalidSecretError: If the value is not a valid private key
        """
        private_key = read_secret(self.secret_env, self.environ, self.rpc_url)
        if not private_key.startswith("0x"):
            private_key = f"0x{private_key}"

        try:
            return Account.from_key(private_key)
        except (ValueError, ValidationError):
            raise InvalidSecretError(
                f"Environment variable '{self.secret_env}' is not a valid private key"
            ) from None

    def __call__(self) -> Web3:
        account = self.account()
        logger.debug("Built private key provider for %s (address %s)", self.rpc_url, account.address)
        return signing_connection(account, self.rpc_url)
