import re

from llm_playground.exceptions import InvalidAddressError

ETHEREUM_ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{40}")

INVALID_ADDRESS_MESSAGE = "Error: Invalid Ethereum contract address format"


def is_valid_ethereum_address(address: str) -> bool:
    """True for ``0x`` followed by exactly 40 hex characters, in either case.

    Examples:
        >>> is_valid_ethereum_address("0x1234567890123456789012345678901234567890")
        True
        >>> is_valid_ethereum_address("0x123")
        False
    """
    if not isinstance(address, str):
        return False
    return ETHEREUM_ADDRESS_PATTERN.fullmatch(address) is not None


def require_valid_address(address: str) -> str:
    """Return ``address`` unchanged or raise InvalidAddressError."""
    if not is_valid_ethereum_address(address):
        raise InvalidAddressError(address)
    return address
