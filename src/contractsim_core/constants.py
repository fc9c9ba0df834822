# src/contractsim_core/constants.py
import logging

logger = logging.getLogger(__name__)

#: Length, in hex characters, of an encoded coin public key (32 bytes).
COIN_PUBLIC_KEY_HEX_LENGTH: int = 64

#: Sender used when the caller does not supply one: the all-zero coin public key.
ZERO_COIN_PUBLIC_KEY: str = "0" * COIN_PUBLIC_KEY_HEX_LENGTH

#: Tag prepended to a 32-byte payload to form an encoded contract address.
CONTRACT_ADDRESS_PREFIX: str = "0200"

#: Deterministic placeholder address used when none is supplied.
DUMMY_CONTRACT_ADDRESS: str = CONTRACT_ADDRESS_PREFIX + "0" * COIN_PUBLIC_KEY_HEX_LENGTH

logger.debug("Defined core constants: ZERO_COIN_PUBLIC_KEY, DUMMY_CONTRACT_ADDRESS")
