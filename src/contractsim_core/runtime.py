# src/contractsim_core/runtime.py
"""
Small constructors for the runtime records a contract artifact and the harness
exchange. These mirror the helpers the execution runtime itself offers.
"""
import logging
from typing import Any

from .constants import DUMMY_CONTRACT_ADDRESS
from .data_structures import P, WitnessContext, ZswapLocalState

logger = logging.getLogger(__name__)


def dummy_contract_address() -> str:
    """Returns the deterministic placeholder contract address."""
    return DUMMY_CONTRACT_ADDRESS


def empty_zswap_local_state(coin_public_key: str) -> ZswapLocalState:
    """
    Creates a local state for `coin_public_key` (a hex string) with no recorded
    inputs or outputs and a zero index.
    """
    return ZswapLocalState(coin_public_key=bytes.fromhex(coin_public_key))


def witness_context(ledger: Any, private_state: P, contract_address: str) -> WitnessContext[P]:
    return WitnessContext(ledger=ledger, private_state=private_state, contract_address=contract_address)
