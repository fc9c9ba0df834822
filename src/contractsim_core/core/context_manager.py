# src/contractsim_core/core/context_manager.py
"""
Defines the `CircuitContextManager`, the single owner and single writer of a
simulator's current `CircuitContext`.

The manager holds exactly one context value at a time. Readers get that value;
writers hand in a complete replacement. There is no diffing, merging or
compare-and-swap: the last value set is the current one. Validation of the
context's shape is left to the contract artifact that consumes it.
"""
import logging
from dataclasses import replace
from typing import Any, Generic, Optional

from ..contract import IMinimalContract
from ..data_structures import (
    ChargedState,
    CircuitContext,
    ConstructorContext,
    ConstructorResult,
    P,
    QueryContext,
)
from ..runtime import empty_zswap_local_state
from ..utils.context_utils import use_circuit_context
from .base_enums import LocalStateCarryover

logger = logging.getLogger(__name__)


class CircuitContextManager(Generic[P]):
    """
    Owns the current circuit context of one simulator instance.

    The first context is derived from the contract's constructor: its private
    state and ledger payload, the given contract address, an empty local state
    for `coin_pk` and an initial cost model. After construction the address is
    fixed for the lifetime of the manager.
    """

    def __init__(
        self,
        contract: IMinimalContract,
        private_state: P,
        coin_pk: str,
        contract_address: str,
        *contract_args: Any,
        local_state_carryover: LocalStateCarryover = LocalStateCarryover.RESET,
    ):
        """
        Runs the contract constructor and records the resulting context.

        Args:
            contract: The contract artifact, already bound to its witness table.
            private_state: The initial private state.
            coin_pk: Hex-encoded coin public key of the deploying sender.
            contract_address: Hex-encoded address the contract is deployed at.
            *contract_args: Positional constructor arguments forwarded to
                            `contract.initial_state`.
            local_state_carryover: Default policy for `rebuild_for_sender`.
        """
        self.local_state_carryover = local_state_carryover

        constructor_context = ConstructorContext(
            initial_private_state=private_state,
            initial_zswap_local_state=empty_zswap_local_state(coin_pk),
        )
        result: ConstructorResult[P] = contract.initial_state(constructor_context, *contract_args)

        self._context: CircuitContext[P] = use_circuit_context(
            result.current_private_state,
            ChargedState(result.current_contract_state.data),
            coin_pk,
            contract_address,
        )
        logger.debug(f"CircuitContextManager initialized for contract at '{contract_address}'.")

    def get_context(self) -> CircuitContext[P]:
        """Returns the current context. No side effects."""
        return self._context

    def set_context(self, new_context: CircuitContext[P]) -> CircuitContext[P]:
        """Unconditionally replaces the current context and returns the new value."""
        self._context = new_context
        return self._context

    def update_private_state(self, new_private_state: P) -> CircuitContext[P]:
        """
        Replaces only the private state of the current context. Public state,
        local state, cost model and gas limit are carried over untouched.
        """
        self._context = replace(self._context, current_private_state=new_private_state)
        return self._context

    def rebuild_for_sender(
        self,
        sender: str,
        carryover: Optional[LocalStateCarryover] = None,
    ) -> CircuitContext[P]:
        """
        Builds a context for `sender` from the current one without committing it.

        The public ledger payload, contract address, private state, cost model
        and gas limit are kept. The local state is re-keyed to `sender`; whether
        its accumulated records survive is decided by `carryover` (defaulting to
        the manager's `local_state_carryover`).
        """
        policy = carryover or self.local_state_carryover
        current = self._context
        local_state = empty_zswap_local_state(sender)
        if policy is LocalStateCarryover.PRESERVE:
            previous = current.current_zswap_local_state
            local_state = replace(
                previous,
                coin_public_key=local_state.coin_public_key,
            )

        return CircuitContext(
            current_private_state=current.current_private_state,
            current_query_context=QueryContext(
                state=current.current_query_context.state,
                address=current.current_query_context.address,
            ),
            current_zswap_local_state=local_state,
            cost_model=current.cost_model,
            gas_limit=current.gas_limit,
        )

    def switch_sender(
        self,
        sender: str,
        carryover: Optional[LocalStateCarryover] = None,
    ) -> CircuitContext[P]:
        """Rebuilds the context for `sender` and makes it the current one."""
        logger.debug(f"Switching sender to '{sender[:16]}...'.")
        return self.set_context(self.rebuild_for_sender(sender, carryover))
