# src/contractsim_core/utils/context_utils.py
"""
Helpers for building circuit contexts outside the normal call flow, e.g. to
drive a contract directly in a test or to replay a call as another sender.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..data_structures import ChargedState, CircuitContext, CostModel, P, QueryContext
from ..runtime import empty_zswap_local_state

if TYPE_CHECKING:
    from ..core.simulator import ContractSimulator

logger = logging.getLogger(__name__)


def use_circuit_context(
    private_state: P,
    charged_state: ChargedState,
    sender: str,
    contract_address: str,
) -> CircuitContext[P]:
    """
    Constructs a fresh `CircuitContext`: the given private and public state, an
    empty local state for `sender` and an initial cost model.
    """
    return CircuitContext(
        current_private_state=private_state,
        current_query_context=QueryContext(charged_state, contract_address),
        current_zswap_local_state=empty_zswap_local_state(sender),
        cost_model=CostModel.initial(),
    )


def use_circuit_context_sender(simulator: ContractSimulator[P, object], sender: str) -> CircuitContext[P]:
    """
    Prepares a context for `sender` from a live simulator: its current public
    state, private state, cost model and gas limit, with an empty local state
    for the new sender. The simulator's own context is left untouched.
    """
    current = simulator.circuit_context
    return CircuitContext(
        current_private_state=simulator.get_private_state(),
        current_query_context=QueryContext(
            current.current_query_context.state,
            simulator.contract_address,
        ),
        current_zswap_local_state=empty_zswap_local_state(sender),
        cost_model=current.cost_model,
        gas_limit=current.gas_limit,
    )
