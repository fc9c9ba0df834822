# src/contractsim_core/data_structures.py
"""
Runtime records threaded between circuit calls.

Every record here is a frozen dataclass. A context is never edited in place: a
circuit call, a private-state injection or a sender switch produces a new record
(usually with `dataclasses.replace`) which then replaces the old one wholesale.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

P = TypeVar("P")


@dataclass(frozen=True)
class CostModel:
    """
    Accumulated cost accounting for a simulator instance. A fresh model is all
    zeros; circuits charge it by returning a context carrying a new model.
    """
    read_time: int = 0
    compute_time: int = 0
    block_usage: int = 0
    bytes_written: int = 0
    bytes_deleted: int = 0

    @classmethod
    def initial(cls) -> CostModel:
        return cls()

    def charge(self, **deltas: int) -> CostModel:
        """Returns a new model with each named counter increased by its delta."""
        unknown = set(deltas) - set(self.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown cost counter(s): {sorted(unknown)}")
        return replace(self, **{name: getattr(self, name) + delta for name, delta in deltas.items()})


@dataclass(frozen=True)
class ChargedState:
    """Wraps the raw ledger `StateValue` payload of a contract."""
    state: Any


@dataclass(frozen=True)
class ContractState:
    """The contract state produced by a contract's constructor."""
    data: Any


@dataclass(frozen=True)
class QueryContext:
    """
    The public side of a circuit context: the current ledger payload plus the
    address of the contract that owns it.
    """
    state: ChargedState
    address: str

    def with_state(self, new_state: Any) -> QueryContext:
        """Returns a query context holding `new_state` at the same address."""
        return QueryContext(state=ChargedState(new_state), address=self.address)


@dataclass(frozen=True)
class ZswapLocalState:
    """
    Transaction-scoped local state: the sender's coin public key, a running
    index and the coin input/output records accumulated so far.
    """
    coin_public_key: bytes
    current_index: int = 0
    inputs: Tuple[Any, ...] = ()
    outputs: Tuple[Any, ...] = ()

    def with_input(self, record: Any) -> ZswapLocalState:
        return replace(self, inputs=self.inputs + (record,))

    def with_output(self, record: Any) -> ZswapLocalState:
        return replace(self, outputs=self.outputs + (record,), current_index=self.current_index + 1)


@dataclass(frozen=True)
class CircuitContext(Generic[P]):
    """
    The complete execution state threaded between circuit calls.

    Exactly one instance is current per simulator; it is owned by the
    `CircuitContextManager` and replaced, never mutated.
    """
    current_private_state: P
    current_query_context: QueryContext
    current_zswap_local_state: ZswapLocalState
    cost_model: CostModel = field(default_factory=CostModel.initial)
    gas_limit: Optional[int] = None


@dataclass(frozen=True)
class ConstructorContext(Generic[P]):
    """Input handed to a contract's `initial_state`."""
    initial_private_state: P
    initial_zswap_local_state: ZswapLocalState


@dataclass(frozen=True)
class ConstructorResult(Generic[P]):
    """Output of a contract's `initial_state`."""
    current_contract_state: ContractState
    current_private_state: P
    current_zswap_local_state: ZswapLocalState


@dataclass(frozen=True)
class CircuitResults(Generic[P]):
    """What every circuit callable returns: its business value and the context it left behind."""
    result: Any
    context: CircuitContext[P]


@dataclass(frozen=True)
class WitnessContext(Generic[P]):
    """The view of the world a witness implementation receives."""
    ledger: Any
    private_state: P
    contract_address: str
