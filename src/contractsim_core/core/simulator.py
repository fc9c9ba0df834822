# src/contractsim_core/core/simulator.py
"""
Defines `ContractSimulator`, the base class every generated simulator extends.

It wires a `CircuitContextManager` to the dispatchers and keeps the caller
overrides used to impersonate other senders. Everything that depends on a
concrete contract artifact (witnesses, ledger extraction, artifact
construction) is supplied by the subclass built in `factory.create_simulator`.
"""
import logging
from abc import ABC, abstractmethod
from typing import Generic, Mapping, Optional, Tuple, TypeVar

from ..contract import CircuitFunction
from ..data_structures import CircuitContext, ChargedState, P
from .base_enums import LocalStateCarryover
from .context_manager import CircuitContextManager
from .dispatch import ImpureCircuitDispatcher, PureCircuitDispatcher

logger = logging.getLogger(__name__)

L = TypeVar("L")


def _sender_of(context: CircuitContext) -> str:
    return context.current_zswap_local_state.coin_public_key.hex()


class ContractSimulator(ABC, Generic[P, L]):
    """
    Base simulator: context access, caller overrides and dispatcher factories.

    Caller overrides only affect impure calls:
    - `as_caller(pk)` applies to the next impure call and is then consumed;
    - `set_persistent_caller(pk)` applies to every impure call until cleared.
    A one-shot override wins over a persistent one. Pure calls always read the
    current context unchanged.

    An override call commits a context keyed to the override sender. If that
    context is still the current one when the next impure call runs without an
    override, the call runs as the sender that preceded the override(s), with
    the committed local records carried over. A context written explicitly in
    between (`circuit_context = ...`, `switch_sender`) is used as-is.
    """
    circuit_context_manager: CircuitContextManager[P]
    contract_address: str

    def __init__(self):
        self._caller_override: Optional[str] = None
        self._persistent_caller_override: Optional[str] = None
        # (context committed by an override call, sender to return to)
        self._override_commit: Optional[Tuple[CircuitContext[P], str]] = None
        self._pending_home_sender: Optional[str] = None

    # --- Context access ---

    @property
    def circuit_context(self) -> CircuitContext[P]:
        return self.circuit_context_manager.get_context()

    @circuit_context.setter
    def circuit_context(self, new_context: CircuitContext[P]):
        self.circuit_context_manager.set_context(new_context)

    def get_private_state(self) -> P:
        return self.circuit_context.current_private_state

    def get_contract_state(self) -> ChargedState:
        """Returns the raw, un-extracted public state of the contract."""
        return self.circuit_context.current_query_context.state

    @abstractmethod
    def get_public_state(self) -> L:
        """Returns the public ledger state in its extracted, typed form."""
        raise NotImplementedError

    # --- Caller overrides ---

    def as_caller(self, caller: str) -> "ContractSimulator[P, L]":
        """Runs the next impure call as `caller`. Returns self for chaining."""
        self._caller_override = caller
        return self

    def set_persistent_caller(self, caller: Optional[str]):
        """Runs every following impure call as `caller`; None clears it."""
        self._persistent_caller_override = caller

    def reset_caller(self):
        self._caller_override = None
        self._persistent_caller_override = None

    def get_caller_context(self) -> CircuitContext[P]:
        """
        Returns the context the next impure call should run on.

        - With an active override: the current context if it is already keyed
          to that sender, otherwise the current context rebuilt for it.
        - Without one, while the current context is the one an override call
          committed: that context re-keyed to the sender that preceded the
          override(s), local records preserved.
        - Otherwise: the current context itself.

        Reading it consumes a one-shot override.
        """
        manager = self.circuit_context_manager
        current = manager.get_context()
        caller = self._caller_override or self._persistent_caller_override
        self._caller_override = None

        if self._override_commit is not None and current is self._override_commit[0]:
            home_sender = self._override_commit[1]
        else:
            home_sender = _sender_of(current)
        self._pending_home_sender = home_sender if caller else None

        if caller:
            if caller.lower() == _sender_of(current):
                return current
            logger.debug(f"Running impure call as caller '{caller[:16]}...'.")
            return manager.rebuild_for_sender(caller)
        if home_sender != _sender_of(current):
            logger.debug(f"Returning to sender '{home_sender[:16]}...' after caller override.")
            return manager.rebuild_for_sender(home_sender, LocalStateCarryover.PRESERVE)
        return current

    def _commit_impure(self, new_context: CircuitContext[P]):
        self.circuit_context_manager.set_context(new_context)
        home_sender, self._pending_home_sender = self._pending_home_sender, None
        self._override_commit = (new_context, home_sender) if home_sender is not None else None

    # --- Dispatcher factories ---

    def create_pure_dispatcher(self, circuits: Mapping[str, CircuitFunction]) -> PureCircuitDispatcher:
        return PureCircuitDispatcher(circuits, lambda: self.circuit_context)

    def create_impure_dispatcher(self, circuits: Mapping[str, CircuitFunction]) -> ImpureCircuitDispatcher:
        return ImpureCircuitDispatcher(circuits, self.get_caller_context, self._commit_impure)
