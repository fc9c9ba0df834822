# src/contractsim_core/factory/config.py
import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from ..contract import ContractFactory, LedgerExtractor, Witnesses
from ..core.base_enums import LocalStateCarryover

logger = logging.getLogger(__name__)


def no_contract_args(*args: Any) -> Sequence[Any]:
    """Argument transform for contracts whose constructor takes no arguments."""
    if args:
        raise TypeError(f"this contract takes no constructor arguments, got {len(args)}")
    return []


@dataclass(frozen=True)
class SimulatorConfig:
    """
    Everything `create_simulator` needs to know about one contract artifact.

    Attributes:
        contract_factory: Builds the contract artifact from a witness table.
        default_private_state: Produces the private state used when the caller supplies none.
        ledger_extractor: Turns the raw ledger payload into the typed public state.
        witnesses_factory: Produces the default witness table.
        contract_args: Transforms the simulator's constructor arguments into the
                       positional arguments of the contract's `initial_state`.
                       For a contract with owner and salt arguments this could be
                       `lambda owner, salt: [owner, salt]`.
        local_state_carryover: Default policy when a context is rebuilt for another sender.
    """
    contract_factory: ContractFactory
    default_private_state: Callable[[], Any]
    ledger_extractor: LedgerExtractor
    witnesses_factory: Callable[[], Witnesses]
    contract_args: Callable[..., Sequence[Any]] = no_contract_args
    local_state_carryover: LocalStateCarryover = LocalStateCarryover.RESET
