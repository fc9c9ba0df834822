# src/contractsim_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("ContractSim Core package initialized.")

from .constants import ZERO_COIN_PUBLIC_KEY, DUMMY_CONTRACT_ADDRESS
from .data_structures import (
    ChargedState,
    CircuitContext,
    CircuitResults,
    ConstructorContext,
    ConstructorResult,
    ContractState,
    CostModel,
    QueryContext,
    WitnessContext,
    ZswapLocalState,
)
from .runtime import dummy_contract_address, empty_zswap_local_state, witness_context
from .contract import IMinimalContract
from .core import (
    CircuitContextManager,
    CircuitKind,
    ContractSimulator,
    ImpureCircuitDispatcher,
    LocalStateCarryover,
    PureCircuitDispatcher,
    UnknownCircuitError,
)
from .factory import (
    OptionsParser,
    SimulatorConfig,
    SimulatorOptions,
    create_simulator,
)
from .utils import use_circuit_context, use_circuit_context_sender
from .errors import ContractSimError, SimulatorBuildError

__all__ = [
    # Constants
    "ZERO_COIN_PUBLIC_KEY", "DUMMY_CONTRACT_ADDRESS",
    # Runtime Records
    "ChargedState", "CircuitContext", "CircuitResults", "ConstructorContext",
    "ConstructorResult", "ContractState", "CostModel", "QueryContext",
    "WitnessContext", "ZswapLocalState",
    # Runtime Helpers
    "dummy_contract_address", "empty_zswap_local_state", "witness_context",
    "use_circuit_context", "use_circuit_context_sender",
    # Contract Boundary
    "IMinimalContract",
    # Core
    "CircuitContextManager", "CircuitKind", "ContractSimulator",
    "ImpureCircuitDispatcher", "LocalStateCarryover", "PureCircuitDispatcher",
    # Factory
    "OptionsParser", "SimulatorConfig", "SimulatorOptions", "create_simulator",
    # Top-Level Errors
    "ContractSimError", "SimulatorBuildError", "UnknownCircuitError",
]
