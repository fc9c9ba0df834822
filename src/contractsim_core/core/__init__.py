from .base_enums import CircuitKind, LocalStateCarryover
from .exceptions import UnknownCircuitError
from .context_manager import CircuitContextManager
from .dispatch import CircuitDispatcher, ImpureCircuitDispatcher, PureCircuitDispatcher
from .simulator import ContractSimulator

__all__ = [
    # Enums
    "CircuitKind",
    "LocalStateCarryover",
    # Exceptions
    "UnknownCircuitError",
    # Core Classes
    "CircuitContextManager",
    "CircuitDispatcher",
    "PureCircuitDispatcher",
    "ImpureCircuitDispatcher",
    "ContractSimulator",
]
