from .config import SimulatorConfig, no_contract_args
from .options import SimulatorOptions, OptionsParser, validate_options, validate_witnesses
from .exceptions import ContractArgumentsError, OptionsFileError, OptionsValidationError
from .create_simulator import Circuits, create_simulator

__all__ = [
    # Configuration
    "SimulatorConfig",
    "no_contract_args",
    "SimulatorOptions",
    "OptionsParser",
    "validate_options",
    "validate_witnesses",
    # Exceptions
    "ContractArgumentsError",
    "OptionsFileError",
    "OptionsValidationError",
    # Factory
    "Circuits",
    "create_simulator",
]
