# src/contractsim_core/factory/create_simulator.py
"""
Provides `create_simulator`, the factory that turns a `SimulatorConfig` into a
ready-to-use simulator class.

The generated class is the only place that knows how to instantiate a contract
artifact and wire witnesses into it. Its constructor resolves the options,
builds the artifact, transforms the constructor arguments and hands everything
to a `CircuitContextManager`, which from then on owns the context.

Dispatchers are built lazily and kept in a `DispatcherCache`. Replacing the
witness table rebuilds the artifact and invalidates that cache, so a dispatcher
closing over the old artifact is never handed out again.
"""
import logging
from typing import Any, Callable, Mapping, NamedTuple, Sequence, Type, Union

from ..cache import DispatcherCache
from ..constants import ZERO_COIN_PUBLIC_KEY
from ..contract import IMinimalContract, WitnessFunction, Witnesses
from ..core.base_enums import CircuitKind
from ..core.context_manager import CircuitContextManager
from ..core.dispatch import ImpureCircuitDispatcher, PureCircuitDispatcher
from ..core.simulator import ContractSimulator
from ..data_structures import WitnessContext
from ..errors import DiagnosableError, SimulatorBuildError
from ..runtime import dummy_contract_address, witness_context
from .config import SimulatorConfig
from .exceptions import ContractArgumentsError
from .options import SimulatorOptions, validate_options, validate_witnesses

logger = logging.getLogger(__name__)


class Circuits(NamedTuple):
    """Both calling surfaces of a simulator."""
    pure: PureCircuitDispatcher
    impure: ImpureCircuitDispatcher


def create_simulator(config: SimulatorConfig) -> Type[ContractSimulator]:
    """
    Creates a simulator class for the contract described by `config`.

    The returned class can be instantiated directly or subclassed to add
    contract-specific convenience methods.

    Args:
        config: The contract artifact's factories, argument transform and
                ledger extractor.

    Returns:
        A `ContractSimulator` subclass whose constructor is
        `(contract_args=(), options=None)`.
    """

    class GeneratedSimulator(ContractSimulator):
        contract: IMinimalContract

        def __init__(
            self,
            contract_args: Sequence[Any] = (),
            options: Union[SimulatorOptions, Mapping[str, Any], None] = None,
        ):
            """
            Builds the contract artifact and the initial circuit context.

            Args:
                contract_args: Constructor arguments, passed through the
                               configured `contract_args` transform.
                options: Optional overrides for the private state, witness
                         table, sender coin public key and contract address.

            Raises:
                SimulatorBuildError: If the options or the contract arguments
                                     are malformed. The original diagnosable
                                     error is chained.
            """
            super().__init__()
            simulator_name = type(self).__name__
            try:
                resolved = validate_options(options)
            except DiagnosableError as e:
                raise SimulatorBuildError(e.get_diagnostic_report()) from e

            private_state = (
                resolved.private_state if resolved.private_state is not None else config.default_private_state()
            )
            coin_pk = resolved.coin_pk or ZERO_COIN_PUBLIC_KEY
            contract_address = resolved.contract_address or dummy_contract_address()

            self._witnesses: Witnesses = (
                resolved.witnesses if resolved.witnesses is not None else config.witnesses_factory()
            )
            self.contract = config.contract_factory(self._witnesses)

            try:
                processed_args = _process_contract_args(config.contract_args, contract_args, simulator_name)
            except DiagnosableError as e:
                raise SimulatorBuildError(e.get_diagnostic_report()) from e

            self.circuit_context_manager = CircuitContextManager(
                self.contract,
                private_state,
                coin_pk,
                contract_address,
                *processed_args,
                local_state_carryover=config.local_state_carryover,
            )
            self.contract_address = self.circuit_context.current_query_context.address
            self._dispatchers = DispatcherCache()
            logger.info(f"{simulator_name} deployed at '{self.contract_address}'.")

        # --- Calling surfaces ---

        @property
        def pure_circuit(self) -> PureCircuitDispatcher:
            """The pure circuit dispatcher, built on first access after any witness change."""
            return self._dispatchers.get_or_build(
                CircuitKind.PURE,
                lambda: self.create_pure_dispatcher(self.contract.circuits),
            )

        @property
        def impure_circuit(self) -> ImpureCircuitDispatcher:
            """The impure circuit dispatcher, built on first access after any witness change."""
            return self._dispatchers.get_or_build(
                CircuitKind.IMPURE,
                lambda: self.create_impure_dispatcher(self.contract.impure_circuits),
            )

        @property
        def circuits(self) -> Circuits:
            return Circuits(pure=self.pure_circuit, impure=self.impure_circuit)

        @property
        def dispatcher_cache(self) -> DispatcherCache:
            return self._dispatchers

        def reset_circuit_dispatchers(self):
            """Drops the cached dispatchers; the next access rebuilds them."""
            self._dispatchers.invalidate()

        # --- State accessors ---

        def get_public_state(self) -> Any:
            return config.ledger_extractor(self.circuit_context.current_query_context.state.state)

        def get_witness_context(self) -> WitnessContext:
            """
            Returns the context witnesses receive during circuit execution: the
            current public state, private state and contract address.
            """
            ctx = self.circuit_context
            return witness_context(
                self.get_public_state(),
                ctx.current_private_state,
                ctx.current_query_context.address,
            )

        # --- Witness management ---

        @property
        def witnesses(self) -> Witnesses:
            return self._witnesses

        @witnesses.setter
        def witnesses(self, new_witnesses: Witnesses):
            """
            Replaces the witness table, rebuilds the contract artifact with it
            and invalidates the cached dispatchers.

            Raises:
                OptionsValidationError: If `new_witnesses` is None, not a
                                        mapping, or holds a non-callable. The
                                        simulator is left unchanged.
            """
            validate_witnesses(new_witnesses)
            self._witnesses = new_witnesses
            self.contract = config.contract_factory(self._witnesses)
            self.reset_circuit_dispatchers()
            logger.info(f"Witnesses replaced on {type(self).__name__}; contract rebuilt.")

        def override_witness(self, name: str, fn: WitnessFunction):
            """Replaces one witness, keeping the others."""
            self.witnesses = {**self._witnesses, name: fn}

    return GeneratedSimulator


def _process_contract_args(
    transform: Callable[..., Sequence[Any]],
    contract_args: Sequence[Any],
    simulator_name: str,
) -> Sequence[Any]:
    """Runs the argument transform, turning a signature mismatch into a diagnosable error."""
    if isinstance(contract_args, (str, bytes)) or not isinstance(contract_args, Sequence):
        raise ContractArgumentsError(
            simulator=simulator_name,
            details=f"Contract arguments must be a sequence, got '{type(contract_args).__name__}'.",
        )
    try:
        processed = transform(*contract_args)
    except TypeError as e:
        raise ContractArgumentsError(simulator=simulator_name, details=str(e)) from e
    return list(processed)
