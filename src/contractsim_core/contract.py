# src/contractsim_core/contract.py
"""
Structural contracts for the artifacts produced by the contract compiler.

The harness never imports a concrete contract class. It only relies on the shape
described here: a constructor taking a witness table, two disjoint circuit maps
and an `initial_state` entry point. `typing.Protocol` keeps that dependency
structural, so any generated class with the right attributes qualifies.
"""
import logging
from typing import Any, Callable, Dict, Mapping, Protocol, Tuple, runtime_checkable

from .data_structures import CircuitContext, CircuitResults, ConstructorContext, ConstructorResult, WitnessContext

logger = logging.getLogger(__name__)

#: A circuit callable: `(context, *args) -> CircuitResults`.
CircuitFunction = Callable[..., CircuitResults]

#: A witness implementation: `(witness_context, *args) -> (new_private_state, value)`.
WitnessFunction = Callable[..., Tuple[Any, Any]]

#: The witness table handed to a contract constructor.
Witnesses = Dict[str, WitnessFunction]


@runtime_checkable
class IMinimalContract(Protocol):
    """
    The minimum surface of a compiled contract artifact.

    - `circuits` maps names to pure circuits. Their returned context is ignored.
    - `impure_circuits` maps names to impure circuits. Their returned context
      becomes the current context.
    - `initial_state` runs the contract constructor and produces the first
      ledger payload.
    """
    circuits: Mapping[str, CircuitFunction]
    impure_circuits: Mapping[str, CircuitFunction]

    def initial_state(self, context: ConstructorContext, *args: Any) -> ConstructorResult:
        ...


ContractFactory = Callable[[Witnesses], IMinimalContract]
LedgerExtractor = Callable[[Any], Any]
ContextSource = Callable[[], CircuitContext]
ContextSink = Callable[[CircuitContext], None]
