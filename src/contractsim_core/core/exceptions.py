# src/contractsim_core/core/exceptions.py
"""
Diagnosable exceptions raised by the harness core itself.

Failures raised by a circuit body or a witness are NOT wrapped here; they reach
the caller unmodified. The only error the dispatch layer adds is a lookup
failure for a circuit name the artifact does not define.
"""
from dataclasses import dataclass
from typing import Tuple

from ..errors import DiagnosableError, format_diagnostic_report
from .base_enums import CircuitKind


@dataclass()
class UnknownCircuitError(DiagnosableError, AttributeError):
    """
    Raised when a dispatcher is asked for a circuit its circuit set does not contain.

    Also an `AttributeError`, so `getattr(dispatcher, name, default)` and
    `hasattr` keep working on attribute-style access.
    """
    circuit_name: str
    kind: CircuitKind
    available: Tuple[str, ...]

    def __str__(self):
        return f"No {self.kind} circuit named '{self.circuit_name}'. Available: {list(self.available)}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unknown Circuit",
            details=(
                f"The {self.kind} circuit set has no entry named '{self.circuit_name}'.\n"
                f"Available {self.kind} circuits: {', '.join(self.available) or '(none)'}"
            ),
            suggestion=(
                "Check the spelling of the circuit name, and whether the compiler classified it as "
                "pure or impure. Impure circuits are only reachable through `impure_circuit`."
            ),
            context={'circuit': self.circuit_name}
        )
