# src/contractsim_core/core/base_enums.py
from enum import Enum, auto


class LocalStateCarryover(Enum):
    """
    Decides what happens to the accumulated local-state records when a context
    is rebuilt for a different sender.
    """
    RESET = auto()     # Fresh baseline: no inputs, no outputs, index 0.
    PRESERVE = auto()  # Keep inputs, outputs and index; only the sender key changes.


class CircuitKind(Enum):
    """The two circuit sets of a contract artifact."""
    PURE = "pure"
    IMPURE = "impure"

    def __str__(self):
        return self.value
