from .context_utils import use_circuit_context, use_circuit_context_sender

__all__ = [
    "use_circuit_context",
    "use_circuit_context_sender",
]
