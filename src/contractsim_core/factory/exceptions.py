# src/contractsim_core/factory/exceptions.py
"""
Defines the diagnosable configuration errors raised while assembling a simulator.

None of these escape `create_simulator`-generated constructors directly: the
constructor catches them and re-raises a single `SimulatorBuildError` carrying
the diagnostic report, with the original error chained. `OptionsParser` and the
`witnesses` setter raise them as-is.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(frozen=True)
class OptionsValidationError(DiagnosableError):
    """
    Raised when simulator options do not conform to the options schema
    (malformed coin public key, non-callable witness, unknown option, ...).
    """
    errors: Dict[str, Any]
    source: Optional[Path] = None

    def __str__(self):
        error_lines = [f"  - In option '{k}': {v[0]}" for k, v in sorted(self.errors.items())]
        origin = f" in '{self.source}'" if self.source else ""
        return f"Simulator options failed validation{origin}:\n" + "\n".join(error_lines)

    def get_diagnostic_report(self) -> str:
        error_list_str = "\n".join(
            f"  - Option '{k}': {v[0]}" for k, v in sorted(self.errors.items())
        )
        details = (
            "The simulator options do not conform to the expected format.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n{error_list_str}"
        )
        return format_diagnostic_report(
            error_type="Invalid Simulator Options",
            details=details,
            suggestion=(
                "Recognised options are 'private_state', 'witnesses', 'coin_pk' and 'contract_address'. "
                "'coin_pk' must be exactly 64 hex characters, 'contract_address' a non-empty hex string, "
                "and every witness must be callable."
            ),
            context={'source_file': self.source}
        )


@dataclass(frozen=True)
class OptionsFileError(DiagnosableError):
    """Raised when an options file cannot be read or is not valid YAML."""
    details: str
    file_path: Path

    def __str__(self):
        return f"Options file error in '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Options File Error",
            details=self.details,
            suggestion="Ensure the file exists, is readable, and contains a YAML mapping at its root.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class ContractArgumentsError(DiagnosableError):
    """
    Raised when the configured argument transform rejects the constructor
    arguments handed to a simulator.
    """
    simulator: str
    details: str

    def __str__(self):
        return f"Invalid contract arguments for '{self.simulator}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Contract Arguments",
            details=self.details,
            suggestion=(
                "Pass the constructor arguments as a sequence whose length and order match the "
                "simulator's 'contract_args' transform."
            ),
            context={'simulator': self.simulator}
        )
