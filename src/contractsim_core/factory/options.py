# src/contractsim_core/factory/options.py
import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import cerberus
import yaml

from ..contract import Witnesses
from ..constants import COIN_PUBLIC_KEY_HEX_LENGTH
from .exceptions import OptionsFileError, OptionsValidationError

logger = logging.getLogger(__name__)

HEX_REGEX = r"^[0-9a-fA-F]*$"


@dataclass(frozen=True)
class SimulatorOptions:
    """
    Per-instance overrides of a simulator's defaults. A field left as None
    falls back to the default from the simulator's configuration.
    """
    private_state: Any = None
    witnesses: Optional[Witnesses] = None
    coin_pk: Optional[str] = None
    contract_address: Optional[str] = None


class OptionsValidator(cerberus.Validator):
    """Cerberus validator with the checks simulator options need."""

    def _validate_hex_string(self, constraint: bool, field: str, value: Any):
        """
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, str) and not re.match(HEX_REGEX, value):
            self._error(field, f"'{value}' is not a hex string.")

    def _validate_callable_values(self, constraint: bool, field: str, value: Any):
        """
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or not isinstance(value, Mapping):
            return
        not_callable = sorted(str(k) for k, v in value.items() if not callable(v))
        if not_callable:
            self._error(field, f"Witness(es) {not_callable} must be callable.")


_coin_pk_rule = {
    "type": "string",
    "hex_string": True,
    "minlength": COIN_PUBLIC_KEY_HEX_LENGTH,
    "maxlength": COIN_PUBLIC_KEY_HEX_LENGTH,
}
_contract_address_rule = {"type": "string", "empty": False, "hex_string": True}

OPTIONS_SCHEMA = {
    "private_state": {"nullable": True},
    "witnesses": {
        "type": "dict",
        "nullable": True,
        "keysrules": {"type": "string", "empty": False},
        "callable_values": True,
    },
    "coin_pk": dict(_coin_pk_rule, nullable=True),
    "contract_address": dict(_contract_address_rule, nullable=True),
}

# A replacement witness table must be present; None is only meaningful as an option.
WITNESSES_SCHEMA = {
    "witnesses": dict(OPTIONS_SCHEMA["witnesses"], nullable=False, required=True),
}

# Witnesses cannot be expressed in a file, and a file-borne private state is a plain mapping.
OPTIONS_FILE_SCHEMA = {
    "private_state": {"type": "dict", "required": False},
    "coin_pk": dict(_coin_pk_rule, required=False),
    "contract_address": dict(_contract_address_rule, required=False),
}


def validate_options(options: Union[SimulatorOptions, Mapping[str, Any], None]) -> SimulatorOptions:
    """
    Validates options given either as `SimulatorOptions` or as a plain mapping
    and returns them as `SimulatorOptions`.

    Raises:
        OptionsValidationError: If any option is unknown or malformed.
    """
    if options is None:
        return SimulatorOptions()
    if isinstance(options, SimulatorOptions):
        document = {f.name: getattr(options, f.name) for f in fields(options)}
    elif isinstance(options, Mapping):
        document = dict(options)
    else:
        raise OptionsValidationError(
            errors={"options": [f"expected SimulatorOptions or a mapping, got '{type(options).__name__}'"]}
        )

    validator = OptionsValidator(OPTIONS_SCHEMA)
    validator.allow_unknown = False
    if not validator.validate(document):
        raise OptionsValidationError(errors=validator.errors)

    # Build from the caller's own values so private state and witnesses keep their identity.
    return SimulatorOptions(**document)


class OptionsParser:
    """
    Loads simulator options from a YAML file and validates them against the
    options file schema.
    """

    def __init__(self):
        self._validator = OptionsValidator(OPTIONS_FILE_SCHEMA)
        self._validator.allow_unknown = False
        logger.debug("OptionsParser initialized.")

    def parse(self, yaml_path: Union[str, Path]) -> SimulatorOptions:
        source = Path(yaml_path).resolve()
        logger.info(f"Loading simulator options from: {source}")
        content = self._load_yaml(source)
        if not self._validator.validate(content):
            raise OptionsValidationError(errors=self._validator.errors, source=source)
        return SimulatorOptions(**content)

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        if not source.is_file():
            raise OptionsFileError(details=f"Options file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise OptionsFileError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise OptionsFileError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise OptionsFileError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content



def validate_witnesses(witnesses: Any) -> Witnesses:
    """
    Validates a replacement witness table: a mapping of non-empty names to callables.

    Raises:
        OptionsValidationError: If the table is missing, not a mapping, or holds
                                a non-callable entry.
    """
    validator = OptionsValidator(WITNESSES_SCHEMA)
    if not validator.validate({"witnesses": witnesses}):
        raise OptionsValidationError(errors=validator.errors)
    return witnesses
