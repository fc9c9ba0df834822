# tests/test_options.py
import pytest

from contractsim_core import OptionsParser, SimulatorBuildError, SimulatorOptions
from contractsim_core.factory import (
    ContractArgumentsError,
    OptionsFileError,
    OptionsValidationError,
    validate_options,
)

from tests.conftest import ALICE
from tests.fixtures.address import to_address
from tests.fixtures.simulators import OwnableSimulatorBase, SimpleSimulator, SimpleSimulatorBase


class TestValidateOptions:

    def test_none_means_all_defaults(self):
        assert validate_options(None) == SimulatorOptions()

    def test_mapping_is_converted_and_keeps_identity(self):
        state = {"secret": [1, 2, 3]}
        witnesses = {"wit_a": lambda ctx: (ctx.private_state, 1)}

        options = validate_options({"private_state": state, "witnesses": witnesses, "coin_pk": ALICE})

        assert options.private_state is state
        assert options.witnesses is witnesses
        assert options.coin_pk == ALICE
        assert options.contract_address is None

    def test_simulator_options_pass_through(self):
        options = SimulatorOptions(coin_pk=ALICE, contract_address=to_address("c"))
        assert validate_options(options) == options

    def test_explicit_none_values_are_accepted(self):
        assert validate_options({"coin_pk": None, "witnesses": None}) == SimulatorOptions()

    @pytest.mark.parametrize("coin_pk", ["abc", "0" * 65, "z" * 64, 12])
    def test_malformed_coin_pk(self, coin_pk):
        with pytest.raises(OptionsValidationError) as excinfo:
            validate_options({"coin_pk": coin_pk})
        assert "coin_pk" in excinfo.value.errors

    @pytest.mark.parametrize("address", ["", "0200xyz"])
    def test_malformed_contract_address(self, address):
        with pytest.raises(OptionsValidationError) as excinfo:
            validate_options({"contract_address": address})
        assert "contract_address" in excinfo.value.errors

    def test_non_callable_witness(self):
        with pytest.raises(OptionsValidationError) as excinfo:
            validate_options({"witnesses": {"wit_ok": print, "wit_bad": 3}})
        assert "wit_bad" in str(excinfo.value)

    def test_unknown_option(self):
        with pytest.raises(OptionsValidationError) as excinfo:
            validate_options({"coinPK": ALICE})
        assert "coinPK" in excinfo.value.errors

    def test_wrong_container_type(self):
        with pytest.raises(OptionsValidationError):
            validate_options(["coin_pk", ALICE])

    def test_diagnostic_report(self):
        with pytest.raises(OptionsValidationError) as excinfo:
            validate_options({"coin_pk": "abc"})
        report = excinfo.value.get_diagnostic_report()
        assert "Invalid Simulator Options" in report
        assert "Option 'coin_pk'" in report


class TestSimulatorBuildErrors:

    def test_bad_options_are_wrapped(self):
        with pytest.raises(SimulatorBuildError) as excinfo:
            SimpleSimulator({"coin_pk": "abc"})
        assert isinstance(excinfo.value.__cause__, OptionsValidationError)
        assert "Invalid Simulator Options" in str(excinfo.value)

    def test_non_callable_witness_option_is_wrapped(self):
        with pytest.raises(SimulatorBuildError) as excinfo:
            SimpleSimulator({"witnesses": {"wit_x": None}})
        assert isinstance(excinfo.value.__cause__, OptionsValidationError)

    def test_unexpected_contract_args_are_wrapped(self):
        with pytest.raises(SimulatorBuildError) as excinfo:
            SimpleSimulatorBase((1,))
        cause = excinfo.value.__cause__
        assert isinstance(cause, ContractArgumentsError)
        assert cause.simulator == "GeneratedSimulator"
        assert "Invalid Contract Arguments" in str(excinfo.value)

    def test_missing_contract_args_are_wrapped(self):
        with pytest.raises(SimulatorBuildError) as excinfo:
            OwnableSimulatorBase((ALICE,))
        assert isinstance(excinfo.value.__cause__, ContractArgumentsError)

    def test_contract_args_must_be_a_sequence(self):
        with pytest.raises(SimulatorBuildError) as excinfo:
            OwnableSimulatorBase("owner")
        assert "must be a sequence" in excinfo.value.__cause__.details

    def test_ownable_with_correct_args(self):
        sim = OwnableSimulatorBase((ALICE, bytes(32)))
        assert sim.get_public_state().owner == ALICE


class TestOptionsParser:

    @pytest.fixture
    def parser(self):
        return OptionsParser()

    def test_parse_valid_file(self, parser, tmp_path):
        address = to_address("fromFile")
        path = tmp_path / "options.yaml"
        path.write_text(
            "private_state:\n"
            "  secret: 7\n"
            f"coin_pk: '{ALICE}'\n"
            f"contract_address: '{address}'\n",
            encoding="utf-8",
        )

        options = parser.parse(path)

        assert options == SimulatorOptions(private_state={"secret": 7}, coin_pk=ALICE, contract_address=address)

    def test_parsed_options_build_a_simulator(self, parser, tmp_path):
        path = tmp_path / "options.yaml"
        path.write_text(f"coin_pk: '{ALICE}'\nprivate_state: {{}}\n", encoding="utf-8")

        sim = SimpleSimulator(parser.parse(str(path)))
        sim.set_val(2)

        assert sim.get_public_state().setter == ALICE

    def test_empty_file_means_all_defaults(self, parser, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert parser.parse(path) == SimulatorOptions()

    def test_missing_file(self, parser, tmp_path):
        with pytest.raises(OptionsFileError) as excinfo:
            parser.parse(tmp_path / "missing.yaml")
        assert "not found" in excinfo.value.details
        assert "Options File Error" in excinfo.value.get_diagnostic_report()

    def test_invalid_yaml(self, parser, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("coin_pk: [unclosed\n", encoding="utf-8")
        with pytest.raises(OptionsFileError) as excinfo:
            parser.parse(path)
        assert "Invalid YAML syntax" in excinfo.value.details

    def test_root_must_be_a_mapping(self, parser, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- coin_pk\n- contract_address\n", encoding="utf-8")
        with pytest.raises(OptionsFileError):
            parser.parse(path)

    def test_witnesses_cannot_come_from_a_file(self, parser, tmp_path):
        path = tmp_path / "witnesses.yaml"
        path.write_text("witnesses:\n  wit_a: 1\n", encoding="utf-8")
        with pytest.raises(OptionsValidationError) as excinfo:
            parser.parse(path)
        assert "witnesses" in excinfo.value.errors
        assert excinfo.value.source == path.resolve()

    def test_schema_errors_in_file(self, parser, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("coin_pk: 'abc'\nprivate_state: 3\n", encoding="utf-8")
        with pytest.raises(OptionsValidationError) as excinfo:
            parser.parse(path)
        assert set(excinfo.value.errors) == {"coin_pk", "private_state"}
