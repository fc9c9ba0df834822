# tests/conftest.py
import pytest

from contractsim_core import CircuitContextManager, dummy_contract_address

from tests.fixtures.address import to_hex_padded
from tests.fixtures.simple_contract import SimpleContract, simple_witnesses
from tests.fixtures.simulators import OwnableSimulator, SimpleSimulator, WitnessSimulator
from tests.fixtures.witness_contract import WitnessPrivateState

DEPLOYER = to_hex_padded("DEPLOYER")
ALICE = to_hex_padded("ALICE")
BOB = to_hex_padded("BOB")


@pytest.fixture
def deployer():
    return DEPLOYER


@pytest.fixture
def alice():
    return ALICE


@pytest.fixture
def bob():
    return BOB


@pytest.fixture
def context_manager():
    """A manager over a fresh Simple contract, deployed by DEPLOYER with private state {}."""
    return CircuitContextManager(
        SimpleContract(simple_witnesses()),
        {},
        DEPLOYER,
        dummy_contract_address(),
    )


@pytest.fixture
def simple_sim():
    return SimpleSimulator({"private_state": {}, "coin_pk": DEPLOYER})


@pytest.fixture
def private_state():
    return WitnessPrivateState(secret_bytes=b"\x01" * 32, secret_field=10, secret_uint=20)


@pytest.fixture
def witness_sim(private_state):
    return WitnessSimulator({"private_state": private_state, "coin_pk": DEPLOYER})


@pytest.fixture
def ownable_sim():
    return OwnableSimulator(DEPLOYER, options={"coin_pk": DEPLOYER})
