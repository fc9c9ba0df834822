# tests/test_context_manager.py
from dataclasses import replace

import pytest

from contractsim_core import (
    ChargedState,
    CircuitContext,
    CircuitContextManager,
    CostModel,
    LocalStateCarryover,
    QueryContext,
    ZswapLocalState,
    dummy_contract_address,
)

from tests.conftest import ALICE, DEPLOYER
from tests.fixtures.address import to_address, to_hex_padded
from tests.fixtures.simple_contract import SimpleContract, simple_witnesses
from tests.fixtures.ownable_contract import OwnableContract


# --- Construction ---

def test_constructor_sets_private_state(context_manager):
    assert context_manager.get_context().current_private_state == {}


def test_constructor_sets_empty_local_state_for_sender(context_manager):
    expected = ZswapLocalState(
        coin_public_key=bytes.fromhex(to_hex_padded("DEPLOYER")),
        current_index=0,
        inputs=(),
        outputs=(),
    )
    assert context_manager.get_context().current_zswap_local_state == expected


def test_constructor_sets_query_context(context_manager):
    query = context_manager.get_context().current_query_context
    assert isinstance(query, QueryContext)
    assert isinstance(query.state, ChargedState)
    assert query.address == dummy_contract_address()
    assert query.state.state == {"_val": 0, "_setter": ""}


def test_constructor_starts_with_initial_cost_model_and_no_gas_limit(context_manager):
    ctx = context_manager.get_context()
    assert ctx.cost_model == CostModel.initial()
    assert ctx.gas_limit is None


def test_constructor_forwards_contract_args():
    manager = CircuitContextManager(OwnableContract({}), {}, DEPLOYER, dummy_contract_address(), ALICE, b"salt")
    assert manager.get_context().current_query_context.state.state == {"_owner": ALICE, "_salt": b"salt"}


def test_constructor_rejects_malformed_coin_pk():
    with pytest.raises(ValueError):
        CircuitContextManager(SimpleContract(simple_witnesses()), {}, "not-hex", dummy_contract_address())


def test_get_context_has_no_side_effects(context_manager):
    first = context_manager.get_context()
    assert context_manager.get_context() is first
    assert context_manager.get_context() is first


# --- set_context ---

def test_set_context_replaces_wholesale(context_manager):
    old_ctx = context_manager.get_context()
    new_ctx = CircuitContext(
        current_private_state={},
        current_query_context=QueryContext(
            ChargedState({"_val": 42, "_setter": ""}),
            to_address("otherAddress"),
        ),
        current_zswap_local_state=ZswapLocalState(
            coin_public_key=bytes.fromhex(to_hex_padded("goldenFace")),
            current_index=555,
            inputs=(("coin", 123),),
        ),
        cost_model=old_ctx.cost_model,
    )

    returned = context_manager.set_context(new_ctx)

    assert returned is new_ctx
    assert context_manager.get_context() == new_ctx
    assert context_manager.get_context() != old_ctx


# --- update_private_state ---

def test_update_private_state_changes_only_private_state(context_manager):
    before = context_manager.get_context()

    after = context_manager.update_private_state({"secret": 7})

    assert after.current_private_state == {"secret": 7}
    assert replace(after, current_private_state=before.current_private_state) == before
    assert after.current_query_context is before.current_query_context
    assert after.current_zswap_local_state is before.current_zswap_local_state
    assert after.cost_model is before.cost_model


# --- rebuild_for_sender ---

@pytest.fixture
def used_manager(context_manager):
    """A manager whose context carries public state, cost and local records from a previous call."""
    ctx = context_manager.get_context()
    local_state = ctx.current_zswap_local_state.with_input("coin-in").with_output("coin-out")
    context_manager.set_context(
        replace(
            ctx,
            current_query_context=ctx.current_query_context.with_state({"_val": 9, "_setter": DEPLOYER}),
            current_zswap_local_state=local_state,
            cost_model=ctx.cost_model.charge(compute_time=3),
            gas_limit=1_000,
        )
    )
    return context_manager


def test_rebuild_for_sender_preserves_public_state_and_cost(used_manager):
    before = used_manager.get_context()

    rebuilt = used_manager.rebuild_for_sender(ALICE)

    assert rebuilt.current_query_context.state == before.current_query_context.state
    assert rebuilt.current_query_context.address == before.current_query_context.address
    assert rebuilt.cost_model == before.cost_model
    assert rebuilt.gas_limit == 1_000
    assert rebuilt.current_private_state == before.current_private_state
    assert rebuilt.current_zswap_local_state.coin_public_key == bytes.fromhex(ALICE)
    assert rebuilt != before


def test_rebuild_for_sender_does_not_commit(used_manager):
    before = used_manager.get_context()
    used_manager.rebuild_for_sender(ALICE)
    assert used_manager.get_context() is before


def test_rebuild_for_sender_resets_local_records_by_default(used_manager):
    rebuilt = used_manager.rebuild_for_sender(ALICE)
    assert rebuilt.current_zswap_local_state == ZswapLocalState(coin_public_key=bytes.fromhex(ALICE))


def test_rebuild_for_sender_can_preserve_local_records(used_manager):
    previous = used_manager.get_context().current_zswap_local_state

    rebuilt = used_manager.rebuild_for_sender(ALICE, LocalStateCarryover.PRESERVE)

    local_state = rebuilt.current_zswap_local_state
    assert local_state.coin_public_key == bytes.fromhex(ALICE)
    assert local_state.inputs == previous.inputs == ("coin-in",)
    assert local_state.outputs == previous.outputs == ("coin-out",)
    assert local_state.current_index == previous.current_index == 1


def test_manager_level_carryover_policy_is_the_default():
    manager = CircuitContextManager(
        SimpleContract(simple_witnesses()),
        {},
        DEPLOYER,
        dummy_contract_address(),
        local_state_carryover=LocalStateCarryover.PRESERVE,
    )
    ctx = manager.get_context()
    manager.set_context(replace(ctx, current_zswap_local_state=ctx.current_zswap_local_state.with_output("x")))

    assert manager.rebuild_for_sender(ALICE).current_zswap_local_state.outputs == ("x",)
    assert manager.rebuild_for_sender(ALICE, LocalStateCarryover.RESET).current_zswap_local_state.outputs == ()


def test_switch_sender_commits_rebuilt_context(used_manager):
    switched = used_manager.switch_sender(ALICE)

    assert used_manager.get_context() is switched
    assert switched.current_zswap_local_state.coin_public_key == bytes.fromhex(ALICE)
    assert switched.current_query_context.state.state == {"_val": 9, "_setter": DEPLOYER}
