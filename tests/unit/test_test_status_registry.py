"""Unit tests for the in-memory test status registry."""

import threading
from datetime import datetime, timedelta

import pytz

from app.models.load_test_record import LifecycleState, LoadTestRecord


def make_record(test_id, state=LifecycleState.RUNNING, age=timedelta(0)):
    return LoadTestRecord(
        test_id=test_id,
        runner_handle=f"handle-{test_id}",
        state=state,
        started_at=datetime.now(pytz.utc) - age,
    )


class TestRegistryBasics:
    def test_put_and_get(self, registry):
        registry.put("t1", make_record("t1"))

        record = registry.get("t1")

        assert record.test_id == "t1"
        assert record.runner_handle == "handle-t1"
        assert record.state == LifecycleState.RUNNING

    def test_get_unknown_returns_none(self, registry):
        assert registry.get("missing") is None

    def test_put_replaces_existing(self, registry):
        registry.put("t1", make_record("t1"))
        registry.put("t1", make_record("t1", state=LifecycleState.ERRORED))

        assert registry.get("t1").state == LifecycleState.ERRORED
        assert len(registry) == 1

    def test_get_returns_a_copy(self, registry):
        registry.put("t1", make_record("t1"))

        registry.get("t1").state = LifecycleState.COMPLETED

        assert registry.get("t1").state == LifecycleState.RUNNING


class TestTransition:
    def test_transition_updates_state_only(self, registry):
        original = make_record("t1")
        registry.put("t1", original)

        registry.transition("t1", LifecycleState.COMPLETED)

        record = registry.get("t1")
        assert record.state == LifecycleState.COMPLETED
        assert record.runner_handle == original.runner_handle
        assert record.started_at == original.started_at

    def test_transition_of_unknown_id_is_noop(self, registry):
        registry.transition("missing", LifecycleState.COMPLETED)

        assert registry.get("missing") is None
        assert len(registry) == 0

    def test_terminal_state_can_be_overwritten(self, registry):
        # transition is permissive: nothing prevents a terminal record from going back to running
        registry.put("t1", make_record("t1", state=LifecycleState.COMPLETED))

        registry.transition("t1", LifecycleState.RUNNING)

        assert registry.get("t1").state == LifecycleState.RUNNING

    def test_concurrent_writers(self, registry):
        for index in range(200):
            registry.put(f"t{index}", make_record(f"t{index}"))

        def finish(start):
            for index in range(start, 200, 4):
                registry.transition(f"t{index}", LifecycleState.COMPLETED)

        threads = [threading.Thread(target=finish, args=(offset,)) for offset in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(registry.get(f"t{index}").state == LifecycleState.COMPLETED for index in range(200))


class TestConditionalTransition:
    def test_swaps_when_state_matches(self, registry):
        registry.put("t1", make_record("t1"))

        stored = registry.transition_if("t1", LifecycleState.RUNNING, LifecycleState.ERRORED)

        assert stored == LifecycleState.ERRORED
        assert registry.get("t1").state == LifecycleState.ERRORED

    def test_keeps_state_when_it_does_not_match(self, registry):
        registry.put("t1", make_record("t1", state=LifecycleState.ERRORED))

        stored = registry.transition_if("t1", LifecycleState.RUNNING, LifecycleState.COMPLETED)

        assert stored == LifecycleState.ERRORED
        assert registry.get("t1").state == LifecycleState.ERRORED

    def test_unknown_id_returns_none(self, registry):
        assert registry.transition_if("missing", LifecycleState.RUNNING, LifecycleState.COMPLETED) is None
        assert len(registry) == 0

    def test_only_one_concurrent_swap_wins(self, registry):
        registry.put("t1", make_record("t1"))
        targets = [LifecycleState.COMPLETED, LifecycleState.ERRORED] * 8
        results = []
        barrier = threading.Barrier(len(targets))

        def swap(new_state):
            barrier.wait()
            results.append(registry.transition_if("t1", LifecycleState.RUNNING, new_state))

        threads = [threading.Thread(target=swap, args=(state,)) for state in targets]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        final_state = registry.get("t1").state
        assert final_state.is_terminal
        assert results == [final_state] * len(targets)


class TestEviction:
    def test_evicts_old_terminal_records_only(self, registry):
        registry.put("old-done", make_record("old-done", LifecycleState.COMPLETED, timedelta(days=2)))
        registry.put("old-error", make_record("old-error", LifecycleState.ERRORED, timedelta(days=2)))
        registry.put("old-running", make_record("old-running", LifecycleState.RUNNING, timedelta(days=2)))
        registry.put("new-done", make_record("new-done", LifecycleState.COMPLETED))

        evicted = registry.evict_older_than(timedelta(days=1))

        assert evicted == 2
        assert registry.get("old-done") is None
        assert registry.get("old-error") is None
        assert registry.get("old-running") is not None
        assert registry.get("new-done") is not None

    def test_evict_on_empty_registry(self, registry):
        assert registry.evict_older_than(timedelta(minutes=1)) == 0
