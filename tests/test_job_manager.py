import threading

import pytest

from ferrocore.job_manager import (
    ControlFlowKind,
    End,
    EventLoopControlFlow,
    EventLoopProxy,
    JobManager,
    JobPending,
    Progress,
)


def test_job_result_received_after_close():
    proxy = EventLoopProxy()
    manager = JobManager(proxy)
    handle = manager.spawn_foreground_job(lambda killed, prog, x: x * 2, 21)
    manager.close()
    assert handle.try_recv() == 42
    assert handle.is_finished()


def test_job_requests_render():
    proxy = EventLoopProxy()
    with JobManager(proxy) as manager:
        manager.spawn_foreground_job(lambda killed, prog, x: None, None)
    assert proxy.render_requested.is_set()


def test_progress_then_end():
    def job(killed, progressor, items):
        for item in items:
            progressor.make_progress(item)
        return "done"

    with JobManager(EventLoopProxy()) as manager:
        handle = manager.spawn_foreground_job(job, [1, 2])
    assert handle.poll_progress() == Progress(1)
    assert not handle.is_finished()
    assert handle.poll_progress() == Progress(2)
    assert handle.poll_progress() == End("done")
    assert handle.is_finished()


def test_pending_before_finish():
    gate = threading.Event()

    def job(killed, progressor, _):
        gate.wait(5)
        return "late"

    manager = JobManager(EventLoopProxy())
    handle = manager.spawn_foreground_job(job, None)
    with pytest.raises(JobPending):
        handle.try_recv()
    assert handle.is_finished() is False
    gate.set()
    manager.close()
    assert handle.try_recv() == "late"


def test_kill_signals_job():
    def job(killed, progressor, _):
        if killed.wait(5):
            return "killed"
        return "timeout"

    manager = JobManager(EventLoopProxy())
    handle = manager.spawn_foreground_job(job, None)
    handle.kill()
    manager.close()
    assert handle.try_recv() == "killed"


def test_job_exception_reraised():
    def job(killed, progressor, _):
        raise ValueError("boom")

    with JobManager(EventLoopProxy()) as manager:
        handle = manager.spawn_foreground_job(job, None)
    with pytest.raises(ValueError, match="boom"):
        handle.try_recv()
    assert handle.is_finished()


def test_poll_jobs_keeps_results_available():
    manager = JobManager(EventLoopProxy())
    handle = manager.spawn_foreground_job(lambda k, p, x: x, "value")
    manager.close()
    manager.poll_jobs()
    assert handle.try_recv() == "value"


def test_proxy_dup_shares_queue():
    proxy = EventLoopProxy()
    proxy.dup().send("wake")
    proxy.dup().request_render()
    assert proxy.events.get_nowait() == "wake"
    assert proxy.render_requested.is_set()


def test_control_flow_wait_max():
    flow = EventLoopControlFlow.wait_max(0.5)
    assert flow.kind is ControlFlowKind.WAIT_MAX
    assert flow.timeout == 0.5
    assert EventLoopControlFlow(ControlFlowKind.EXIT).timeout is None


def test_control_flow_negative_wait_rejected():
    with pytest.raises(ValueError):
        EventLoopControlFlow.wait_max(-1)