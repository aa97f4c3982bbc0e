from cliutil.scheduler import FIRST_CALL_DELTA, RefreshScheduler


def test_effective_interval_is_smallest_enabled():
    assert RefreshScheduler(0.5, 5).effective_interval == 0.5
    assert RefreshScheduler(None, 5).effective_interval == 5.0
    assert RefreshScheduler(2, None).effective_interval == 2.0
    assert RefreshScheduler(None, None).effective_interval is None


def test_disabled_scheduler_never_processes():
    s = RefreshScheduler()
    assert not s.enabled
    assert not s.should_process(FIRST_CALL_DELTA, True)


def test_should_process():
    s = RefreshScheduler(1, None)
    assert s.should_process(FIRST_CALL_DELTA, False)
    assert s.should_process(1.0, False)
    assert not s.should_process(0.99, False)
    assert s.should_process(0.0, True)


def test_zero_interval_processes_every_call():
    s = RefreshScheduler(0, None)
    assert s.should_process(0.0, False)


def test_sink_due_times():
    s = RefreshScheduler(1, 5)
    assert not s.console_due(None)
    assert not s.file_due(None)
    assert s.console_due(1.0)
    assert not s.file_due(4.9)
    assert s.file_due(5.0)


def test_disabled_sink_is_never_due():
    s = RefreshScheduler(None, 5)
    assert not s.console_due(100.0)
    assert s.file_due(100.0)
