# cliutil/scheduler.py
import math

# delta_time used for the first call of a session: always past any interval
FIRST_CALL_DELTA = math.inf


class RefreshScheduler:
    """
    Refresh gating for the two progress sinks.

    An interval of None disables that sink. update calls are only processed once
    the smaller enabled interval has passed since the previous processed call (or
    on the last item); each sink then redraws only when its own interval has
    passed since the session started.
    """
    def __init__(self, console_interval=None, file_interval=None):
        self.console_interval = None if console_interval is None else float(console_interval)
        self.file_interval = None if file_interval is None else float(file_interval)
        enabled = [i for i in (self.console_interval, self.file_interval) if i is not None]
        self.effective_interval = min(enabled) if enabled else None

    @property
    def enabled(self):
        return self.effective_interval is not None

    def should_process(self, delta_time, is_last_item):
        if self.effective_interval is None:
            return False
        return delta_time >= self.effective_interval or is_last_item

    def console_due(self, time_passed):
        return self._due(self.console_interval, time_passed)

    def file_due(self, time_passed):
        return self._due(self.file_interval, time_passed)

    @staticmethod
    def _due(interval, time_passed):
        # time_passed is None on the first tick of a session
        if interval is None or time_passed is None:
            return False
        return time_passed >= interval

