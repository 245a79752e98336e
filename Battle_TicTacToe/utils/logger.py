"""Match loggers: a timestamped console log for moves and results, and a no-op one."""

import datetime


def log_event(message):
    """Print message as '[HH:MM:SS] message', flushed so it lands before the next input prompt."""
    stamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{stamp}] {message}", flush=True)


def silent(message):
    pass
