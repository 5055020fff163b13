import signal
from contextlib import contextmanager

# SIGALRM is not available on Windows, fall back to the standard backend there
if not hasattr(signal, 'SIGALRM'):
    raise ImportError("SIGALRM not supported on this platform")


@contextmanager
def timeout(secs: int, handler):
    def sigalrm_handler(_signum, _frame):
        handler()
    orig_handler = signal.signal(signal.SIGALRM, sigalrm_handler)
    signal.alarm(int(secs))
    try:
        yield
    finally:
        signal.alarm(0)
        signal.signal(signal.SIGALRM, orig_handler)
