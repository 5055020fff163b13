# backends provided by Python Standard Library

import os
from contextlib import contextmanager
from threading import Timer

randombytes = os.urandom


@contextmanager
def timeout(secs: float, handler):
    t = Timer(secs, handler)
    t.start()
    try:
        yield
    finally:
        t.cancel()
