import pytest
from blessed import Terminal

from passgen import ui


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    """Disable terminal styling, so the output can be matched verbatim."""
    monkeypatch.setattr(ui, 'Terminal', lambda: Terminal(force_styling=None))
