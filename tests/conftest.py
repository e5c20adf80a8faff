"""
Pytest fixtures for the inventory tests
"""
import pytest

from services import InventoryManager


@pytest.fixture
def manager() -> InventoryManager:
    """A catalog holding the five default products."""
    m = InventoryManager()
    m.add_initial_products()
    return m


@pytest.fixture
def gui():
    pytest.importorskip("tkinter")
    import gui as gui_module
    return gui_module


@pytest.fixture
def dialogs(gui, monkeypatch):
    """Replace message boxes with recorders; confirmations answer yes."""
    calls = []

    def record(kind, answer=None):
        def _show(title, message, **kwargs):
            calls.append((kind, title, message))
            return answer
        return _show

    monkeypatch.setattr(gui.messagebox, "showinfo", record("info"))
    monkeypatch.setattr(gui.messagebox, "showerror", record("error"))
    monkeypatch.setattr(gui.messagebox, "askyesno", record("askyesno", True))
    monkeypatch.setattr(gui.messagebox, "askokcancel", record("askokcancel", True))
    return calls


@pytest.fixture
def app(gui, manager, dialogs):
    settings = {
        "currency": "AED",
        "app_title": "Test Inventory",
        "seed_products": True,
        "log_level": "INFO",
    }
    try:
        window = gui.MainWindow(manager=manager, settings=settings)
    except gui.tk.TclError as e:
        pytest.skip(f"Tk display not available: {e}")
    window.withdraw()
    yield window
    try:
        window.destroy()
    except gui.tk.TclError:
        pass
