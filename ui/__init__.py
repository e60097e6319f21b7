from __future__ import annotations

from importlib import import_module

__all__ = ["CheckersGUI", "GuiSettings"]


def __getattr__(name: str):
    if name == "CheckersGUI":
        module = import_module(".pygame_gui", __name__)
        return getattr(module, name)
    if name == "GuiSettings":
        module = import_module(".settings", __name__)
        return getattr(module, name)
    raise AttributeError(name)
