"""Core module for nyaa: state, backends and the control loop."""

from .models import Item
from .orchestrator import Orchestrator
from .state import AppState, KeyPress, LoadKind, Mode, ModeKind

__all__ = ["Item", "AppState", "KeyPress", "LoadKind", "Mode", "ModeKind", "Orchestrator"]
