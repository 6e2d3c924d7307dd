import importlib
import inspect
import pkgutil
from typing import Dict, List

from betcheck.phishing import signals as signals_pkg
from betcheck.phishing.signals.base import Signal
from betcheck.types import ScoreMode


def discover_signals(package=signals_pkg) -> Dict[str, Signal]:
    """Instantiate every concrete Signal defined in the signals package."""
    found = {}

    for info in pkgutil.iter_modules(package.__path__, package.__name__ + "."):
        module = importlib.import_module(info.name)
        for _, cls in inspect.getmembers(module, inspect.isclass):
            if issubclass(cls, Signal) and cls is not Signal and cls.__module__ == module.__name__:
                signal = cls()
                found[signal.name] = signal

    return found


SIGNALS = discover_signals()


def signals_for(mode: ScoreMode) -> List[Signal]:
    """Active signals for ``mode`` in evaluation order."""
    active = [s for s in SIGNALS.values() if mode in s.modes]
    return sorted(active, key=lambda s: s.order)
