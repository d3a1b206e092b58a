"""Quantizer auto-discovery and registration.

Scans gbtile/quantizers/ for modules that define a `quantizer` object of
type Quantizer. Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from gbtile.core.types import Quantizer

DEFAULT = 'luminance'

_registry: dict[str, Quantizer] = {}


def discover() -> dict[str, Quantizer]:
    """Import all quantizer modules and return the registry."""
    if _registry:
        return _registry

    import gbtile.quantizers as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    for modname in found_modules:
        module = importlib.import_module(f'gbtile.quantizers.{modname}')
        quant = getattr(module, 'quantizer', None)
        if isinstance(quant, Quantizer):
            _registry[quant.name] = quant

    return _registry


def get(name: str) -> Quantizer:
    """Get a quantizer by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown quantizer: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def load_module(name: str) -> object:
    """The module defining a quantizer (for docstring access)."""
    return importlib.import_module(f'gbtile.quantizers.{name}')
