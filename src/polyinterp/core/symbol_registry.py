import logging
from typing import Dict

import sympy as sp

from polyinterp.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class SymbolRegistry:
    """
    Process-wide table of the real-valued SymPy variables used in rendered polynomials.

    Parsing the same expression twice must yield the same free symbol, otherwise
    substitution into a previously parsed expression silently does nothing.
    """
    _symbols: Dict[str, sp.Symbol] = {}

    @classmethod
    def get(cls, name: str = ProcessingConstants.DEFAULT_SYMBOL) -> sp.Symbol:
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"Symbol name must be a valid identifier, got {name!r}")
        symbol = cls._symbols.get(name)
        if symbol is None:
            symbol = cls._symbols[name] = sp.Symbol(name, real=True)
            logger.debug("Registered interpolation variable '%s'", name)
        return symbol

    @classmethod
    def get_all(cls) -> Dict[str, sp.Symbol]:
        """Snapshot of the registered variables by name."""
        return dict(cls._symbols)

    @classmethod
    def clear(cls) -> None:
        logger.debug("Dropping %d registered interpolation variable(s)", len(cls._symbols))
        cls._symbols.clear()
