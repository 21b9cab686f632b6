import logging
from enum import Enum
from typing import Union

from polyinterp.core.exceptions import UnknownMethodError
from polyinterp.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


# --- Enum ---
class InterpolationMethod(Enum):
    """Closed set of interpolation formulas. The value is the configuration key."""
    LAGRANGE = "lagrange"
    NEWTON_SEPARATED = "newton_separated"
    NEWTON_FINITE = "newton_finite"
    STIRLING = "stirling"
    BESSEL = "bessel"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def uses_difference_table(self) -> bool:
        """True for the formulas built on the forward-difference table."""
        return self in (InterpolationMethod.NEWTON_FINITE, InterpolationMethod.STIRLING,
                        InterpolationMethod.BESSEL)

    @property
    def assumes_equal_spacing(self) -> bool:
        return self.uses_difference_table

    @property
    def has_symbolic_form(self) -> bool:
        return self in (InterpolationMethod.LAGRANGE, InterpolationMethod.NEWTON_SEPARATED)

    @classmethod
    def from_string(cls, value: Union[str, "InterpolationMethod"]) -> "InterpolationMethod":
        """
        Resolve a method from a configuration key, display name or member name.
        Args:
            value: e.g. 'newton_separated', 'Newton Separated', 'NEWTON_SEPARATED'
        Returns:
            The matching InterpolationMethod
        Raises:
            UnknownMethodError: If no method matches
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownMethodError(ErrorMessages.UNKNOWN_METHOD.format(method=value))
        normalized = value.strip().lower().replace(" ", "_").replace("-", "_")
        for method in cls:
            if normalized == method.value:
                logger.debug("Resolved interpolation method '%s' -> %s", value, method.name)
                return method
        raise UnknownMethodError(ErrorMessages.UNKNOWN_METHOD.format(method=value) +
                                 f". Supported methods: {', '.join(m.value for m in cls)}")


_DISPLAY_NAMES = {
    InterpolationMethod.LAGRANGE: "Lagrange",
    InterpolationMethod.NEWTON_SEPARATED: "Newton Separated",
    InterpolationMethod.NEWTON_FINITE: "Newton Finite",
    InterpolationMethod.STIRLING: "Stirling",
    InterpolationMethod.BESSEL: "Bessel",
}


def method_to_string(method: InterpolationMethod) -> str:
    """Human-readable name of a method, 'Unknown' for anything else."""
    if isinstance(method, InterpolationMethod):
        return method.display_name
    return "Unknown"
