"""Birth and death kernel pairs.

A KernelSet is a tagged record: the kind selects the shape family and the
parameter tuple holds its parameters in the order they are given on the
command line. Diagnostics go through lookup tables keyed on the kind.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from datastructures.config import ConfigurationError

from .profiles import (
    ExponentPolynomialProfile,
    ExponentProfile,
    GaussianProfile,
    KurticProfile,
    RadialProfile,
    RoughgardenProfile,
    TopHatProfile,
)


class KernelKind(Enum):
    """Kernel families, valued by their command-line code."""

    NORMAL = "n"
    KURTIC = "k"
    GENERAL_KURTIC = "K"
    EXPONENT = "e"
    ROUGHGARDEN = "r"
    EXPONENT_POLYNOMIAL = "p"
    CONSTANT = "c"


PARAMETER_NAMES = {
    KernelKind.NORMAL: ("sm", "sw"),
    KernelKind.KURTIC: ("s0", "s1"),
    KernelKind.GENERAL_KURTIC: ("sm0", "sm1", "sw0", "sw1"),
    KernelKind.EXPONENT: ("A", "B"),
    KernelKind.ROUGHGARDEN: ("sm", "gamma_m", "sw", "gamma_w"),
    KernelKind.EXPONENT_POLYNOMIAL: ("am", "bm", "aw", "bw"),
    KernelKind.CONSTANT: ("rm", "rw"),
}

LABELS = {
    KernelKind.NORMAL: "Normal kernels",
    KernelKind.KURTIC: "Kurtic kernels",
    KernelKind.GENERAL_KURTIC: "General kurtic kernels",
    KernelKind.EXPONENT: "Exponent kernels",
    KernelKind.ROUGHGARDEN: "Roughgarden kernels",
    KernelKind.EXPONENT_POLYNOMIAL: "Exponent polynomial kernels",
    KernelKind.CONSTANT: "Constant kernels",
}

# Build (birth, death) profiles from the parameter tuple
_BUILDERS = {
    KernelKind.NORMAL: lambda sm, sw: (GaussianProfile(sm), GaussianProfile(sw)),
    KernelKind.KURTIC: lambda s0, s1: (KurticProfile(s0, s1),) * 2,
    KernelKind.GENERAL_KURTIC: lambda sm0, sm1, sw0, sw1: (KurticProfile(sm0, sm1), KurticProfile(sw0, sw1)),
    KernelKind.EXPONENT: lambda a, b: (ExponentProfile(a), ExponentProfile(b)),
    KernelKind.ROUGHGARDEN: lambda sm, gm, sw, gw: (RoughgardenProfile(sm, gm), RoughgardenProfile(sw, gw)),
    KernelKind.EXPONENT_POLYNOMIAL: lambda am, bm, aw, bw: (
        ExponentPolynomialProfile(am, bm),
        ExponentPolynomialProfile(aw, bw),
    ),
    KernelKind.CONSTANT: lambda rm, rw: (TopHatProfile(rm), TopHatProfile(rw)),
}


@dataclass(frozen=True)
class KernelSet:
    """Birth kernel m and death kernel w of one family.

    Parameters
    ----------
    kind : KernelKind or str
        Kernel family or its one-letter code.
    params : tuple of float
        Family parameters, see ``PARAMETER_NAMES``.

    Raises
    ------
    ConfigurationError
        If the kind is unknown, the parameter count is wrong or a parameter
        violates the family's positivity constraints.
    """

    kind: KernelKind
    params: Tuple[float, ...]
    birth: RadialProfile = field(init=False, repr=False)
    death: RadialProfile = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.kind, KernelKind):
            try:
                object.__setattr__(self, "kind", KernelKind(self.kind))
            except ValueError:
                codes = ", ".join(k.value for k in KernelKind)
                raise ConfigurationError(f"Unknown kernel type '{self.kind}'. Use one of: {codes}") from None

        try:
            params = tuple(float(p) for p in self.params)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Kernel parameters must be numbers, got {self.params!r}") from None
        names = PARAMETER_NAMES[self.kind]
        if len(params) != len(names):
            raise ConfigurationError(
                f"{LABELS[self.kind]} need {len(names)} parameters ({', '.join(names)}), got {len(params)}"
            )
        object.__setattr__(self, "params", params)

        birth, death = _BUILDERS[self.kind](*params)
        object.__setattr__(self, "birth", birth)
        object.__setattr__(self, "death", death)

    def evaluate(self, which, r, dim):
        """Density of the birth ('birth' or 'm') or death ('death' or 'w') kernel."""
        if which in ("birth", "m"):
            return self.birth.density(r, dim)
        if which in ("death", "w"):
            return self.death.density(r, dim)
        raise ValueError(f"Unknown kernel '{which}', use 'birth' or 'death'")

    def m(self, r, dim):
        return self.birth.density(r, dim)

    def w(self, r, dim):
        return self.death.density(r, dim)

    def describe(self):
        """One-line diagnostic summary, e.g. ``Normal kernels: sm = 1.00000, sw = 1.00000``."""
        values = ", ".join(f"{name} = {value:.5f}" for name, value in zip(PARAMETER_NAMES[self.kind], self.params))
        return f"{LABELS[self.kind]}: {values}"


def make_kernels(code, *params):
    """Create a KernelSet from a one-letter code and its parameters."""
    return KernelSet(kind=code, params=tuple(params))
