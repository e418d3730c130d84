"""Exception types raised by the glide performance core."""


class ConstructionError(ValueError):
    """A weather snapshot or glide profile was built with invalid fields."""


class DomainError(ValueError):
    """A calculation left the mathematical domain of its formula.

    Only reachable when construction-time validation has been bypassed,
    e.g. a non-positive canopy area forced onto a frozen instance.
    """
