from __future__ import annotations


# ======================================================================

class SolverError(RuntimeError):
    """
    Raised when a root finder stops without reaching the requested
    residual, e.g. the iteration limit was hit, the derivative vanished
    or the interval could not be split any further.

    Diagnostic values are attached as attributes so that the caller can
    decide what to do with the last estimate.  Common attributes are:

    - `flag`: Integer reason code (never 0).  Codes are specific to
      each solver and documented there.
    - `details`: Short text description of the reason.
    - `x`, `fx`: Last estimate and its function value.
    - `its`: Number of iterations completed.

    Solvers may attach further attributes (e.g. `xmin`, `xmax`).
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Main message followed by one line per diagnostic value."""
        lines = [super().__str__()]
        lines += [f"{k} -> {v}" for k, v in self.__dict__.items()
                  if v is not None]
        return '\n'.join(lines)
