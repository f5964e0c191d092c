# mini_beam/errors.py
"""Root of the analysis error taxonomy."""


class BeamAnalysisError(RuntimeError):
    """
    Base class for every failure raised by the analysis core.

    Subclasses:
    - SingularSystemError (kernel.solve): elimination hit a vanishing pivot
    - IncompatibleSamplingError (combine): case results sampled on different grids
    - EmptyCaseSetError (combine): nothing to combine
    """
    pass
