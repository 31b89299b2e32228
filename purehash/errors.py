"""Exceptions raised by purehash."""


class ConstructionError(ValueError):
    """A hasher could not be built with the requested parameters.

    Raised for an output size outside the algorithm's range (zero is out of
    range too, as in hashlib), or for a salt, personalization string or key
    longer than its slot in the parameter block. Absorbing and finalizing
    never raise this.
    """
