class StringCalculatorError(Exception):
    """base exception for this package"""


class ConfigError(StringCalculatorError):
    """bad value found in the environment configuration"""


class NegativesNotAllowed(StringCalculatorError, ValueError):
    """
    the input contained one or more negative numbers.
    `negatives` is an iterable of the offending ints, in order of appearance
    """

    def __init__(self, negatives):
        if isinstance(negatives, str):
            raise TypeError(f"expected an iterable of ints, got str {negatives!r}")
        self.negatives = tuple(negatives)
        msg = "Negatives not allowed: " + ", ".join(str(n) for n in self.negatives)
        super().__init__(msg)
