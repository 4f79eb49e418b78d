"""Errors raised while configuring TinyLFU structures."""


class TinyLFUError(ValueError):
    """Base class for invalid TinyLFU configuration values."""

    def __init__(self, value, message):
        super().__init__(message)
        self.value = value


class InvalidCountMinWidthError(TinyLFUError):
    """The count-min sketch was given an unusable width."""

    def __init__(self, value):
        super().__init__(value, f"invalid count main sketch width: {value}")


class InvalidSamplesError(TinyLFUError):
    """The number of samples is not usable."""

    def __init__(self, value):
        super().__init__(value, f"invalid number of samples: {value}")


class InvalidFalsePositiveRatioError(TinyLFUError):
    """The false positive ratio lies outside (0.0, 1.0)."""

    def __init__(self, value):
        super().__init__(
            value,
            f"invalid false positive ratio: {value}, "
            "which should be in range (0.0, 1.0)",
        )