class NullInputError(TypeError):
    """Raised when ``tokenize`` receives ``None`` instead of a string."""


class FormatError(ValueError):
    """Raised when a token cannot be applied (unknown unit or non-integer value)."""


class SettingValidationError(ValueError):
    pass
