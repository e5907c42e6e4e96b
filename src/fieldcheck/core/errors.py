class FieldCheckError(Exception):
    """Base error for fieldcheck exceptions."""


class ContractError(FieldCheckError, TypeError):
    """Raised when an operation is called with arguments of the wrong shape."""


class RuleFileError(FieldCheckError):
    """Raised when a rule file is invalid."""
