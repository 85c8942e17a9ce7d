"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class SearchValidationError(ServiceError):
    """Bad user input; reported as-is, nothing is computed."""


class ExpansionError(ServiceError):
    """The AI expansion backend failed or returned something unusable."""
