class PolicyInputError(ValueError):
    """Raised when a field cannot be resolved against the redaction rules."""
