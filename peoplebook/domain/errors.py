class EntityValidationError(ValueError):
    """raised when a caller tries to put invalid data on an entity (blank name, ...)"""
    pass
