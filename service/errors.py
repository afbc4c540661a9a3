"""Service layer error types"""


class DomainValidationError(Exception):
    """Domain validation error for service layer"""
    def __init__(self, message: str, code: str = "VALIDATION_FAILED"):
        self.message = message
        self.code = code
        super().__init__(message)


class DependencyError(Exception):
    """Dependency error for external service failures"""
    def __init__(self, message: str, code: str = "DEPENDENCY_UNAVAILABLE"):
        self.message = message
        self.code = code
        super().__init__(message)
