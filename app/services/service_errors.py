class ServiceError(Exception):
    """Failure in a collaborator the analysis depends on, mapped to an HTTP status by the API layer."""

    def __init__(self, message: str, status_code: int = 500, code: str = "service_error") -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def to_detail(self) -> dict:
        return {"message": self.message, "code": self.code}
