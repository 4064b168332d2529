class BaseError(Exception):
    def __init__(self, message: str):
        """Initialize error.

        Args:
            message: Human-readable error description.

        """
        self.message = message
        super().__init__(message)
