class VocabError(Exception):
    """Base error for the vocab service."""

    status_code = 500


class InvalidCountError(VocabError):
    status_code = 400

    def __init__(self, message: str = "Count parameter must be a positive integer"):
        super().__init__(message)
        self.message = message
