"""Error taxonomy shared by the extractor, handler and HTTP layer."""


class DistillError(Exception):
    """Base error carrying a user-facing message and HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(DistillError):
    status_code = 400


class ExtractionFailed(DistillError):
    status_code = 400


class NoContent(DistillError):
    status_code = 400


class GenerationFailed(DistillError):
    status_code = 500


class ConfigError(DistillError):
    status_code = 500


class DraftNotFound(DistillError):
    status_code = 404
