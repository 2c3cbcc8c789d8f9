class CryptanalysisError(ValueError):
    """Base class for every error raised by the engine."""


class ConfigurationError(CryptanalysisError):
    """Output buffer too small, unknown cipher kind or unusable key."""


class EmptyModelError(CryptanalysisError):
    """A frequency table was built from zero counts and cannot be normalised."""


class NoCandidateFound(CryptanalysisError):
    """No candidate cleared the fitness threshold within the search budget.

    The best-effort result is still available as ``.result``.
    """

    def __init__(self, message, result=None):
        super().__init__(message)
        self.result = result
