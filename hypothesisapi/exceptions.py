from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hypothesisapi.entities.api_error import APIError


class HypothesisException(Exception):
    """
    Base class for exceptions in this module.
    """
    pass


class BuilderError(HypothesisException):
    """
    Exception raised when a builder cannot materialize a valid value.
    For instance, when a ``SearchQuery`` limit outside ``[0, 200]`` is given.
    """

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __str__(self):
        return f"Builder error: {self.description}"


class APIFailure(HypothesisException):
    """
    Exception raised when the Hypothesis API answers with an error body (``{status, reason}``).
    """

    def __init__(self,
                 api_error: 'APIError',
                 suggestion: str,
                 raw_text: str):
        """ Constructor.

        Args:
            api_error (APIError): The parsed error body.
            suggestion (str): A hint on how to fix the call.
            raw_text (str): The response body as received.
        """
        super().__init__(str(api_error))
        self.api_error = api_error
        self.suggestion = suggestion
        self.raw_text = raw_text

    @property
    def status(self) -> str:
        return self.api_error.status

    @property
    def reason(self) -> str:
        return self.api_error.reason

    def __str__(self):
        return f"{self.suggestion}:\n{self.api_error}"


class DecodeFailure(HypothesisException):
    """
    Exception raised when a response body is neither the expected payload nor an API error.

    Attributes:
        raw_body: The response body exactly as received.
        error: The error raised while parsing the body as the expected payload.
    """

    def __init__(self, raw_body: bytes, error: Exception):
        super().__init__(str(error))
        self.raw_body = raw_body
        self.error = error

    @property
    def raw_text(self) -> str:
        return self.raw_body.decode('utf-8', errors='replace')

    def __str__(self):
        return f"Could not decode the response: {self.error}\n{self.raw_body!r}"
