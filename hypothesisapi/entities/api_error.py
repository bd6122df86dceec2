from pydantic import BaseModel


class APIError(BaseModel):
    """Error body returned by the Hypothesis API.

    Attributes:
        status: API returned status.
        reason: Cause of failure.
    """
    status: str
    reason: str

    def __str__(self):
        return f"Status: {self.status}\nReason: {self.reason}"
