"""Wire format of every error the API returns."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """``{"type": ..., "message": ...}``.

    Clients branch on ``type``; ``message`` is for people and its wording
    is kept stable for older clients that match on it.
    """

    type: str
    message: str
