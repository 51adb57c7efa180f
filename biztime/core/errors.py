"""
Exceptions raised by route handlers.

Every one of them ends up in the error translators registered in
biztime.main, which render the {"error": ..., "message": ...} envelope.
"""


class BizTimeError(Exception):
    status = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def to_dict(self) -> dict:
        return {"message": self.message, "status": self.status}


class NotFoundError(BizTimeError):
    status = 404
