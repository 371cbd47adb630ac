from typing import Any, Optional


class NotifyError(Exception):
    pass


class InvalidClientId(NotifyError, ValueError):
    client_id: str

    def __init__(self, client_id: str, reason: Optional[str] = None):
        self.client_id = client_id
        msg = f"Invalid client ID: {client_id}"
        if reason is not None:
            msg += f" ({reason})"
        super().__init__(msg)


class PluginNotInitialized(NotifyError, RuntimeError):
    pass


class TransportError(NotifyError):
    """
    A request the remote API answered with status >= 400.

    ``body`` is the decoded JSON response when there was one, the raw text
    otherwise.
    """

    status: int
    url: str
    body: Any

    def __init__(self, status: int, url: str, body: Any = None):
        self.status = status
        self.url = url
        self.body = body
        super().__init__(f"HTTP {status}: Failed to request.")


class ApplicationError(NotifyError):
    status: int
    message: str

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(message)


def classify_error(exc: BaseException) -> Optional[ApplicationError]:
    """
    Return the application error carried by ``exc``, or ``None`` if it is
    not one the remote API produced.
    """
    if not isinstance(exc, TransportError):
        return None
    if not isinstance(exc.body, dict):
        return None
    message = exc.body.get("message")
    if not isinstance(message, str):
        return None
    return ApplicationError(exc.status, message)
