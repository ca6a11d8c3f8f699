from fastapi import Request, status

from comments_api.responses import send_api_response


class NotAuthenticated(Exception):
    """Raised when a handler needs a caller and the request carries none."""


def get_current_user_id(request: Request) -> str:
    """
    FastAPI dependency returning the caller identity that
    ``RequestContextMiddleware`` placed on ``request.state``.

    Raises ``NotAuthenticated`` (rendered as a 401 envelope by the handler
    registered in ``main``) when the request is anonymous.
    """
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise NotAuthenticated()
    return user_id


async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    return send_api_response(
        success=False,
        msg="Unauthorized",
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
