"""HTTP 오류 예외 모듈 — 서비스 계층에서 발생, FastAPI가 JSON 응답으로 변환.

HTTP error exceptions raised by the service layer and rendered by FastAPI as
{"detail": ...} responses. Routers never build error responses themselves.

How collabhub uses them:
    - NotFoundError (404): missing user, project, article, post or comment;
      a like/follow/watch target that does not exist; removing an
      interaction that was never recorded.
    - DuplicateError (409): a second like/follow/watch on the same target
      (also when the unique constraint catches a concurrent request);
      a profile update to a username that is taken.
    - ForbiddenError (403): writing or deleting content owned by another user.
    - UnauthorizedError (401): raised only by api.deps.get_current_user.
    - BadRequestError (400): blank comment text; an interaction kind that
      does not apply to the target type (e.g. following a comment).

Explore, stats and featured queries do not raise these; a failed per-type
query is logged and returns an empty result instead.
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (user, project, article, post, comment,
    like/follow/watch) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that violates a uniqueness
    constraint (e.g. liking the same post twice, taken username).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 권한 부족 시 사용.

    403 Forbidden exception.
    Raised when the authenticated user does not own the resource being
    modified (e.g. editing another user's project or deleting their comment).

    Args:
        detail: 오류 메시지 (Error message, default: "Insufficient permissions")
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when authentication is missing, invalid, or expired.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
