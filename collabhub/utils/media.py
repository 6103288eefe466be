"""이미지 표시 해석 유틸리티.

Image display resolution utility. Every image on the platform is stored as
an external URL, an uploaded file path, and a display mode choosing between
the two.
"""

from collabhub.config import settings


def resolve_image(url: str | None, upload: str | None, display: str | None) -> str | None:
    """표시 모드에 따라 실제 이미지 경로를 반환합니다.

    Return the image to show: the uploaded file (served under
    UPLOADS_URL_PREFIX) when display is "upload" and an upload exists,
    otherwise the external URL.

    Args:
        url: 외부 이미지 URL (External image URL)
        upload: 업로드 파일 상대 경로 (Uploaded file relative path)
        display: 표시 모드 "url" | "upload" (Display mode)

    Returns:
        str | None: 표시할 이미지 경로 또는 None (Image to show, or None)
    """
    if display == "upload" and upload:
        prefix: str = settings.UPLOADS_URL_PREFIX.rstrip("/")
        return f"{prefix}/{upload.lstrip('/')}"
    return url
