MAX_UPLOAD_SIZE = 20 * 1024 * 1024  # 20 MB

ALLOWED_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "bmp", "webp")

DEFAULT_CONTENT_TYPE = "image/jpeg"

DATE_PATH_FORMAT = "%Y/%m/%d"


def format_megabytes(size: int) -> str:
    mb = size / (1024 * 1024)
    if mb == int(mb):
        return f"{int(mb)} MB"
    return f"{mb:.1f} MB"
