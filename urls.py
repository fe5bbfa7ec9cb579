"""URL composition for manifest and image locations."""


def _trim_base(base_url: str) -> str:
    # Exactly one trailing slash is removed.
    if base_url.endswith("/"):
        return base_url[:-1]
    return base_url


def manifest_url(base_url: str, manifest_path: str) -> str:
    return f"{_trim_base(base_url)}{manifest_path}"


def compose_image_url(
    base_url: str,
    content_path: str,
    category: str,
    filename: str,
) -> str:
    """Build the final image URL.

    The result is ``base_url + content_path + category + "/" + filename``
    with one trailing slash trimmed from ``base_url``. Category and filename
    are passed through exactly as stored in the manifest, without any
    URL-encoding.
    """
    return f"{_trim_base(base_url)}{content_path}{category}/{filename}"
