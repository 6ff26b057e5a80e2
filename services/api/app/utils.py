import re
from urllib.parse import urlparse, parse_qs

from app.errors import ValidationError
from app.models import Source, TextSource, WebSource, YoutubeSource

_SCRIPT_RE = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style\b[^>]*>.*?</style\s*>", re.IGNORECASE | re.DOTALL)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_BLOCK_RE = re.compile(r"</?(?:p|div|br|h[1-6])\b[^>]*>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")

ELLIPSIS = "..."


def is_valid_url(value: str) -> bool:
    try:
        u = urlparse(value.strip())
    except ValueError:
        return False
    return u.scheme in ("http", "https") and bool(u.netloc)


def _on_domain(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


def extract_youtube_video_id(url: str) -> str | None:
    try:
        u = urlparse(url.strip())
    except ValueError:
        return None
    host = (u.hostname or "").lower()
    if _on_domain(host, "youtu.be"):
        vid = u.path.strip("/").split("/")[0]
        return vid or None
    if _on_domain(host, "youtube.com"):
        qs = parse_qs(u.query)
        if "v" in qs and qs["v"][0]:
            return qs["v"][0]
        # shorts, embeds and live streams carry the id in the path
        m = re.match(r"^/(?:shorts|embed|live)/([^/]+)", u.path)
        if m:
            return m.group(1)
    return None


def classify_source(content: str, content_type: str) -> Source:
    """Resolve a submission into the source it should be extracted from.

    A URL that carries a YouTube video id is always treated as YouTube, even
    when it was submitted as a plain ``url``.

    Raises:
        ValidationError: If the URL is malformed, or ``content_type`` is
            ``youtube`` and no video id can be found.
    """
    if content_type == "text":
        return TextSource(content)

    url = content.strip()
    if not is_valid_url(url):
        raise ValidationError("Please provide a valid URL")

    vid = extract_youtube_video_id(url)
    if vid:
        return YoutubeSource(url=url, video_id=vid)
    if content_type == "youtube":
        raise ValidationError("Please provide a valid YouTube URL")
    return WebSource(url)


def html_to_text(html: str) -> str:
    t = _SCRIPT_RE.sub("", html)
    t = _STYLE_RE.sub("", t)
    t = _COMMENT_RE.sub("", t)
    t = _BLOCK_RE.sub("\n", t)
    t = _TAG_RE.sub(" ", t)
    return _WS_RE.sub(" ", t).strip()


def truncate(text: str, limit: int = 15000) -> tuple[str, bool]:
    if len(text) <= limit:
        return text, False
    return text[:limit] + ELLIPSIS, True
