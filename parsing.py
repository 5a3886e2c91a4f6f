import re
from typing import List, Optional, Pattern
from urllib.parse import urljoin, urlparse


SITE_DOMAIN = "yupoo.com"

# Album links share the DOM region with navigation chrome and locale switchers
ALBUM_URL_DENYLIST = [
    "/undefined",
    "language",
    "个人主页",
    "homepage",
]

ALBUM_ID_RE = re.compile(r"/albums/(\d+)(?:/|$)", re.A)

SKU_PATTERNS: List[Pattern[str]] = [
    re.compile(r"\b([A-Z]{2,}[-_]?\d{3,6})\b", re.A),
    re.compile(r"\b([A-Z]\d{3,5})\b", re.A),
    re.compile(r"\b(\d{3,4}[A-Z]{1,3})\b", re.A),
    re.compile(r"\bSKU\s*[:\s]\s*([A-Za-z0-9_-]+)", re.I | re.A),
    re.compile(r"\bItem\s*[:\s]\s*([A-Za-z0-9_-]+)", re.I | re.A),
    re.compile(r"\bCode\s*[:\s]\s*([A-Za-z0-9_-]+)", re.I | re.A),
]


def _in_domain_family(host: Optional[str], domain: str) -> bool:
    if not host:
        return False
    host = host.lower()
    domain = domain.lower().lstrip(".")
    return host == domain or host.endswith("." + domain)


def normalize_url(href: str, base_url: str, domain: str = SITE_DOMAIN) -> Optional[str]:
    """Resolve `href` against `base_url` and return the absolute URL, or None
    when it cannot be resolved, carries an `undefined` token from a broken
    template, or points outside the site's domain family.
    """
    try:
        if not isinstance(href, str) or not href.strip():
            return None
        abs_url = urljoin(base_url, href.strip())
        parsed = urlparse(abs_url)
        host = parsed.hostname
    except Exception:
        return None
    if "undefined" in abs_url:
        return None
    if parsed.scheme not in ("http", "https"):
        return None
    if not _in_domain_family(host, domain):
        return None
    return abs_url


def album_id(url: str) -> Optional[str]:
    try:
        m = ALBUM_ID_RE.search(urlparse(url).path)
    except Exception:
        return None
    return m.group(1) if m else None


def is_valid_album_url(url: str, base_url: str) -> bool:
    """True when `url` looks like a single album page rather than the
    listing page or a navigation/locale/profile link."""
    try:
        path = urlparse(url).path
    except Exception:
        return False
    if "/albums/" not in path:
        return False
    lowered = url.lower()
    for pattern in ALBUM_URL_DENYLIST:
        if pattern.lower() in lowered:
            return False
    base = base_url.rstrip("/")
    if url in (base, base + "/", base_url):
        return False
    return album_id(url) is not None


def extract_sku(text: Optional[str]) -> Optional[str]:
    """Return the first probable product code found in `text`, upper-cased."""
    if not text:
        return None
    for pattern in SKU_PATTERNS:
        m = pattern.search(text)
        if m:
            sku = m.group(1).strip().upper()
            if sku:
                return sku
    return None


def strip_thumbnail_suffix(image_url: str) -> str:
    # Yupoo serves resized variants as `<image>!<transform>`
    return image_url.split("!", 1)[0]


def clean_text(text: Optional[str]) -> str:
    return re.sub(r"\s+", " ", text or "").strip()
