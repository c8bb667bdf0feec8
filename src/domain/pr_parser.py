"""Pull-request URL extraction.

Pure Python, no framework dependencies.
"""

import re
from functools import lru_cache
from typing import List, Optional, Tuple

from src.domain.models import ReviewRequestRef

DEFAULT_HOST = "github.com"

# https://<host>/<owner>/<repo>/pull/<number>
_URL_TEMPLATE = r"https?://{host}/([^/\s]+)/([^/\s]+)/pull/(\d+)"


@lru_cache(maxsize=8)
def _patterns(host: str) -> Tuple[re.Pattern, re.Pattern]:
    body = _URL_TEMPLATE.format(host=re.escape(host))
    return re.compile(body), re.compile(body + r"\Z")


def pr_url_regex(host: str = DEFAULT_HOST) -> re.Pattern:
    """Search pattern for pull-request URLs on `host`."""
    return _patterns(host)[0]


def extract_pr_urls(text: str, host: str = DEFAULT_HOST) -> List[str]:
    """Distinct PR URLs in first-occurrence order (exact string equality)."""
    if not text:
        return []
    search, _ = _patterns(host)
    seen = set()
    urls: List[str] = []
    for match in search.finditer(text):
        url = match.group(0)
        if url not in seen:
            seen.add(url)
            urls.append(url)
    return urls


def parse_pr_url(url: str, host: str = DEFAULT_HOST) -> Optional[ReviewRequestRef]:
    """Strictly parse one PR URL. Returns None if it does not parse."""
    _, strict = _patterns(host)
    match = strict.match(url)
    if not match:
        return None
    owner, repo, number = match.groups()
    pull_number = int(number)
    if pull_number <= 0:
        return None
    return ReviewRequestRef(owner=owner, repo=repo, pull_number=pull_number, url=url)


def extract_review_requests(text: str, host: str = DEFAULT_HOST) -> List[ReviewRequestRef]:
    """Extract and parse every PR URL in `text`, dropping ones that fail strict parsing."""
    refs = []
    for url in extract_pr_urls(text, host):
        ref = parse_pr_url(url, host)
        if ref is not None:
            refs.append(ref)
    return refs
