"""검색엔진 referrer URL에서 유입 검색어를 추출하는 헬퍼입니다."""

from typing import NamedTuple
from urllib.parse import parse_qs, urlsplit

# (호스트, 검색어 파라미터, 엔진 이름). 하위 도메인(m.search.naver.com 등)도 매칭한다.
SEARCH_ENGINES = (
    ("search.naver.com", "query", "naver"),
    ("google.com", "q", "google"),
    ("google.co.kr", "q", "google"),
    ("search.daum.net", "q", "daum"),
    ("bing.com", "q", "bing"),
    ("search.yahoo.com", "p", "yahoo"),
    ("search.zum.com", "query", "zum"),
)

ENGINE_DISPLAY_NAMES = {
    "naver": "네이버",
    "google": "구글",
    "daum": "다음",
    "bing": "빙",
    "yahoo": "야후",
    "zum": "줌",
}

KEYWORD_MIN_LENGTH = 2
KEYWORD_MAX_LENGTH = 100
IGNORED_PREFIXES = ("http", "www.", "tab_", "nexearch")


class Referral(NamedTuple):
    keyword: str
    search_engine: str
    referrer_url: str


def _host_matches(hostname: str, domain: str) -> bool:
    return hostname == domain or hostname.endswith("." + domain)


def extract_search_keyword(referrer_url: str | None) -> Referral | None:
    if not referrer_url:
        return None
    try:
        parts = urlsplit(referrer_url.strip())
        hostname = (parts.hostname or "").lower()
    except ValueError:
        return None
    if not hostname:
        return None

    params = parse_qs(parts.query)
    for domain, param, engine in SEARCH_ENGINES:
        if not _host_matches(hostname, domain):
            continue
        values = [value.strip() for value in params.get(param, []) if value.strip()]
        if values:
            return Referral(keyword=values[0], search_engine=engine, referrer_url=referrer_url)
    return None


def is_valid_keyword(keyword: str | None) -> bool:
    text = (keyword or "").strip()
    if not KEYWORD_MIN_LENGTH <= len(text) <= KEYWORD_MAX_LENGTH:
        return False
    return not text.lower().startswith(IGNORED_PREFIXES)


def engine_display_name(engine: str) -> str:
    return ENGINE_DISPLAY_NAMES.get(engine, engine)
