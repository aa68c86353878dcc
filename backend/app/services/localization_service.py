"""ko/en 다국어 콘텐츠의 읽기 시점 fallback 규칙을 제공합니다.

영어 본문은 제목과 본문이 모두 채워져 있을 때만 사용되고, 그렇지 않으면 한국어
본문 전체로 대체된다. 필드 단위로 섞지 않으며 결과는 저장하지 않는다.
"""

from typing import Any, Dict, List, Mapping, Optional

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"


def normalize_lang(value: Optional[str]) -> str:
    text = (value or "").strip().lower()
    return text if text in SUPPORTED_LANGS else DEFAULT_LANG


def _is_blank(value: Any) -> bool:
    return not str(value or "").strip()


def has_complete_body(body: Optional[Mapping[str, Any]]) -> bool:
    if not body:
        return False
    return not _is_blank(body.get("title")) and not _is_blank(body.get("body"))


def resolve_localized(content: Optional[Mapping[str, Any]], lang: Optional[str]) -> Dict[str, Any]:
    content = content or {}
    korean = dict(content.get("ko") or {})
    if normalize_lang(lang) != "en":
        return korean
    english = content.get("en") or {}
    if has_complete_body(english):
        return dict(english)
    return korean


def resolve_text(mapping: Optional[Mapping[str, Any]], lang: Optional[str]) -> str:
    mapping = mapping or {}
    requested = mapping.get(normalize_lang(lang))
    if not _is_blank(requested):
        return str(requested)
    return str(mapping.get(DEFAULT_LANG) or "")


def localized_texts(content: Optional[Mapping[str, Any]], *fields: str) -> List[str]:
    """검색용으로 두 언어의 지정 필드 값을 모두 모은다."""
    content = content or {}
    texts = []
    for lang in SUPPORTED_LANGS:
        body = content.get(lang) or {}
        texts.extend(str(body.get(field) or "") for field in fields)
    return texts
