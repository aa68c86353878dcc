"""HTML 본문 문자열 처리 헬퍼입니다."""

import re
from typing import Dict

FIRST_IMG_SRC_RE = re.compile(r"<img[^>]+src=[\"']([^\"']+)[\"'][^>]*>", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]+>")
WHITESPACE_RE = re.compile(r"\s+")


def first_image_src(body: str | None) -> str | None:
    if not body:
        return None
    match = FIRST_IMG_SRC_RE.search(body)
    return match.group(1) if match else None


def strip_tags(body: str | None) -> str:
    if not body:
        return ""
    return WHITESPACE_RE.sub(" ", TAG_RE.sub(" ", body)).strip()


def replace_src_attributes(body: str, replacements: Dict[str, str]) -> str:
    """src="old" / src='old' 속성 값을 새 URL로 모두 치환한다."""
    for old, new in replacements.items():
        if not old or old == new:
            continue
        body = body.replace(f'src="{old}"', f'src="{new}"')
        body = body.replace(f"src='{old}'", f"src='{new}'")
    return body
