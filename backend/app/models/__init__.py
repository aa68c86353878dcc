"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.admin_user import AdminUser
from app.models.press_release import PressRelease
from app.models.sonaverse_story import SonaverseStory
from app.models.diaper_product import DiaperProduct
from app.models.inquiry import Inquiry
from app.models.visitor_log import VisitorLog
from app.models.referral_keyword import ReferralKeyword
from app.models.content_version import ContentVersion

__all__ = [
    "AdminUser",
    "PressRelease",
    "SonaverseStory",
    "DiaperProduct",
    "Inquiry",
    "VisitorLog",
    "ReferralKeyword",
    "ContentVersion",
]
