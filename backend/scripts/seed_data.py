"""Seed the database with sample content for local development."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.admin_user import AdminUser
from app.models.diaper_product import DiaperProduct
from app.models.press_release import PressRelease
from app.models.sonaverse_story import SonaverseStory
from app.services.auth_service import hash_password


def _content(ko_title, ko_body, en_title="", en_body="", ko_subtitle=None):
    return {
        "ko": {"title": ko_title, "subtitle": ko_subtitle, "body": ko_body, "thumbnail_url": None, "images": []},
        "en": {"title": en_title, "subtitle": None, "body": en_body, "thumbnail_url": None, "images": []},
    }


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(AdminUser).count() > 0:
            print("Database already seeded. Skipping.")
            return

        admin = AdminUser(
            username="admin",
            email="admin@sonaverse.kr",
            role="admin",
            password_hash=hash_password("sonaverse-admin"),
        )
        db.add(admin)
        db.flush()

        db.add_all([
            PressRelease(
                slug="bodeum-diaper-launch",
                press_name={"ko": "한국경제", "en": "Korea Economic Daily"},
                external_link="https://www.hankyung.com/",
                content=_content(
                    "소나버스, 성인용 기저귀 '보듬' 출시",
                    "<p>시니어 케어 스타트업 소나버스가 성인용 기저귀 브랜드 보듬을 선보였다.</p>",
                    "SONAVERSE launches Bodeum adult diapers",
                    "<p>Senior-care startup SONAVERSE introduced its adult diaper brand Bodeum.</p>",
                ),
                tags=["보듬", "출시"],
                updated_by=admin.id,
            ),
            PressRelease(
                slug="elderly-tech-award",
                press_name={"ko": "전자신문", "en": ""},
                content=_content(
                    "소나버스, 고령친화 기술 혁신상 수상",
                    "<p>보행 보조 기술로 혁신상을 받았다.</p>",
                ),
                tags=["수상"],
                updated_by=admin.id,
            ),
        ])
        db.add_all([
            SonaverseStory(
                slug="why-we-started",
                author_id=admin.id,
                content=_content(
                    "우리가 소나버스를 시작한 이유",
                    "<p>돌봄의 부담을 덜기 위한 이야기.</p>",
                    "Why we started SONAVERSE",
                    "<p>A story about easing the burden of care.</p>",
                    ko_subtitle="브랜드 스토리",
                ),
                tags=["brand"],
                is_published=True,
                is_main=True,
                updated_by=admin.id,
            ),
            SonaverseStory(
                slug="caregiver-tips",
                author_id=admin.id,
                content=_content("보호자를 위한 기저귀 교체 팁", "<p>편안한 교체를 위한 다섯 가지 방법.</p>"),
                tags=["care"],
                is_published=False,
                updated_by=admin.id,
            ),
        ])
        db.add_all([
            DiaperProduct(
                slug="bodeum-pants",
                name={"ko": "보듬 팬티형 기저귀", "en": "Bodeum Pants"},
                description={"ko": "스스로 입고 벗기 쉬운 팬티형", "en": "Easy-to-wear pull-up type"},
                category="팬티형",
                thumbnail_image="/uploads/blob/product/bodeum-pants/bodeum-pants_thumbnail.png",
                tags=["bodeum"],
                is_main=True,
                updated_by=admin.id,
            ),
            DiaperProduct(
                slug="bodeum-pad",
                name={"ko": "보듬 속기저귀", "en": "Bodeum Insert Pad"},
                description={"ko": "겉기저귀와 함께 쓰는 속기저귀", "en": ""},
                category="속기저귀",
                thumbnail_image="/uploads/blob/product/bodeum-pad/bodeum-pad_thumbnail.png",
                tags=["bodeum"],
                updated_by=admin.id,
            ),
        ])
        db.commit()
        print("Seed data created successfully.")
        print("  admin / sonaverse-admin")
    except Exception as e:
        db.rollback()
        print(f"Error seeding data: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
