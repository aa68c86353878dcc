"""SQLAlchemy 엔진/세션/Base 선언과 요청 단위 세션 의존성을 제공합니다."""

import json

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}


def json_serializer(value) -> str:
    # 한글 본문을 이스케이프 없이 저장한다.
    return json.dumps(value, ensure_ascii=False)


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
    json_serializer=json_serializer,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
