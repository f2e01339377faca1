"""데이터베이스 테이블 생성 스크립트"""

import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ledgerapi.config import settings
from ledgerapi.database.connection import engine
from ledgerapi.models import Base


def init_db():
    """데이터베이스 초기화"""
    try:
        Base.metadata.create_all(bind=engine)
        print(f"Database initialized successfully: {settings.DATABASE_URL}")
    except Exception as e:
        print(f"Database initialization failed: {str(e)}")
        raise


if __name__ == "__main__":
    init_db()
