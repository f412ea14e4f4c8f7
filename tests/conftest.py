"""
pytest 픽스처 정의
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.db.database import Base, get_db
from app.main import app
from app.repositories.product_repository import ProductRepository
from app.services.product_service import ProductService


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        app_env="test",
        log_level="DEBUG",
        database_url="sqlite://",
    )


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    테스트용 in-memory SQLite 데이터베이스 세션 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성하고,
    테스트 종료 후 테이블을 삭제하여 격리를 보장합니다.
    StaticPool을 사용해 TestClient의 워커 스레드와 같은 connection을 공유합니다.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # 모든 테이블 생성
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def product_repository(test_db: Session) -> ProductRepository:
    return ProductRepository(test_db)


@pytest.fixture(scope="function")
def product_service(product_repository: ProductRepository) -> ProductService:
    return ProductService(product_repository)


@pytest.fixture(scope="function")
def test_client(test_db, settings):
    """각 테스트마다 테스트 데이터베이스와 설정을 주입한 TestClient 픽스처"""

    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    def override_get_settings():
        return settings

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = override_get_settings

    # lifespan(운영 DB 테이블 생성)을 실행하지 않도록 context manager 없이 생성
    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
