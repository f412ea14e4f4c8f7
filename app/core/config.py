"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 애플리케이션 설정
    app_name: str = "Product CRUD API"
    app_env: str = "development"
    log_level: str = "INFO"

    # 데이터베이스 설정
    database_url: str = "sqlite:///./products.db"
    database_echo: bool = False

    # CORS 설정
    cors_origins: str = "*"  # 쉼표로 구분된 origin 목록

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def is_sqlite(self) -> bool:
        """SQLite 데이터베이스 사용 여부"""
        return self.database_url.startswith("sqlite")

    @property
    def cors_origin_list(self) -> list[str]:
        """
        CORS 허용 origin 목록 파싱

        Returns:
            ["http://localhost:3000", "https://example.com", ...]
        """
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()
