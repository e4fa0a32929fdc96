"""Application Settings"""
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "network-lookup"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("NETLOOKUP_AWS_REGION", "AWS_REGION"),
    )
    ec2_endpoint_url: str = ""  # LocalStack 等

    # CloudFormation response
    callback_timeout_seconds: float = 10.0

    class Config:
        env_prefix = "NETLOOKUP_"
        env_file = ".env"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
