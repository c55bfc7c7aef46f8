# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Dict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    PROJECT_NAME: str = "Interview Generator API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Generates interview questions from voice-assistant transcripts"

    # OpenAI API Key
    OPENAI_API_KEY: str

    # Language model
    LLM_MODEL: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.2
    LLM_MAX_TOKENS: int = 2000

    # Firebase Configuration
    FIREBASE_CONFIG__type: str = "service_account"
    FIREBASE_CONFIG__project_id: str = ""
    FIREBASE_CONFIG__private_key_id: str = ""
    FIREBASE_CONFIG__private_key: str = ""
    FIREBASE_CONFIG__client_email: str = ""
    FIREBASE_CONFIG__client_id: str = ""
    FIREBASE_CONFIG__auth_uri: str = "https://accounts.google.com/o/oauth2/auth"
    FIREBASE_CONFIG__token_uri: str = "https://oauth2.googleapis.com/token"
    FIREBASE_CONFIG__auth_provider_x509_cert_url: str = "https://www.googleapis.com/oauth2/v1/certs"
    FIREBASE_CONFIG__client_x509_cert_url: str = ""

    INTERVIEWS_COLLECTION: str = "interviews"

    # Question generation limits
    DEFAULT_QUESTION_AMOUNT: int = 10
    MAX_QUESTION_AMOUNT: int = 50

    # Diagnostics returned in error responses
    DEBUG_TEXT_LIMIT: int = 2000
    DEBUG_SAMPLE_SIZE: int = 5

    CORS_ALLOW_ORIGIN: str = "*"

    # Application Settings
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @property
    def firebase_credentials(self) -> dict:
        """Get Firebase credentials as a dictionary"""
        return {
            "type": self.FIREBASE_CONFIG__type,
            "project_id": self.FIREBASE_CONFIG__project_id,
            "private_key_id": self.FIREBASE_CONFIG__private_key_id,
            "private_key": self.FIREBASE_CONFIG__private_key.replace("\\n", "\n"),
            "client_email": self.FIREBASE_CONFIG__client_email,
            "client_id": self.FIREBASE_CONFIG__client_id,
            "auth_uri": self.FIREBASE_CONFIG__auth_uri,
            "token_uri": self.FIREBASE_CONFIG__token_uri,
            "auth_provider_x509_cert_url": self.FIREBASE_CONFIG__auth_provider_x509_cert_url,
            "client_x509_cert_url": self.FIREBASE_CONFIG__client_x509_cert_url
        }

    @property
    def firebase_configured(self) -> bool:
        return bool(self.FIREBASE_CONFIG__project_id and self.FIREBASE_CONFIG__private_key)

    @property
    def cors_headers(self) -> Dict[str, str]:
        """Headers attached to every response, preflight included"""
        return {
            "Access-Control-Allow-Origin": self.CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type, Authorization",
            "Access-Control-Allow-Credentials": "true",
        }


# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get settings instance (singleton pattern)"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
