from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "HR Payroll Client"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API Settings
    API_BASE_URL: str = "http://localhost:40010"
    API_PREFIX: str = "/api/v1"
    REQUEST_TIMEOUT: float = 30.0
    USER_AGENT: str = "hr-payroll-client/1.0"

    # External IP Lookup
    IP_LOOKUP_URL: str = "https://api.ipify.org?format=json"
    IP_LOOKUP_TIMEOUT: float = 5.0

    # Credential Storage
    TOKEN_STORAGE_KEY: str = "adminToken"
    TOKEN_BACKEND: str = "memory"  # memory | redis

    # Redis Settings (only used when TOKEN_BACKEND=redis)
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_PASSWORD: str = ""
    REDIS_DB: int = 0
    REDIS_SOCKET_TIMEOUT: float = 2.0

    @property
    def api_url(self) -> str:
        """Full API root, base URL joined with the versioned prefix."""
        return f"{self.API_BASE_URL.rstrip('/')}{self.API_PREFIX}"

    @property
    def log_level_value(self) -> str:
        if self.DEBUG:
            return "DEBUG"
        return self.LOG_LEVEL.upper()

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
