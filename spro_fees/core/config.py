from pydantic_settings import BaseSettings
from pydantic import Field, validator

class Settings(BaseSettings):
    # API Keys
    smardex_subgraph_api_key: str = Field(default="", description="SmarDex subgraph API key")

    # Subgraph
    subgraph_host: str = "https://subgraph.smardex.io"
    subgraph_timeout: float = Field(default=30.0, description="Subgraph request timeout in seconds")

    # Backend
    backend_host: str = "0.0.0.0"
    backend_port: int = 8004
    environment: str = Field(default="development", description="dev/staging/production")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @validator("smardex_subgraph_api_key")
    def validate_api_key(cls, v):
        # Missing key is sent as an empty header, the subgraph decides
        return v or ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
