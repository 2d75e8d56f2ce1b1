from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "development"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "resumi"
    db_username: str = "resumi"
    db_password: str = "secret"

    upload_dir: str = "uploads"
    max_file_size_bytes: int = 10 * 1024 * 1024
    min_extracted_text_length: int = 50

    pdf_engine: str = "pdfplumber"
    pdf_parse_timeout_seconds: float = 30.0
    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"

    min_resume_text_length: int = 100
    max_analyzed_length: int = 50_000
    stored_text_preview_length: int = 1000
    frontend_url: str = "http://localhost:3000"
    max_id_attempts: int = 3

    inference_provider: str = "huggingface"
    inference_api_key: str = ""
    inference_base_url: str = ""
    inference_model_name: str = "mistralai/Mistral-7B-Instruct-v0.2"
    inference_max_tokens: int = 1000
    inference_temperature: float = 0.7
    inference_timeout_seconds: int = 60

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"
