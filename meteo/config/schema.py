"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

DEFAULT_ARCHIVE_URL = (
    "http://meteo.lyc-chamson-levigan.ac-montpellier.fr"
    "/meteo/releve/fichiersbrut/sauvegardes/fichiersMensuels"
)


class ArchiveConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DEFAULT_ARCHIVE_URL
    user_agent: str = "meteo/0.1.0"
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=5.0, ge=0.0)


class DownloadConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # First month published by the station archive is June 2006
    start_year: int = Field(default=2006, ge=1)
    end_year: int = Field(default=2024, ge=1)
    dest_dir: str = "reports"

    @model_validator(mode="after")
    def _check_years(self) -> "DownloadConfig":
        if self.end_year < self.start_year:
            raise ValueError("end_year must not precede start_year")
        return self


class MeteoConfig(BaseModel):
    model_config = {"extra": "forbid"}

    archive: ArchiveConfig = ArchiveConfig()
    download: DownloadConfig = DownloadConfig()
