import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# load .env once at startup
load_dotenv()

class Settings(BaseModel):
    rapidapi_key: str | None = Field(default=None, alias="RAPIDAPI_KEY")
    rapidapi_host: str = Field(
        default="carbonfootprint1.p.rapidapi.com", alias="RAPIDAPI_HOST"
    )
    air_quality_url: str = Field(
        default="https://carbonfootprint1.p.rapidapi.com/AirQualityHealthIndex",
        alias="AIR_QUALITY_URL",
    )
    air_quality_timeout: float = Field(default=10.0, alias="AIR_QUALITY_TIMEOUT")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @classmethod
    def from_env(cls):
        data = {
            "RAPIDAPI_KEY": os.getenv("RAPIDAPI_KEY"),
            "RAPIDAPI_HOST": os.getenv(
                "RAPIDAPI_HOST", "carbonfootprint1.p.rapidapi.com"
            ),
            "AIR_QUALITY_URL": os.getenv(
                "AIR_QUALITY_URL",
                "https://carbonfootprint1.p.rapidapi.com/AirQualityHealthIndex",
            ),
            "AIR_QUALITY_TIMEOUT": os.getenv("AIR_QUALITY_TIMEOUT", "10"),
            "HOST": os.getenv("HOST", "0.0.0.0"),
            "PORT": os.getenv("PORT", "5000"),
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
        }
        return cls.model_validate(data)

settings = Settings.from_env()
