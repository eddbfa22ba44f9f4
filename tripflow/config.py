"""
TripFlow Configuration Module

Centralized configuration using Pydantic Settings for type-safe environment management.
Only the API and CLI layers read settings; the pricing and optimization cores
take every input as an argument.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    api_debug: bool = Field(default=False, description="Include error details in 500 responses")
    
    # ==========================================================================
    # Smart Pricing Handler Defaults
    # ==========================================================================
    default_capacity: int = Field(
        default=100,
        description="Capacity assumed when a pricing request omits it"
    )
    default_historical_average: float = Field(
        default=50.0,
        description="Historical booking average assumed when a request omits it"
    )
    default_occupancy_rate: float = Field(
        default=50.0,
        description="Occupancy percentage used when capacity is unknown"
    )
    
    @field_validator("default_capacity")
    @classmethod
    def positive_capacity(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("default_capacity must be positive")
        return v
    
    @field_validator("default_historical_average")
    @classmethod
    def positive_average(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("default_historical_average must be positive")
        return v
    
    # ==========================================================================
    # Trip Optimization Handler Defaults
    # ==========================================================================
    default_budget: Literal["low", "medium", "high"] = Field(
        default="medium",
        description="Budget level used when preferences omit it"
    )
    default_pace: Literal["relaxed", "moderate", "packed"] = Field(
        default="moderate",
        description="Pace used when preferences omit it"
    )
    default_group_size: int = Field(default=1, ge=1, description="Group size used when omitted")
    
    # ==========================================================================
    # Logging Configuration
    # ==========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
