"""Storefront Configuration"""

from decimal import Decimal
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Dots Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Storage
    storage_dir: Optional[str] = None  # in-memory when unset
    storage_quota_bytes: Optional[int] = None
    cart_storage_key: str = "dots_cart"
    order_history_storage_key: str = "dots_order_history"

    # Business rules
    currency: str = "INR"
    domestic_country: str = "India"
    free_shipping_threshold: int = 2000
    domestic_shipping_cost: int = 100
    international_shipping_cost: int = 500
    tax_rate: Decimal = Decimal("0.18")  # GST
    delivery_lead_days: int = 7
    order_history_limit: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def is_domestic(self, country: Optional[str]) -> bool:
        """Whether a destination country gets domestic shipping and tax"""
        if country is None:
            return True
        return country.strip().lower() == self.domestic_country.strip().lower()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
