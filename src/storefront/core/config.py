import logging
import os
from dataclasses import dataclass
from decimal import Decimal

from dotenv import load_dotenv


load_dotenv()

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


@dataclass
class StorageConfig:
    """Key-value storage used to persist the cart"""
    url: str
    cart_key: str = "shopping-cart"
    echo: bool = False  # Log SQL statements


@dataclass
class CatalogConfig:
    """Product catalog API and pricing settings"""
    api_base_url: str = "http://localhost:5000"
    timeout_seconds: float = 10.0
    tax_rate: Decimal = Decimal("0.10")


@dataclass
class AppConfig:
    """Application configuration"""
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "development"  # development, test, production
    log_level: str = "INFO"


class Config:
    def __init__(self):
        self.environment = os.getenv("ENVIRONMENT", "development")

        self.storage = StorageConfig(
            url=os.getenv("STOREFRONT_STORAGE_URL", "sqlite:///storefront.db"),
            # Changing the key orphans carts saved under the old one
            cart_key=os.getenv("CART_STORAGE_KEY", "shopping-cart"),
            echo=os.getenv("STORAGE_ECHO", "false").lower() == "true"
        )

        self.catalog = CatalogConfig(
            api_base_url=os.getenv("CATALOG_API_URL", "http://localhost:5000"),
            timeout_seconds=float(os.getenv("CATALOG_TIMEOUT", "10")),
            tax_rate=Decimal(os.getenv("TAX_RATE", "0.10"))
        )

        self.app = AppConfig(
            debug=os.getenv("DEBUG", "false").lower() == "true",
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            environment=self.environment,
            log_level=os.getenv("LOG_LEVEL", "INFO")
        )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> None:
        """Validate critical configuration"""
        if not self.storage.url:
            raise ValueError("STOREFRONT_STORAGE_URL is required")

        if self.catalog.timeout_seconds <= 0:
            raise ValueError("CATALOG_TIMEOUT must be positive")

        if not Decimal("0") <= self.catalog.tax_rate <= Decimal("1"):
            raise ValueError("TAX_RATE must be between 0 and 1")


def configure_logging(level: str = "INFO") -> None:
    """Install the root log handler used by the API and scripts."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


config = Config()
