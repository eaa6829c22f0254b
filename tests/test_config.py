from decimal import Decimal

import pytest

from storefront.core.config import Config


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in ["STOREFRONT_STORAGE_URL", "CART_STORAGE_KEY", "TAX_RATE", "CATALOG_TIMEOUT", "PORT"]:
            monkeypatch.delenv(name, raising=False)

        cfg = Config()

        assert cfg.storage.url == "sqlite:///storefront.db"
        assert cfg.storage.cart_key == "shopping-cart"
        assert cfg.catalog.tax_rate == Decimal("0.10")
        assert cfg.app.port == 5000
        cfg.validate()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TAX_RATE", "0.0825")
        monkeypatch.setenv("STORAGE_ECHO", "true")
        monkeypatch.setenv("ENVIRONMENT", "production")

        cfg = Config()

        assert cfg.catalog.tax_rate == Decimal("0.0825")
        assert cfg.storage.echo is True
        assert cfg.is_production and not cfg.is_development

    @pytest.mark.parametrize("name, value", [
        ("TAX_RATE", "1.5"),
        ("CATALOG_TIMEOUT", "0"),
        ("STOREFRONT_STORAGE_URL", ""),
    ])
    def test_validate_rejects(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError):
            Config().validate()
