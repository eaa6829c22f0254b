from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from storefront.core.config import config


def build_engine(url: str = None, echo: bool = None) -> Engine:
    """Create the engine backing the key-value storage."""
    return create_engine(
        url or config.storage.url,
        echo=config.storage.echo if echo is None else echo,
    )
