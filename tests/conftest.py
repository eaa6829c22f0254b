import pytest

from storefront.repositories.memory_storage import MemoryStorage
from tests.factories import make_product


@pytest.fixture
def product():
    return make_product()


@pytest.fixture
def sample_products():
    return [
        make_product(id="1", name="Wireless Headphones", price=19999, category="electronics",
                     stock=15, rating=4.5),
        make_product(id="2", name="Classic T-Shirt", description="Soft cotton tee",
                     price=1999, category="clothing", stock=0, rating=4.0),
        make_product(id="3", name="Design Book", description="Everyday design principles",
                     price=2499, category="books", stock=30, rating=None),
        make_product(id="4", name="Yoga Mat", description="Non-slip mat with strap",
                     price=3499, category="sports", stock=25, rating=4.8),
        make_product(id="5", name="Desk Lamp", description="LED lamp with wireless charging base",
                     price=3999, category="home", stock=18, rating=4.3),
    ]


@pytest.fixture
def memory_storage():
    return MemoryStorage()
