import unicodedata
from typing import List, Sequence

from storefront.schemas.product_schemas import ALL_CATEGORIES, Product, ProductFilter, ProductSort


DEFAULT_RATING = 0.0
MIN_STOCK_AVAILABLE = 0


class ProductFilterUtils:
    """
    Pure filtering and sorting for product listings

    Neither method mutates its input; both return new lists.
    """

    @classmethod
    def filter_products(cls, products: Sequence[Product], product_filter: ProductFilter) -> List[Product]:
        """
        Apply every active criterion of the filter (logical AND)

        Order: search, category, price range, minimum rating, in stock.
        """
        result = list(products)

        # Blank means inactive; the text itself is matched untrimmed
        search = product_filter.search or ""
        if search.strip():
            query = search.casefold()
            result = [
                p for p in result
                if query in p.name.casefold() or query in p.description.casefold()
            ]

        category = product_filter.category
        if category and category != ALL_CATEGORIES:
            result = [p for p in result if p.category == category]

        price_range = product_filter.price_range
        if price_range is not None:
            result = [p for p in result if price_range.min <= p.price <= price_range.max]

        if product_filter.min_rating is not None:
            result = [p for p in result if cls._rating(p) >= product_filter.min_rating]

        if product_filter.in_stock is True:
            result = [p for p in result if p.stock > MIN_STOCK_AVAILABLE]

        return result

    @classmethod
    def sort_products(cls, products: Sequence[Product], sort: ProductSort) -> List[Product]:
        """
        Return a new, stably sorted list

        Equal keys keep their input order, including for the descending sorts.
        """
        if sort == ProductSort.NAME_ASC:
            return sorted(products, key=cls._name_key)
        elif sort == ProductSort.NAME_DESC:
            return sorted(products, key=cls._name_key, reverse=True)
        elif sort == ProductSort.PRICE_ASC:
            return sorted(products, key=lambda p: p.price)
        elif sort == ProductSort.PRICE_DESC:
            return sorted(products, key=lambda p: p.price, reverse=True)
        elif sort == ProductSort.RATING_DESC:
            return sorted(products, key=cls._rating, reverse=True)
        raise ValueError(f"Unknown sort option: {sort!r}")

    @classmethod
    def categories(cls, products: Sequence[Product]) -> List[str]:
        """Distinct categories in first-seen order"""
        seen = dict.fromkeys(p.category.value for p in products)
        return list(seen)

    @classmethod
    def _rating(cls, product: Product) -> float:
        return product.rating if product.rating is not None else DEFAULT_RATING

    @classmethod
    def _name_key(cls, product: Product):
        # Accent- and case-insensitive first, raw name breaks ties
        folded = unicodedata.normalize("NFKD", product.name)
        folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
        return (folded.casefold(), product.name)
