import pytest

from storefront.schemas.product_schemas import PriceRange, ProductFilter, ProductSort
from storefront.utils.filters import ProductFilterUtils
from tests.factories import make_product


def ids(products):
    return [p.id for p in products]


class TestFilterProducts:
    def test_default_filter_keeps_everything(self, sample_products):
        assert ids(ProductFilterUtils.filter_products(sample_products, ProductFilter())) == ["1", "2", "3", "4", "5"]

    def test_search_matches_name_or_description(self, sample_products):
        """'wireless' is in product 1's name and product 5's description"""
        result = ProductFilterUtils.filter_products(sample_products, ProductFilter(search="WIRELESS"))
        assert ids(result) == ["1", "5"]

    @pytest.mark.parametrize("search", ["", "   ", None])
    def test_blank_search_is_inactive(self, sample_products, search):
        result = ProductFilterUtils.filter_products(sample_products, ProductFilter(search=search))
        assert len(result) == len(sample_products)

    def test_search_is_not_trimmed(self):
        """Surrounding spaces are part of the substring being matched"""
        products = [make_product(id="1", name="Headphones", description="Over-ear")]

        assert ProductFilterUtils.filter_products(products, ProductFilter(search=" phones ")) == []
        assert ids(ProductFilterUtils.filter_products(products, ProductFilter(search="PHONES"))) == ["1"]

    def test_search_with_inner_space(self, sample_products):
        result = ProductFilterUtils.filter_products(sample_products, ProductFilter(search="yoga m"))
        assert ids(result) == ["4"]

    def test_category(self, sample_products):
        result = ProductFilterUtils.filter_products(sample_products, ProductFilter(category="books"))
        assert ids(result) == ["3"]

    @pytest.mark.parametrize("category", ["all", None])
    def test_category_all_or_none_is_inactive(self, sample_products, category):
        result = ProductFilterUtils.filter_products(sample_products, ProductFilter(category=category))
        assert len(result) == len(sample_products)

    def test_price_range_is_inclusive(self, sample_products):
        product_filter = ProductFilter(price_range=PriceRange(min=1999, max=3499))
        assert ids(ProductFilterUtils.filter_products(sample_products, product_filter)) == ["2", "3", "4"]

    def test_min_rating_treats_missing_as_zero(self, sample_products):
        result = ProductFilterUtils.filter_products(sample_products, ProductFilter(min_rating=4.3))
        assert ids(result) == ["1", "4", "5"]

        unrated_kept = ProductFilterUtils.filter_products(sample_products, ProductFilter(min_rating=0))
        assert "3" in ids(unrated_kept)

    def test_in_stock(self, sample_products):
        result = ProductFilterUtils.filter_products(sample_products, ProductFilter(in_stock=True))
        assert "2" not in ids(result)
        assert len(result) == 4

    def test_criteria_are_combined(self, sample_products):
        product_filter = ProductFilter(
            search="a",
            price_range=PriceRange(min=2000, max=5000),
            min_rating=4.0,
            in_stock=True,
        )
        assert ids(ProductFilterUtils.filter_products(sample_products, product_filter)) == ["4", "5"]

    def test_does_not_mutate_input(self, sample_products):
        original = list(sample_products)
        ProductFilterUtils.filter_products(sample_products, ProductFilter(category="home"))
        assert sample_products == original

    def test_empty_input(self):
        assert ProductFilterUtils.filter_products([], ProductFilter(search="x")) == []


class TestSortProducts:
    def test_name_ascending_and_descending(self, sample_products):
        asc = ProductFilterUtils.sort_products(sample_products, ProductSort.NAME_ASC)
        desc = ProductFilterUtils.sort_products(sample_products, ProductSort.NAME_DESC)

        assert [p.name for p in asc] == [
            "Classic T-Shirt", "Design Book", "Desk Lamp", "Wireless Headphones", "Yoga Mat"
        ]
        assert [p.name for p in desc] == list(reversed([p.name for p in asc]))

    def test_name_sort_ignores_case_and_accents(self):
        products = [make_product(id="1", name="zebra"), make_product(id="2", name="Éclair"),
                    make_product(id="3", name="apple")]
        assert ids(ProductFilterUtils.sort_products(products, ProductSort.NAME_ASC)) == ["3", "2", "1"]

    def test_price(self, sample_products):
        asc = ProductFilterUtils.sort_products(sample_products, ProductSort.PRICE_ASC)
        desc = ProductFilterUtils.sort_products(sample_products, ProductSort.PRICE_DESC)

        assert [p.price for p in asc] == [1999, 2499, 3499, 3999, 19999]
        assert [p.price for p in desc] == [19999, 3999, 3499, 2499, 1999]

    def test_rating_descending_puts_unrated_last(self, sample_products):
        result = ProductFilterUtils.sort_products(sample_products, ProductSort.RATING_DESC)
        assert ids(result) == ["4", "1", "5", "2", "3"]

    @pytest.mark.parametrize("sort", list(ProductSort))
    def test_stable_for_equal_keys(self, sort):
        """Equal keys keep their input order in every direction"""
        products = [make_product(id=str(i), name="Same", price=100, rating=3.0) for i in range(5)]
        assert ids(ProductFilterUtils.sort_products(products, sort)) == ["0", "1", "2", "3", "4"]

    @pytest.mark.parametrize("sort", list(ProductSort))
    def test_returns_new_list(self, sample_products, sort):
        original = list(sample_products)
        result = ProductFilterUtils.sort_products(sample_products, sort)

        assert result is not sample_products
        assert sample_products == original

    def test_unknown_sort_raises(self, sample_products):
        with pytest.raises(ValueError):
            ProductFilterUtils.sort_products(sample_products, "newest")


class TestCategories:
    def test_first_seen_order(self):
        products = [make_product(id="1", category="books"), make_product(id="2", category="home"),
                    make_product(id="3", category="books")]
        assert ProductFilterUtils.categories(products) == ["books", "home"]

    def test_empty(self):
        assert ProductFilterUtils.categories([]) == []
