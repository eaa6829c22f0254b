from .filters import ProductFilterUtils
from .formatting_utils import FormattingUtils
from .pricing import PricingUtils, TAX_RATE

__all__ = ["ProductFilterUtils", "FormattingUtils", "PricingUtils", "TAX_RATE"]
