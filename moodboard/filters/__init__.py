# Filters module
from .content_filter import (
    EXPLICIT_KEYWORDS,
    NON_PRODUCT_INDICATORS,
    PRODUCT_INDICATORS,
    ContentFilterPipeline,
    FilterOptions,
    ProductMode,
    passes_explicit_filter,
    passes_product_filter,
    passes_quality_filter,
)
