# Projection module
from .projector import (
    PRODUCT_SEARCH_TERMS,
    TOP_N,
    ProviderParameterProjector,
    WeightedBucket,
    accumulate,
    default_parameters,
    product_focused_terms,
)
