# Similarity module
from .vector_math import (
    DimensionMismatch,
    cosine_similarity,
    dot_product,
    euclidean_distance,
    magnitude,
    normalize_vector,
    weighted_cosine_similarity,
)
