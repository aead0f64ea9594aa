# Catalog module
from .mappings import PROVIDER_TAG_MAPPINGS, get_mapping
from .profiles import (
    AESTHETIC_PROFILES,
    get_profile,
    get_profile_by_name,
    profile_ids,
)
