"""
Aesthetic profiles used for tag-similarity detection.

Thresholds are tuned against the substring-containment scoring in
detection.detector: a handful of on-topic tags typically scores 0.4-0.6
against the matching profile, off-topic profiles stay under 0.3.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from ..models import AestheticProfile


def _profile(id, name, description, keywords, colors, emotions,
             visual_elements, lifestyle, fashion, confidence_threshold):
    return AestheticProfile(
        id=id,
        name=name,
        description=description,
        keywords=tuple(keywords),
        colors=tuple(colors),
        emotions=tuple(emotions),
        visual_elements=tuple(visual_elements),
        lifestyle=tuple(lifestyle),
        fashion=tuple(fashion),
        confidence_threshold=confidence_threshold,
    )


_PROFILES = [
    _profile(
        "girlblogger", "Girlblogger",
        "Nostalgic feminine internet culture aesthetic",
        keywords=["girlblogger", "tumblr girl", "lana del rey", "coquette",
                  "dollette", "nymphet", "soft grunge", "indie girl"],
        colors=["beige", "cream", "soft pink", "brown", "vintage", "sepia", "muted"],
        emotions=["melancholy", "romantic", "nostalgic", "dreamy", "vulnerable",
                  "introspective"],
        visual_elements=["film photography", "polaroids", "flowers", "books",
                         "coffee", "vintage cars", "cigarettes"],
        lifestyle=["reading", "journaling", "thrifting", "coffee shops",
                   "vintage shopping"],
        fashion=["slip dresses", "cardigans", "mary janes", "tights",
                 "vintage band tees", "mini skirts"],
        confidence_threshold=0.35,
    ),
    _profile(
        "indie_sleaze", "Indie Sleaze",
        "2000s-2010s alternative party culture revival",
        keywords=["indie sleaze", "indiesleaze", "hipster", "party",
                  "flash photography", "american apparel", "cigarettes"],
        colors=["neon", "flash white", "black", "metallic", "harsh lighting",
                "high contrast"],
        emotions=["rebellious", "hedonistic", "carefree", "edgy", "confident"],
        visual_elements=["flash photography", "party scenes", "cigarettes", "alcohol",
                         "urban nightlife", "leather jackets"],
        lifestyle=["nightlife", "concerts", "house parties", "art galleries",
                   "underground venues"],
        fashion=["skinny jeans", "leather jackets", "band tees", "boots",
                 "dark eyeliner", "messy hair"],
        confidence_threshold=0.4,
    ),
    _profile(
        "y2k_revival", "Y2K Revival",
        "Futuristic 2000s technology aesthetic",
        keywords=["y2k", "cyber", "futuristic", "2000s", "tech", "metallic",
                  "holographic", "digital"],
        colors=["metallic silver", "electric blue", "hot pink", "lime green",
                "holographic", "chrome"],
        emotions=["optimistic", "futuristic", "energetic", "bold", "confident"],
        visual_elements=["chrome", "holograms", "tech gadgets", "cd-roms",
                         "digital screens", "matrix code"],
        lifestyle=["tech enthusiasm", "gaming", "early internet culture", "digital art"],
        fashion=["metallic clothing", "platform shoes", "cargo pants", "bucket hats",
                 "chunky jewelry"],
        confidence_threshold=0.45,
    ),
    _profile(
        "dark_academia", "Dark Academia",
        "Gothic scholarly aesthetic with classical elements",
        keywords=["dark academia", "academia", "scholarly", "gothic", "classical",
                  "library", "books", "university"],
        colors=["dark brown", "black", "burgundy", "forest green", "gold", "ivory",
                "sepia"],
        emotions=["intellectual", "mysterious", "contemplative", "melancholic",
                  "sophisticated"],
        visual_elements=["old books", "libraries", "gothic architecture", "candles",
                         "manuscripts", "vintage maps"],
        lifestyle=["reading", "writing", "studying", "museums", "classical music",
                   "poetry"],
        fashion=["tweed jackets", "turtlenecks", "oxford shoes", "wool coats",
                 "vintage glasses", "pleated skirts"],
        confidence_threshold=0.35,
    ),
    _profile(
        "cottagecore", "Cottagecore",
        "Romanticized rural and domestic lifestyle",
        keywords=["cottagecore", "cottage", "rural", "countryside", "pastoral",
                  "fairytale", "mushrooms", "bread"],
        colors=["earth tones", "sage green", "cream", "brown", "muted pastels",
                "natural"],
        emotions=["peaceful", "wholesome", "nostalgic", "cozy", "nurturing"],
        visual_elements=["flowers", "gardens", "baking", "knitting", "farms",
                         "forests", "vintage kitchens"],
        lifestyle=["gardening", "baking", "crafting", "reading", "nature walks",
                   "sustainable living"],
        fashion=["linen dresses", "cardigans", "floral prints", "aprons",
                 "mary janes", "straw hats"],
        confidence_threshold=0.4,
    ),
    _profile(
        "coquette", "Coquette",
        "Hyperfeminine romantic aesthetic",
        keywords=["coquette", "coquetteaesthetic", "dollette", "feminine", "romantic",
                  "bows", "lace", "pink"],
        colors=["soft pink", "white", "cream", "baby blue", "lavender", "pearl",
                "pastel"],
        emotions=["romantic", "innocent", "playful", "delicate", "dreamy"],
        visual_elements=["bows", "ribbons", "lace", "flowers", "pearls",
                         "vintage dolls", "ballet"],
        lifestyle=["ballet", "poetry", "vintage shopping", "tea parties",
                   "classical arts"],
        fashion=["mini skirts", "bows", "ballet flats", "cardigans", "pearl jewelry",
                 "vintage lingerie"],
        confidence_threshold=0.45,
    ),
    _profile(
        "coastal_grandmother", "Coastal Grandmother",
        "Relaxed coastal luxury lifestyle",
        keywords=["coastal grandmother", "coastal", "linen", "neutral", "beige",
                  "nancy meyers", "hamptons"],
        colors=["beige", "cream", "white", "sage green", "soft blue", "natural linen",
                "sandy"],
        emotions=["relaxed", "sophisticated", "calm", "luxurious", "timeless"],
        visual_elements=["linen", "natural textures", "coastal views",
                         "white kitchens", "fresh flowers"],
        lifestyle=["cooking", "reading", "gardening", "hosting", "beach walks",
                   "quality time"],
        fashion=["linen shirts", "wide-leg pants", "cashmere", "neutral tones",
                 "minimal jewelry"],
        confidence_threshold=0.35,
    ),
    _profile(
        "clean_girl", "Clean Girl",
        "Minimalist natural beauty aesthetic",
        keywords=["clean girl", "minimal", "natural", "glowing skin", "effortless",
                  "dewy", "wellness"],
        colors=["natural skin tones", "clear", "white", "nude",
                "minimal color palette"],
        emotions=["confident", "natural", "effortless", "healthy", "minimalist"],
        visual_elements=["natural lighting", "minimal makeup", "healthy skin",
                         "simple styling"],
        lifestyle=["skincare routine", "wellness", "minimal lifestyle", "self-care",
                   "fitness"],
        fashion=["minimal jewelry", "neutral clothing", "quality basics",
                 "comfortable fits"],
        confidence_threshold=0.4,
    ),
    _profile(
        "cyber_fairy", "Cyber Fairy",
        "Digital fantasy with ethereal tech elements",
        keywords=["cyber fairy", "digital fairy", "tech fairy", "cyberpunk",
                  "ethereal", "holographic", "futuristic"],
        colors=["holographic", "electric purple", "neon pink", "cyber blue",
                "metallic", "iridescent"],
        emotions=["otherworldly", "futuristic", "mystical", "bold", "creative"],
        visual_elements=["holograms", "digital art", "led lights", "crystals",
                         "tech accessories"],
        lifestyle=["digital art", "gaming", "experimental fashion",
                   "electronic music"],
        fashion=["metallic fabrics", "led accessories", "platform boots",
                 "holographic materials"],
        confidence_threshold=0.45,
    ),
    _profile(
        "kidcore", "Kidcore",
        "Nostalgic childhood memories aesthetic",
        keywords=["kidcore", "nostalgic", "childhood", "rainbow", "colorful", "toys",
                  "playful", "90s kids"],
        colors=["bright rainbow", "primary colors", "neon", "plastic colors",
                "saturated"],
        emotions=["nostalgic", "playful", "innocent", "joyful", "carefree"],
        visual_elements=["toys", "stickers", "cartoons", "candy",
                         "playground equipment"],
        lifestyle=["collecting", "gaming", "cartoon watching", "craft projects"],
        fashion=["colorful clothing", "hair clips", "platform shoes", "graphic tees",
                 "fun accessories"],
        confidence_threshold=0.4,
    ),
    _profile(
        "old_money", "Old Money",
        "Understated luxury and generational wealth aesthetic",
        keywords=["old money", "quiet luxury", "preppy", "understated", "timeless",
                  "ivy league", "heritage"],
        colors=["navy", "cream", "forest green", "burgundy", "camel", "white",
                "neutral"],
        emotions=["sophisticated", "timeless", "refined", "confident", "understated"],
        visual_elements=["equestrian", "sailing", "country clubs", "libraries",
                         "antiques"],
        lifestyle=["equestrian sports", "sailing", "country clubs", "art collecting",
                   "philanthropy"],
        fashion=["blazers", "pearls", "loafers", "cashmere", "silk scarves",
                 "quality fabrics"],
        confidence_threshold=0.35,
    ),
]

AESTHETIC_PROFILES: Mapping[str, AestheticProfile] = MappingProxyType(
    {p.id: p for p in _PROFILES}
)


def get_profile(aesthetic_id: str) -> Optional[AestheticProfile]:
    return AESTHETIC_PROFILES.get(aesthetic_id)


def get_profile_by_name(name: str) -> Optional[AestheticProfile]:
    """Look up a profile by display name or id, ignoring case and separators."""
    wanted = name.strip().lower().replace("-", " ").replace("_", " ")
    for profile in AESTHETIC_PROFILES.values():
        if wanted in (profile.name.lower(), profile.id.replace("_", " ")):
            return profile
    return None


def profile_ids() -> list[str]:
    return list(AESTHETIC_PROFILES)
