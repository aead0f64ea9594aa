"""
Provider-specific query parameters for each aesthetic profile.

Music genres are Spotify recommendation seed genres, film genres are TMDb
genre ids:
    12 Adventure, 14 Fantasy, 16 Animation, 18 Drama, 28 Action, 35 Comedy, 36 History,
    53 Thriller, 80 Crime, 878 Science Fiction, 9648 Mystery,
    10402 Music, 10749 Romance, 10751 Family
"""
from types import MappingProxyType
from typing import Mapping, Optional

from ..models import (
    BlogMapping,
    FilmMapping,
    ImageMapping,
    MusicMapping,
    ProviderTagMapping,
)


def _features(energy, valence, danceability, acousticness):
    return (
        ("energy", energy),
        ("valence", valence),
        ("danceability", danceability),
        ("acousticness", acousticness),
    )


_MAPPINGS = [
    ProviderTagMapping(
        aesthetic_id="girlblogger",
        music=MusicMapping(
            genres=("indie-pop", "dream-pop", "bedroom-pop", "folk", "alternative",
                    "indie-folk"),
            moods=("melancholy", "dreamy", "romantic", "nostalgic", "introspective"),
            artists=("lana del rey", "mitski", "phoebe bridgers", "clairo",
                     "boygenius", "beach house"),
            search_terms=("sad girl", "indie girl", "tumblr music", "soft grunge",
                          "coquette playlist"),
            audio_features=_features(0.4, 0.4, 0.3, 0.6),
        ),
        film=FilmMapping(
            genres=(18, 10749, 35),
            keywords=("coming of age", "female protagonist", "indie film",
                      "sofia coppola", "teenage"),
            year_ranges=((1995, 2024),),
            countries=("US", "FR", "GB"),
            vote_threshold=6.0,
        ),
        blog=BlogMapping(
            primary_tags=("girlblogger", "coquette", "dollette", "lana del rey",
                          "soft grunge"),
            secondary_tags=("indie girl", "tumblr girl", "vintage", "melancholy",
                            "bookish"),
            related_hashtags=("girlblogger aesthetic", "coquetteaesthetic",
                              "lanadelreyaesthetic"),
            blog_types=("aesthetic", "vintage", "indie", "photography", "poetry"),
        ),
        image=ImageMapping(
            search_terms=("indie aesthetic", "tumblr girl", "vintage camera",
                          "coffee shop", "books aesthetic", "minimal room"),
            colors=("beige", "cream", "soft pink"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="indie_sleaze",
        music=MusicMapping(
            genres=("indie-rock", "garage-rock", "post-punk", "alternative-rock",
                    "electroclash"),
            moods=("rebellious", "edgy", "party", "underground", "raw"),
            artists=("the strokes", "yeah yeah yeahs", "interpol",
                     "lcd soundsystem", "arctic monkeys"),
            search_terms=("indie sleaze", "garage rock revival", "2000s indie",
                          "hipster music"),
            audio_features=_features(0.7, 0.5, 0.6, 0.2),
        ),
        film=FilmMapping(
            genres=(18, 35, 80),
            keywords=("indie", "underground", "party", "music scene", "urban",
                      "alternative"),
            year_ranges=((2000, 2015),),
            countries=("US", "GB"),
            vote_threshold=6.5,
        ),
        blog=BlogMapping(
            primary_tags=("indie sleaze", "indiesleaze", "hipster", "party",
                          "flash photography"),
            secondary_tags=("american apparel", "2000s", "dirty glamour",
                            "alternative", "underground"),
            related_hashtags=("indiesleazeaesthetic", "hipsteraesthetic",
                              "partyphotography"),
            blog_types=("party", "music", "photography", "alternative", "indie"),
        ),
        image=ImageMapping(
            search_terms=("party aesthetic", "flash photography", "concert",
                          "urban nightlife", "vintage club", "neon lights"),
            colors=("black", "neon"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="y2k_revival",
        music=MusicMapping(
            genres=("pop", "electronic", "dance", "hip-hop", "breakbeat"),
            moods=("energetic", "futuristic", "nostalgic", "optimistic", "cyber"),
            artists=("britney spears", "dua lipa", "charli xcx", "100 gecs",
                     "bladee"),
            search_terms=("y2k", "cyber pop", "futuristic pop", "2000s revival",
                          "tech pop"),
            audio_features=_features(0.8, 0.7, 0.8, 0.1),
        ),
        film=FilmMapping(
            genres=(878, 28, 53),
            keywords=("technology", "cyber", "future", "digital", "matrix",
                      "virtual reality"),
            year_ranges=((1995, 2005), (2015, 2024)),
            countries=("US", "JP"),
            vote_threshold=6.0,
        ),
        blog=BlogMapping(
            primary_tags=("y2k", "cyber", "futuristic", "2000s", "tech aesthetic"),
            secondary_tags=("metallic", "holographic", "digital", "matrix", "chrome"),
            related_hashtags=("y2kaesthetic", "cyberaesthetic",
                              "futuristicaesthetic"),
            blog_types=("tech", "aesthetic", "cyber", "futuristic", "digital art"),
        ),
        image=ImageMapping(
            search_terms=("2000s aesthetic", "retro technology", "holographic",
                          "metallic", "cyber", "futuristic fashion"),
            colors=("silver", "hot pink", "electric blue"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="dark_academia",
        music=MusicMapping(
            genres=("classical", "ambient", "post-rock", "piano", "indie-folk"),
            moods=("moody", "contemplative", "melancholic", "intellectual"),
            artists=("hozier", "ludovico einaudi", "max richter", "agnes obel"),
            search_terms=("study music", "dark academia", "dark ambient",
                          "instrumental", "moody classical"),
            audio_features=_features(0.2, 0.3, 0.3, 0.8),
        ),
        film=FilmMapping(
            genres=(18, 9648, 53),
            keywords=("university", "gothic", "literary adaptation", "boarding school",
                      "secret society"),
            year_ranges=((1980, 2024),),
            countries=("US", "GB"),
            vote_threshold=6.5,
        ),
        blog=BlogMapping(
            primary_tags=("dark academia", "academia", "books", "library",
                          "light academia"),
            secondary_tags=("vintage", "classical", "gothic", "poetry",
                            "bookish aesthetic"),
            related_hashtags=("darkacademiaaesthetic", "academiaaesthetic",
                              "bookstagram"),
            blog_types=("books", "literature", "aesthetic", "vintage", "poetry"),
        ),
        image=ImageMapping(
            search_terms=("library", "vintage books", "candles",
                          "classical architecture", "study aesthetic", "gothic"),
            colors=("dark brown", "burgundy", "black"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="cottagecore",
        music=MusicMapping(
            genres=("folk", "indie-folk", "acoustic", "country", "singer-songwriter"),
            moods=("peaceful", "wholesome", "nostalgic", "cozy"),
            artists=("taylor swift", "fleet foxes", "iron and wine", "bon iver"),
            search_terms=("folk", "pastoral", "cottagecore", "acoustic",
                          "nature sounds"),
            audio_features=_features(0.4, 0.8, 0.3, 0.8),
        ),
        film=FilmMapping(
            genres=(18, 10749, 10751),
            keywords=("pastoral", "countryside", "period drama", "farm life"),
            year_ranges=((1990, 2024),),
            countries=("GB", "US", "FR"),
            vote_threshold=6.0,
        ),
        blog=BlogMapping(
            primary_tags=("cottagecore", "cottage", "rural", "countryside", "flowers"),
            secondary_tags=("vintage cottage", "baking", "garden", "mushrooms",
                            "pastoral"),
            related_hashtags=("cottagecoreaesthetic", "cottagecorevibes",
                              "farmhouse"),
            blog_types=("nature", "aesthetic", "baking", "gardening", "vintage"),
        ),
        image=ImageMapping(
            search_terms=("cottage", "flowers", "countryside", "vintage kitchen",
                          "garden", "rustic"),
            colors=("sage green", "cream", "brown"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="coquette",
        music=MusicMapping(
            genres=("chamber-pop", "dream-pop", "classical", "french", "indie-pop"),
            moods=("romantic", "dreamy", "delicate", "playful"),
            artists=("lana del rey", "melanie martinez", "mazzy star", "laufey"),
            search_terms=("coquette playlist", "romantic", "dollette",
                          "french pop", "soft girl"),
            audio_features=_features(0.4, 0.6, 0.4, 0.6),
        ),
        film=FilmMapping(
            genres=(10749, 18, 36),
            keywords=("romance", "period drama", "ballet", "sofia coppola",
                      "marie antoinette"),
            year_ranges=((1990, 2024),),
            countries=("FR", "US", "GB"),
            vote_threshold=6.0,
        ),
        blog=BlogMapping(
            primary_tags=("coquette", "coquetteaesthetic", "dollette", "bows",
                          "pink aesthetic"),
            secondary_tags=("lace", "pearls", "ribbons", "ballet", "soft girl"),
            related_hashtags=("coquettegirl", "dollettecore", "balletcore"),
            blog_types=("aesthetic", "fashion", "vintage", "romantic", "ballet"),
        ),
        image=ImageMapping(
            search_terms=("pink aesthetic", "lace", "pearls", "ribbon bows",
                          "ballet", "vintage romance"),
            colors=("soft pink", "white", "lavender"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="coastal_grandmother",
        music=MusicMapping(
            genres=("folk", "singer-songwriter", "acoustic", "soft-rock", "jazz"),
            moods=("relaxed", "calm", "timeless", "sophisticated"),
            artists=("joni mitchell", "carole king", "norah jones", "fleetwood mac"),
            search_terms=("joni mitchell", "carole king", "mellow acoustic",
                          "coastal", "soft rock"),
            audio_features=_features(0.3, 0.7, 0.4, 0.7),
        ),
        film=FilmMapping(
            genres=(18, 10749, 35),
            keywords=("nancy meyers", "seaside", "mature romance", "family drama"),
            year_ranges=((1990, 2020),),
            countries=("US",),
            vote_threshold=6.0,
        ),
        blog=BlogMapping(
            primary_tags=("coastal grandmother", "coastal", "linen", "neutral",
                          "hamptons"),
            secondary_tags=("minimalist", "hygge", "beach house", "nancy meyers",
                            "white kitchen"),
            related_hashtags=("coastalgrandmother", "coastalliving",
                              "hamptonsstyle"),
            blog_types=("interior", "lifestyle", "coastal", "cooking", "aesthetic"),
        ),
        image=ImageMapping(
            search_terms=("coastal living", "linen", "natural light", "beach house",
                          "organic", "minimalist home"),
            colors=("beige", "white", "soft blue"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="clean_girl",
        music=MusicMapping(
            genres=("r-n-b", "soul", "indie-pop", "chill", "electronic"),
            moods=("confident", "effortless", "fresh", "calm"),
            artists=("sza", "daniel caesar", "jorja smith", "frank ocean"),
            search_terms=("morning routine", "that girl playlist", "chill r&b",
                          "wellness", "feel good pop"),
            audio_features=_features(0.5, 0.7, 0.6, 0.3),
        ),
        film=FilmMapping(
            genres=(35, 10749, 18),
            keywords=("fashion", "wellness", "romantic comedy", "self discovery"),
            year_ranges=((2010, 2024),),
            countries=("US", "GB"),
            vote_threshold=6.0,
        ),
        blog=BlogMapping(
            primary_tags=("clean girl", "that girl", "wellness", "skincare",
                          "minimal aesthetic"),
            secondary_tags=("gold hoops", "slick bun", "iced latte", "self care",
                            "neutral"),
            related_hashtags=("cleangirlaesthetic", "thatgirl", "skincareroutine"),
            blog_types=("beauty", "wellness", "lifestyle", "fashion", "aesthetic"),
        ),
        image=ImageMapping(
            search_terms=("clean aesthetic", "skincare", "iced latte",
                          "gold jewelry", "minimalist", "natural light"),
            colors=("white", "nude", "gold"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="cyber_fairy",
        music=MusicMapping(
            genres=("electronic", "hyperpop", "experimental", "ambient", "techno",
                    "synthwave"),
            moods=("ethereal", "futuristic", "mystical", "energetic", "otherworldly"),
            artists=("grimes", "arca", "bjork", "fka twigs", "sophie", "iglooghost"),
            search_terms=("cyber", "digital", "ethereal electronic", "hyperpop",
                          "experimental"),
            audio_features=_features(0.7, 0.6, 0.5, 0.2),
        ),
        film=FilmMapping(
            genres=(878, 28, 14),
            keywords=("cyberpunk", "digital", "virtual reality", "technology",
                      "futuristic", "artificial intelligence"),
            year_ranges=((2010, 2024),),
            countries=("US", "JP", "KR"),
            vote_threshold=6.5,
        ),
        blog=BlogMapping(
            primary_tags=("cyber fairy", "digital fairy", "cyberpunk", "holographic",
                          "tech aesthetic"),
            secondary_tags=("ethereal", "futuristic", "neon", "digital art",
                            "led lights"),
            related_hashtags=("cyberfairyaesthetic", "digitalfairy",
                              "cyberpunkaesthetic"),
            blog_types=("digital art", "cyberpunk", "tech", "futuristic",
                        "experimental"),
        ),
        image=ImageMapping(
            search_terms=("neon", "futuristic", "holographic", "cyberpunk",
                          "iridescent", "digital art"),
            colors=("purple", "neon pink", "blue"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="kidcore",
        music=MusicMapping(
            genres=("hyperpop", "pop", "indie-pop", "kids", "electronic"),
            moods=("playful", "joyful", "nostalgic", "carefree"),
            artists=("melanie martinez", "clairo", "boy pablo", "rico nasty"),
            search_terms=("bubblegum pop", "90s kids", "playful pop",
                          "cartoon theme songs"),
            audio_features=_features(0.8, 0.9, 0.7, 0.2),
        ),
        film=FilmMapping(
            genres=(16, 10751, 35),
            keywords=("childhood", "nostalgia", "animation", "adventure"),
            year_ranges=((1985, 2010),),
            countries=("US", "JP"),
            vote_threshold=6.0,
        ),
        blog=BlogMapping(
            primary_tags=("kidcore", "rainbow", "90s kids", "nostalgia", "toys"),
            secondary_tags=("stickers", "cartoons", "colorful", "childhood",
                            "candy"),
            related_hashtags=("kidcoreaesthetic", "rainbowcore", "90snostalgia"),
            blog_types=("nostalgia", "aesthetic", "art", "colorful", "toys"),
        ),
        image=ImageMapping(
            search_terms=("rainbow colors", "toys", "candy", "stickers",
                          "playground", "colorful"),
            colors=("red", "yellow", "blue"),
        ),
    ),
    ProviderTagMapping(
        aesthetic_id="old_money",
        music=MusicMapping(
            genres=("classical", "jazz", "folk", "piano", "soul"),
            moods=("refined", "timeless", "sophisticated", "understated"),
            artists=("frank sinatra", "chet baker", "nat king cole", "ella fitzgerald"),
            search_terms=("old money", "jazz standards", "classical piano",
                          "country club"),
            audio_features=_features(0.3, 0.5, 0.4, 0.7),
        ),
        film=FilmMapping(
            genres=(18, 10749, 36),
            keywords=("aristocracy", "wealth", "period drama", "ivy league",
                      "high society"),
            year_ranges=((1950, 2024),),
            countries=("US", "GB", "IT"),
            vote_threshold=6.5,
        ),
        blog=BlogMapping(
            primary_tags=("old money", "quiet luxury", "preppy", "old money aesthetic",
                          "ivy league"),
            secondary_tags=("equestrian", "sailing", "heritage", "cashmere",
                            "country club"),
            related_hashtags=("oldmoneyaesthetic", "quietluxury", "preppystyle"),
            blog_types=("fashion", "lifestyle", "luxury", "vintage", "travel"),
        ),
        image=ImageMapping(
            search_terms=("quiet luxury", "equestrian", "sailing", "country estate",
                          "tennis club", "cashmere"),
            colors=("navy", "cream", "camel"),
        ),
    ),
]

PROVIDER_TAG_MAPPINGS: Mapping[str, ProviderTagMapping] = MappingProxyType(
    {m.aesthetic_id: m for m in _MAPPINGS}
)


def get_mapping(aesthetic_id: str) -> Optional[ProviderTagMapping]:
    return PROVIDER_TAG_MAPPINGS.get(aesthetic_id)
