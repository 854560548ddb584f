"""Constants and configuration values for SentiView."""

# Raw Dataset Columns
class ColumnConstants:
    """Column names of the labeled comment CSV."""

    TOPIC = "Topik"
    SOURCE = "Sumber"
    SENTIMENT = "sentiment"
    TEXT = "Text_rf"
    TEXT_NO_STOP = "Text_rf_nostop"  # stopwords already removed upstream
    ASPECT_1 = "Aspect_1"
    ASPECT_2 = "Aspect_2"
    ASPECT_SCORE = "aspect_score"
    ASPECT_1_KEYWORDS = "Aspect_1_matched_keywords"
    ASPECT_2_KEYWORDS = "Aspect_2_matched_keywords"
    DATE = "Date_std"  # YYYY-MM-DD

# Defaults and Sentinels
class LabelConstants:
    """Sentinel labels used by normalization, filtering and KPIs."""

    ALL = "All"  # filter value that disables a clause
    UNKNOWN = "Unknown"  # missing topic / source
    GENERAL_ASPECT = "Umum"  # "general", the uncategorized aspect
    NO_LABEL = "None"  # top topic / aspect when nothing was counted
    NOT_AVAILABLE = "N/A"  # dominant sentiment of an empty selection

    # Lower-cased platform name -> display name
    DEFAULT_SOURCE_ALIASES = {
        "tiktok": "TikTok",
        "youtube": "YouTube",
    }

# Ranking Limits
class RankingConstants:
    """Caps for ranked sub-lists."""

    TREND_TOP_TOPICS = 2  # topics per weekly bucket (tooltip)
    TREND_TOP_ASPECTS = 1  # aspects per weekly bucket (tooltip)
    TOP_LIST_SIZE = 5  # global top topics / aspects
    TERM_SAMPLE_SIZE = 50  # samples for a clicked term
    DEFAULT_TOP_TERMS = 80  # terms per sentiment cloud
    PAGE_SIZE = 50  # explore table rows per page

# Text Processing
class TextConstants:
    """Constants for tokenization and n-gram building."""

    MIN_TOKEN_LEN = 3
    MAX_NGRAM = 3
    KEYWORD_STRIP_CHARS = "[]'\""

    # Used when the stopword file cannot be read
    FALLBACK_STOPWORDS = frozenset([
        'yang', 'di', 'dan', 'ini', 'itu', 'dari', 'ke', 'pada', 'untuk', 'dengan',
        'adalah', 'saya', 'tidak', 'karena', 'yg', 'ya', 'gak', 'bisa', 'ada',
        'aku', 'mau', 'kalau', 'tapi', 'saja', 'juga', 'sudah', 'telah', 'bagi', 'atau',
        'kami', 'kita', 'kamu', 'dia', 'mereka', 'anda', 'akan', 'bukan', 'tak', 'tp',
        'sdh', 'udah', 'bgt', 'dong', 'kan', 'sih', 'kok', 'mah', 'deh', 'yuk', 'loh',
        'lagi', 'apa', 'kenapa', 'gimana', 'siapa', 'kapan', 'dimana', 'bagaimana',
        'semoga', 'terima', 'kasih', 'tolong', 'mohon', 'mas', 'mbak', 'kak', 'bang',
        'pak', 'bu', 'ibu', 'bapak', 'min', 'nya', 'dr', 'dlm', 'utk', 'dgn',
        'sm', 'sy', 'klo', 'kalo', 'jd', 'jgn', 'ga', 'gk', 'wkwk', 'haha', 'hehe',
        'wkwkwk', 'awokwok', 'lah', 'kah', 'pun', 'man', 'wan', 'com', 'http', 'https',
        'www', 'rt', 'via', 'aja', 'doang',
    ])

    # Laughter / interjection markers, always part of the active stopword set
    FILLER_TOKENS = frozenset(['wkwk', 'haha', 'hehe', 'lol', 'wkwkwk', 'awokwok', 'hix', 'huft'])

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    CSV_ENCODING = "utf-8-sig"  # tolerates a BOM
