"""
Constants used across the extraction engine.
Versioned and pinned for determinism.
"""
from typing import List

# =============================================================================
# Rule set version (bump whenever a TLD list or pattern changes)
# =============================================================================
PATTERN_VERSION: str = "entity-rules-2014.1"

# =============================================================================
# Generic top-level domains (closed list)
# =============================================================================
GTLDS: List[str] = [
    "academy", "actor", "aero", "agency", "arpa", "asia", "bar", "bargains",
    "berlin", "best", "bid", "bike", "biz", "blue", "boutique", "build",
    "builders", "buzz", "cab", "camera", "camp", "cards", "careers", "cat",
    "catering", "center", "ceo", "cheap", "christmas", "cleaning", "clothing",
    "club", "codes", "coffee", "com", "community", "company", "computer",
    "construction", "contractors", "cool", "coop", "cruises", "dance",
    "dating", "democrat", "diamonds", "directory", "domains", "edu",
    "education", "email", "enterprises", "equipment", "estate", "events",
    "expert", "exposed", "farm", "fish", "flights", "florist", "foundation",
    "futbol", "gallery", "gift", "glass", "gov", "graphics", "guitars",
    "guru", "holdings", "holiday", "house", "immobilien", "industries",
    "info", "institute", "int", "international", "jobs", "kaufen", "kim",
    "kitchen", "kiwi", "koeln", "kred", "land", "lighting", "limo", "link",
    "luxury", "management", "mango", "marketing", "menu", "mil", "mobi",
    "moda", "monash", "museum", "nagoya", "name", "net", "neustar", "ninja",
    "okinawa", "onl", "org", "partners", "parts", "photo", "photography",
    "photos", "pics", "pink", "plumbing", "post", "pro", "productions",
    "properties", "pub", "qpon", "recipes", "red", "rentals", "repair",
    "report", "reviews", "rich", "ruhr", "sexy", "shiksha", "shoes",
    "singles", "social", "solar", "solutions", "supplies", "supply",
    "support", "systems", "tattoo", "technology", "tel", "tienda", "tips",
    "today", "tokyo", "tools", "training", "travel", "uno", "vacations",
    "ventures", "viajes", "villas", "vision", "vote", "voting", "voto",
    "voyage", "wang", "watch", "wed", "wien", "wiki", "works", "xxx", "xyz",
    "zone",
    # Internationalized
    "дети", "онлайн", "орг", "сайт", "بازار", "شبكة", "みんな", "中信",
    "中文网", "公司", "公益", "在线", "我爱你", "政务", "游戏", "移动", "网络",
    "集团", "삼성",
]

# =============================================================================
# Country-code top-level domains (closed list)
# =============================================================================
CCTLDS: List[str] = [
    "ac", "ad", "ae", "af", "ag", "ai", "al", "am", "an", "ao", "aq", "ar",
    "as", "at", "au", "aw", "ax", "az", "ba", "bb", "bd", "be", "bf", "bg",
    "bh", "bi", "bj", "bl", "bm", "bn", "bo", "bq", "br", "bs", "bt", "bv",
    "bw", "by", "bz", "ca", "cc", "cd", "cf", "cg", "ch", "ci", "ck", "cl",
    "cm", "cn", "co", "cr", "cu", "cv", "cw", "cx", "cy", "cz", "de", "dj",
    "dk", "dm", "do", "dz", "ec", "ee", "eg", "eh", "er", "es", "et", "eu",
    "fi", "fj", "fk", "fm", "fo", "fr", "ga", "gb", "gd", "ge", "gf", "gg",
    "gh", "gi", "gl", "gm", "gn", "gp", "gq", "gr", "gs", "gt", "gu", "gw",
    "gy", "hk", "hm", "hn", "hr", "ht", "hu", "id", "ie", "il", "im", "in",
    "io", "iq", "ir", "is", "it", "je", "jm", "jo", "jp", "ke", "kg", "kh",
    "ki", "km", "kn", "kp", "kr", "kw", "ky", "kz", "la", "lb", "lc", "li",
    "lk", "lr", "ls", "lt", "lu", "lv", "ly", "ma", "mc", "md", "me", "mf",
    "mg", "mh", "mk", "ml", "mm", "mn", "mo", "mp", "mq", "mr", "ms", "mt",
    "mu", "mv", "mw", "mx", "my", "mz", "na", "nc", "ne", "nf", "ng", "ni",
    "nl", "no", "np", "nr", "nu", "nz", "om", "pa", "pe", "pf", "pg", "ph",
    "pk", "pl", "pm", "pn", "pr", "ps", "pt", "pw", "py", "qa", "re", "ro",
    "rs", "ru", "rw", "sa", "sb", "sc", "sd", "se", "sg", "sh", "si", "sj",
    "sk", "sl", "sm", "sn", "so", "sr", "ss", "st", "su", "sv", "sx", "sy",
    "sz", "tc", "td", "tf", "tg", "th", "tj", "tk", "tl", "tm", "tn", "to",
    "tp", "tr", "tt", "tv", "tw", "tz", "ua", "ug", "uk", "um", "us", "uy",
    "uz", "va", "vc", "ve", "vg", "vi", "vn", "vu", "wf", "ws", "ye", "yt",
    "za", "zm", "zw",
    # Internationalized
    "мон", "рф", "срб", "укр", "қаз", "الاردن", "الجزائر", "السعودية",
    "المغرب", "امارات", "ایران", "بھارت", "تونس", "سودان", "سورية", "عمان",
    "فلسطين", "قطر", "مصر", "مليسيا", "پاکستان", "भारत", "বাংলা", "ভারত",
    "ਭਾਰਤ", "ભારત", "இந்தியா", "இலங்கை", "சிங்கப்பூர்", "భారత్", "ලංකා",
    "ไทย", "გე", "中国", "中國", "台湾", "台灣", "新加坡", "香港", "한국",
]

# ASCII-compatible encoding prefix for internationalized labels
PUNYCODE_PREFIX: str = "xn--"

# =============================================================================
# Punctuation (equivalent of the POSIX [:punct:] class)
# =============================================================================
ASCII_PUNCTUATION: str = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

# =============================================================================
# Length limits
# =============================================================================
MAX_USERNAME_LENGTH: int = 20
MAX_LIST_SLUG_LENGTH: int = 25
MAX_CASHTAG_LENGTH: int = 6
MAX_CASHTAG_SUFFIX_LENGTH: int = 2

# =============================================================================
# Tie-break priority when two entity kinds claim the same span
# (lower wins)
# =============================================================================
KIND_PRIORITY = {
    "url": 0,
    "mention": 1,
    "list_mention": 1,
    "hashtag": 2,
    "cashtag": 3,
}
