"""
Constantes globales pour ReelMatch.

Ce module contient les constantes utilisees par le parsing et le matching:
- Extensions video retirees des noms de release
- Motifs des tags techniques (resolution, codec, source, tags scene)
- Mots de liaison ignores dans les tokens de release
- Reecritures de network et alias historiques des studios
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".avi",
    ".mov",
    ".wmv",
    ".flv",
    ".webm",
    ".m4v",
    ".mpg",
    ".mpeg",
    ".ts",
    ".vob",
})

# Motifs (regex) des tags qualite: la queue technique de la release commence
# au premier d'entre eux
QUALITY_TAG_PATTERNS = (
    # Resolutions
    r"\d{3,4}p",
    r"[2458]k",
    r"uhd",
    # Codecs
    r"x26[45]",
    r"h\.?26[45]",
    r"hevc",
    r"avc",
    r"av1",
    r"xvid",
    r"divx",
    r"10bit",
    r"hdr(?:10)?",
    # Sources
    r"web[-. ]?dl",
    r"web[-. ]?rip",
    r"blu[-. ]?ray",
    r"bd[-. ]?rip",
    r"br[-. ]?rip",
    r"dvd[-. ]?rip",
    r"hd[-. ]?rip",
    r"hdtv",
    r"remux",
)

# Tags scene: ce sont aussi des mots de titre ("Internal Affairs"), ils ne
# commencent la queue technique que s'ils ne sont suivis que de tags
RELEASE_FLAG_PATTERNS = (
    r"xxx",
    r"repack",
    r"proper",
    r"internal",
    r"mp4",
    r"mkv",
)

TECHNICAL_TAG_PATTERNS = QUALITY_TAG_PATTERNS + RELEASE_FLAG_PATTERNS

# Mots de liaison entre noms de performers ("Quinn and Carrie", "Quinn & Carrie")
TOKEN_JOINERS = frozenset({"&", "and", "+"})

# Reecritures des networks mal etiquetes par les agregateurs.
# "{studio}" est remplace par le titre du studio concerne.
NETWORK_REWRITES = {
    "Anal Vids": "LegalPorno",
    "The Score Group": "PornMegaLoad",
    "ManyVids": "ManyVids {studio}",
}

# Alias historiques non deductibles des donnees stockees
# (titre canonique -> nom alternatif utilise par les sources)
HARDCODED_STUDIO_ALIASES = {
    "ExCoGiGirls": "Exploited College Girls",
    "bex": "Brazzers Exxtra",
    "lanewgirl": "L.A. New Girl",
    "Nubiles": "Nubiles.net",
    "TeamSkeetVIP": "TeamSkeet Features",
    "Wicked Pictures": "Wicked",
}
