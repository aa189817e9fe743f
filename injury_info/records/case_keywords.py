"""Keyword generation for active case definitions."""

# Ordered: the first key found in a case name supplies its synonyms.
CASE_SYNONYMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("roundup", ("glyphosate", "weed killer", "herbicide", "monsanto", "bayer")),
    (
        "hair relaxer",
        ("hair straightener", "chemical straightener", "relaxer", "uterine cancer"),
    ),
    (
        "mesothelioma",
        (
            "asbestos",
            "asbestos exposure",
            "pleural mesothelioma",
            "peritoneal mesothelioma",
        ),
    ),
    (
        "pfas",
        (
            "forever chemicals",
            "water contamination",
            "pfas chemicals",
            "perfluoroalkyl",
            "pfoa",
            "pfos",
        ),
    ),
    ("depo-provera", ("birth control", "contraceptive", "medroxyprogesterone")),
    ("necrotizing enterocolitis", ("nec", "premature baby", "intestinal disease")),
    ("paraquat", ("herbicide", "weed killer", "parkinson's disease", "parkinsons")),
    (
        "talcum powder",
        (
            "talc",
            "baby powder",
            "ovarian cancer",
            "johnson & johnson",
            "johnson and johnson",
        ),
    ),
    (
        "camp lejeune",
        ("camp lejeune", "water contamination", "military base", "marine corps"),
    ),
    ("afff", ("firefighting foam", "pfas", "firefighter", "military foam")),
)


def find_case_synonyms(case_name: str) -> tuple[str, ...]:
    """Synonyms for the first known case key equal to or inside the name.

    Only one key ever contributes. Accumulating every key whose text
    happens to appear in the name would leak keywords between unrelated
    case types.
    """
    lowered = case_name.lower()
    for key, synonyms in CASE_SYNONYMS:
        if lowered == key or key in lowered:
            return synonyms
    return ()


def generate_case_keywords(case_name: str | None) -> tuple[str, ...]:
    """Full lowercased name, known synonyms, then each word of the name."""
    if not case_name:
        return ()

    lowered = case_name.lower()
    candidates = [lowered, *find_case_synonyms(case_name), *lowered.split()]
    return tuple(dict.fromkeys(keyword for keyword in candidates if keyword))
