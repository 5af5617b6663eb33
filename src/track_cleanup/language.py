"""Language code normalization and conversion utilities.

This module provides the ISO 639 language-code table used throughout
track-cleanup. It supports conversion between:
- ISO 639-1 (2-letter codes like "en", "de", "ja")
- ISO 639-2/B (3-letter bibliographic codes like "eng", "ger", "jpn")
- ISO 639-2/T (3-letter terminological codes like "eng", "deu", "jpn")
- English language names as reported by Radarr/Sonarr ("English", "Japanese")

ISO 639-2/B is the primary 3-letter form because it is what MKV containers
and FFmpeg write into stream language tags.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# (ISO 639-1, ISO 639-2/B, ISO 639-2/T, English name)
# 639-2/T equals 639-2/B except for the twenty bibliographic exceptions.
_LANGUAGES: tuple[tuple[str, str, str, str], ...] = (
    ("aa", "aar", "aar", "Afar"),
    ("ab", "abk", "abk", "Abkhazian"),
    ("af", "afr", "afr", "Afrikaans"),
    ("am", "amh", "amh", "Amharic"),
    ("ar", "ara", "ara", "Arabic"),
    ("as", "asm", "asm", "Assamese"),
    ("ay", "aym", "aym", "Aymara"),
    ("az", "aze", "aze", "Azerbaijani"),
    ("ba", "bak", "bak", "Bashkir"),
    ("be", "bel", "bel", "Belarusian"),
    ("bg", "bul", "bul", "Bulgarian"),
    ("bi", "bis", "bis", "Bislama"),
    ("bn", "ben", "ben", "Bengali"),
    ("bo", "tib", "bod", "Tibetan"),
    ("br", "bre", "bre", "Breton"),
    ("bs", "bos", "bos", "Bosnian"),
    ("ca", "cat", "cat", "Catalan"),
    ("co", "cos", "cos", "Corsican"),
    ("cs", "cze", "ces", "Czech"),
    ("cy", "wel", "cym", "Welsh"),
    ("da", "dan", "dan", "Danish"),
    ("de", "ger", "deu", "German"),
    ("dz", "dzo", "dzo", "Dzongkha"),
    ("el", "gre", "ell", "Greek"),
    ("en", "eng", "eng", "English"),
    ("eo", "epo", "epo", "Esperanto"),
    ("es", "spa", "spa", "Spanish"),
    ("et", "est", "est", "Estonian"),
    ("eu", "baq", "eus", "Basque"),
    ("fa", "per", "fas", "Persian"),
    ("fi", "fin", "fin", "Finnish"),
    ("fj", "fij", "fij", "Fijian"),
    ("fo", "fao", "fao", "Faroese"),
    ("fr", "fre", "fra", "French"),
    ("fy", "fry", "fry", "Western Frisian"),
    ("ga", "gle", "gle", "Irish"),
    ("gd", "gla", "gla", "Scottish Gaelic"),
    ("gl", "glg", "glg", "Galician"),
    ("gn", "grn", "grn", "Guarani"),
    ("gu", "guj", "guj", "Gujarati"),
    ("ha", "hau", "hau", "Hausa"),
    ("he", "heb", "heb", "Hebrew"),
    ("hi", "hin", "hin", "Hindi"),
    ("hr", "hrv", "hrv", "Croatian"),
    ("hu", "hun", "hun", "Hungarian"),
    ("hy", "arm", "hye", "Armenian"),
    ("ia", "ina", "ina", "Interlingua"),
    ("id", "ind", "ind", "Indonesian"),
    ("ie", "ile", "ile", "Interlingue"),
    ("ik", "ipk", "ipk", "Inupiaq"),
    ("is", "ice", "isl", "Icelandic"),
    ("it", "ita", "ita", "Italian"),
    ("iu", "iku", "iku", "Inuktitut"),
    ("ja", "jpn", "jpn", "Japanese"),
    ("jv", "jav", "jav", "Javanese"),
    ("ka", "geo", "kat", "Georgian"),
    ("kk", "kaz", "kaz", "Kazakh"),
    ("kl", "kal", "kal", "Kalaallisut"),
    ("km", "khm", "khm", "Khmer"),
    ("kn", "kan", "kan", "Kannada"),
    ("ko", "kor", "kor", "Korean"),
    ("ks", "kas", "kas", "Kashmiri"),
    ("ku", "kur", "kur", "Kurdish"),
    ("ky", "kir", "kir", "Kyrgyz"),
    ("la", "lat", "lat", "Latin"),
    ("lb", "ltz", "ltz", "Luxembourgish"),
    ("ln", "lin", "lin", "Lingala"),
    ("lo", "lao", "lao", "Lao"),
    ("lt", "lit", "lit", "Lithuanian"),
    ("lv", "lav", "lav", "Latvian"),
    ("mg", "mlg", "mlg", "Malagasy"),
    ("mi", "mao", "mri", "Maori"),
    ("mk", "mac", "mkd", "Macedonian"),
    ("ml", "mal", "mal", "Malayalam"),
    ("mn", "mon", "mon", "Mongolian"),
    ("mr", "mar", "mar", "Marathi"),
    ("ms", "may", "msa", "Malay"),
    ("mt", "mlt", "mlt", "Maltese"),
    ("my", "bur", "mya", "Burmese"),
    ("na", "nau", "nau", "Nauru"),
    ("nb", "nob", "nob", "Norwegian Bokmal"),
    ("ne", "nep", "nep", "Nepali"),
    ("nl", "dut", "nld", "Dutch"),
    ("nn", "nno", "nno", "Norwegian Nynorsk"),
    ("no", "nor", "nor", "Norwegian"),
    ("oc", "oci", "oci", "Occitan"),
    ("om", "orm", "orm", "Oromo"),
    ("or", "ori", "ori", "Oriya"),
    ("pa", "pan", "pan", "Punjabi"),
    ("pl", "pol", "pol", "Polish"),
    ("ps", "pus", "pus", "Pashto"),
    ("pt", "por", "por", "Portuguese"),
    ("qu", "que", "que", "Quechua"),
    ("rm", "roh", "roh", "Romansh"),
    ("rn", "run", "run", "Rundi"),
    ("ro", "rum", "ron", "Romanian"),
    ("ru", "rus", "rus", "Russian"),
    ("rw", "kin", "kin", "Kinyarwanda"),
    ("sa", "san", "san", "Sanskrit"),
    ("sd", "snd", "snd", "Sindhi"),
    ("se", "sme", "sme", "Northern Sami"),
    ("sg", "sag", "sag", "Sango"),
    ("si", "sin", "sin", "Sinhala"),
    ("sk", "slo", "slk", "Slovak"),
    ("sl", "slv", "slv", "Slovenian"),
    ("sm", "smo", "smo", "Samoan"),
    ("sn", "sna", "sna", "Shona"),
    ("so", "som", "som", "Somali"),
    ("sq", "alb", "sqi", "Albanian"),
    ("sr", "srp", "srp", "Serbian"),
    ("ss", "ssw", "ssw", "Swati"),
    ("st", "sot", "sot", "Southern Sotho"),
    ("su", "sun", "sun", "Sundanese"),
    ("sv", "swe", "swe", "Swedish"),
    ("sw", "swa", "swa", "Swahili"),
    ("ta", "tam", "tam", "Tamil"),
    ("te", "tel", "tel", "Telugu"),
    ("tg", "tgk", "tgk", "Tajik"),
    ("th", "tha", "tha", "Thai"),
    ("ti", "tir", "tir", "Tigrinya"),
    ("tk", "tuk", "tuk", "Turkmen"),
    ("tl", "tgl", "tgl", "Tagalog"),
    ("tn", "tsn", "tsn", "Tswana"),
    ("to", "ton", "ton", "Tonga"),
    ("tr", "tur", "tur", "Turkish"),
    ("ts", "tso", "tso", "Tsonga"),
    ("tt", "tat", "tat", "Tatar"),
    ("tw", "twi", "twi", "Twi"),
    ("ug", "uig", "uig", "Uyghur"),
    ("uk", "ukr", "ukr", "Ukrainian"),
    ("ur", "urd", "urd", "Urdu"),
    ("uz", "uzb", "uzb", "Uzbek"),
    ("vi", "vie", "vie", "Vietnamese"),
    ("vo", "vol", "vol", "Volapuk"),
    ("wo", "wol", "wol", "Wolof"),
    ("xh", "xho", "xho", "Xhosa"),
    ("yi", "yid", "yid", "Yiddish"),
    ("yo", "yor", "yor", "Yoruba"),
    ("za", "zha", "zha", "Zhuang"),
    ("zh", "chi", "zho", "Chinese"),
    ("zu", "zul", "zul", "Zulu"),
)

_ALPHA2_TO_ALPHA3B: dict[str, str] = {row[0]: row[1] for row in _LANGUAGES}
_ALPHA2_TO_ALPHA3T: dict[str, str] = {row[0]: row[2] for row in _LANGUAGES}
_ALPHA3_TO_ALPHA2: dict[str, str] = {
    **{row[2]: row[0] for row in _LANGUAGES},
    **{row[1]: row[0] for row in _LANGUAGES},
}
_NAME_TO_ALPHA2: dict[str, str] = {row[3].lower(): row[0] for row in _LANGUAGES}

# Names Radarr/Sonarr use that differ from the table's English names
_NAME_TO_ALPHA2.update(
    {
        "flemish": "nl",
        "portuguese (brazil)": "pt",
        "brazilian": "pt",
        "spanish (latino)": "es",
        "norwegian bokmål": "nb",
        "volapük": "vo",
    }
)

# Non-standard 2-letter codes observed from metadata services
_ALPHA2_ALIASES: dict[str, str] = {
    "cn": "zh",
}

UNDEFINED = "und"


def normalize_alpha2(code: str | None) -> str | None:
    """Normalize a 2-letter code reported by an external service.

    Lowercases and trims the code and remaps known non-standard aliases
    (TMDB reports Chinese productions as "cn").

    Args:
        code: Raw 2-letter code, possibly None or blank.

    Returns:
        Normalized 2-letter code, or None for blank input.

    Examples:
        >>> normalize_alpha2("CN")
        'zh'
        >>> normalize_alpha2(" ja ")
        'ja'
    """
    if not code or not code.strip():
        return None
    code = code.strip().lower()
    return _ALPHA2_ALIASES.get(code, code)


def alpha2_to_alpha3(code: str | None) -> str | None:
    """Convert an ISO 639-1 code to its ISO 639-2/B form.

    Args:
        code: 2-letter code. Aliases are remapped first.

    Returns:
        3-letter bibliographic code, or None if the code has no mapping.

    Examples:
        >>> alpha2_to_alpha3("de")
        'ger'
        >>> alpha2_to_alpha3("cn")
        'chi'
        >>> alpha2_to_alpha3("xx") is None
        True
    """
    normalized = normalize_alpha2(code)
    if normalized is None:
        return None
    return _ALPHA2_TO_ALPHA3B.get(normalized)


def alpha3_variants(code: str | None) -> tuple[str, ...]:
    """Get every 3-letter form of a 2-letter code.

    Stream tags in the wild use either the bibliographic or the
    terminological form ("ger" vs "deu"), so callers matching tags
    should accept both.

    Returns:
        (639-2/B,) or (639-2/B, 639-2/T) when the forms differ;
        empty tuple for an unmapped code.
    """
    normalized = normalize_alpha2(code)
    if normalized is None or normalized not in _ALPHA2_TO_ALPHA3B:
        return ()
    bibliographic = _ALPHA2_TO_ALPHA3B[normalized]
    terminological = _ALPHA2_TO_ALPHA3T[normalized]
    if terminological == bibliographic:
        return (bibliographic,)
    return (bibliographic, terminological)


def alpha3_to_alpha2(code: str | None) -> str | None:
    """Convert a 639-2/B or 639-2/T code to ISO 639-1.

    Returns:
        2-letter code, or None if unknown.
    """
    if not code:
        return None
    return _ALPHA3_TO_ALPHA2.get(code.strip().lower())


def language_name_to_alpha2(name: str | None) -> str | None:
    """Convert an English language name to an ISO 639-1 code.

    Used for the "originalLanguage.name" field returned by Radarr and
    Sonarr. Matching is case-insensitive.

    Examples:
        >>> language_name_to_alpha2("Japanese")
        'ja'
        >>> language_name_to_alpha2("Unknown") is None
        True
    """
    if not name:
        return None
    return _NAME_TO_ALPHA2.get(name.strip().lower())


def get_language_name(code: str | None) -> str:
    """Get the English name for a 2- or 3-letter code.

    Returns:
        English name, "Undefined" for missing/undefined codes, or the
        upper-cased code itself if unknown.
    """
    if not code or code.strip().lower() == UNDEFINED:
        return "Undefined"
    code = code.strip().lower()
    alpha2 = code if len(code) == 2 else alpha3_to_alpha2(code)
    alpha2 = normalize_alpha2(alpha2)
    for row in _LANGUAGES:
        if row[0] == alpha2:
            return row[3]
    logger.debug("No English name for language code '%s'", code)
    return code.upper()


def parse_language_list(value: str | None) -> list[str]:
    """Parse a comma-separated language list.

    Entries are trimmed and lowercased; empty entries are ignored.

    Examples:
        >>> parse_language_list(" FRE, spa,, ")
        ['fre', 'spa']
    """
    if not value:
        return []
    return [part.strip().lower() for part in value.split(",") if part.strip()]
