"""
Turkish text normalization for stable ASCII identifiers.

The canteen and buffet pages publish names in Turkish; ids derived from them are
used as cross-references in the JSON output, so `slugify` must be pure and total.
"""
import re


_TURKISH_TO_ASCII = str.maketrans({
    "ç": "c", "Ç": "c",
    "ğ": "g", "Ğ": "g",
    "ı": "i", "I": "i",
    "İ": "i",
    "ö": "o", "Ö": "o",
    "ş": "s", "Ş": "s",
    "ü": "u", "Ü": "u",
})

# "İ".lower() gives "i" followed by U+0307 COMBINING DOT ABOVE
_DOTTED_I = "i\u0307"

_SEPARATORS_RE = re.compile(r"[-/]")
_QUOTES_RE = re.compile(r"['’]")
_UNDERSCORES_RE = re.compile(r"_+")

FALLBACK_SLUG = "item"


def slugify(text: str) -> str:
    """Convert free-form Turkish text into an `[a-z0-9_]` identifier."""
    s = text.strip().lower()
    s = s.replace(_DOTTED_I, "i").translate(_TURKISH_TO_ASCII)

    s = _SEPARATORS_RE.sub(" ", s)
    s = _QUOTES_RE.sub("", s)

    chars: list[str] = []
    prev_underscore = False
    for ch in s:
        if "a" <= ch <= "z" or "0" <= ch <= "9":
            chars.append(ch)
            prev_underscore = False
        elif ch in (" ", "_"):
            if not prev_underscore:
                chars.append("_")
                prev_underscore = True
        # anything else is dropped

    out = _UNDERSCORES_RE.sub("_", "".join(chars).strip("_"))
    return out or FALLBACK_SLUG
