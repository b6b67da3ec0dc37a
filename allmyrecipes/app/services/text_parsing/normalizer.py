"""Canonicalize pasted or OCR'd recipe text before classification."""

import re

from allmyrecipes.app.services.text_parsing.constants import (
    BULLET,
    BULLET_GLYPHS,
    FRACTION_CHARS,
    FRACTION_MAP,
    LIGATURES,
    UNITS,
)

_INVISIBLE_RE = re.compile("[\u00ad\u200b\u200c\u200d\u2060\ufeff]")
_SPACE_LIKE_RE = re.compile("[\u00a0\u2007\u2009\u200a\u202f]")
_SYMBOL_RE = re.compile("[\u2122\u00ae\u00a9]")
_SINGLE_QUOTES_RE = re.compile("[\u2018\u2019\u201a\u201b\u2032]")
_DOUBLE_QUOTES_RE = re.compile("[\u201c\u201d\u201e\u201f\u2033]")
_DASHES_RE = re.compile("[\u2010\u2011\u2012\u2013\u2014\u2015\u2212]")
_GLUED_FRACTION_RE = re.compile(rf"(\d)([{FRACTION_CHARS}])")
_FRACTION_SLASH_RE = re.compile(r"(\d)\s*\u2044\s*(\d)")
_BULLET_GLYPH_RE = re.compile(f"[{re.escape(BULLET_GLYPHS)}]")
_MIDDLE_DOT_RE = re.compile(r"(?<=[ \t])\u00b7(?=[ \t])")
_HORIZONTAL_SPACE_RE = re.compile(r"[^\S\n]+")
_LINE_EDGE_SPACE_RE = re.compile(r"^ +| +$", re.M)
_OCR_NUMERAL_MARKER_RE = re.compile(r"^[Il][.)] +", re.M)
# "l cup sugar" / "• l cup sugar" -> "1 cup sugar"; only unambiguous unit words qualify
_OCR_NUMERAL_QUANTITY_RE = re.compile(
    r"^([-*%s] )?[Il](?= (?i:%s)\b)"
    % (BULLET, "|".join(re.escape(u) for u in sorted(UNITS, key=len, reverse=True))),
    re.M,
)
_HYPHEN_WRAP_RE = re.compile(r"(?<=[A-Za-z])-\n(?=[a-z])")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Return a canonical form of recipe text.

    Unifies line endings, typography (quotes, dashes, ligatures, bullets and
    vulgar fractions), strips trademark glyphs, repairs common OCR slips such
    as a leading ``l.`` standing in for ``1.``, joins hyphenated line wraps and
    squeezes blank-line runs. Applying it twice gives the same result as once.
    """
    if not text:
        return ""
    s = text.replace("\r\n", "\n").replace("\r", "\n")
    s = _INVISIBLE_RE.sub("", s)
    s = _SPACE_LIKE_RE.sub(" ", s)
    s = _SYMBOL_RE.sub("", s)
    s = _SINGLE_QUOTES_RE.sub("'", s)
    s = _DOUBLE_QUOTES_RE.sub('"', s)
    s = _DASHES_RE.sub("-", s)
    for ligature, letters in LIGATURES.items():
        s = s.replace(ligature, letters)

    # "1½" -> "1 ½" before the glyph itself is expanded
    s = _GLUED_FRACTION_RE.sub(r"\1 \2", s)
    for glyph, ascii_fraction in FRACTION_MAP.items():
        s = s.replace(glyph, ascii_fraction)
    s = _FRACTION_SLASH_RE.sub(r"\1/\2", s)

    s = _MIDDLE_DOT_RE.sub(BULLET, s)
    s = _BULLET_GLYPH_RE.sub(BULLET, s)

    s = _HORIZONTAL_SPACE_RE.sub(" ", s)
    s = _LINE_EDGE_SPACE_RE.sub("", s)

    s = _OCR_NUMERAL_MARKER_RE.sub("1. ", s)
    s = _OCR_NUMERAL_QUANTITY_RE.sub(r"\g<1>1", s)
    s = _HYPHEN_WRAP_RE.sub("", s)
    s = _BLANK_RUN_RE.sub("\n\n", s)
    return s.strip()
