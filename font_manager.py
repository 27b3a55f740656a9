from typing import Dict, Iterable, List, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.rl_codecs import RL_Codecs
from reportlab.pdfbase.ttfonts import TTFont
from matplotlib.font_manager import findfont, FontProperties

from config import DEFAULT_TEXT_ENCODING, FALLBACK_FONT_NAME
from logger import logger, track_warning, track_warning_once
from unit_converter import UnitConverter

# Glyph used for characters the font cannot map
NOTDEF_GLYPH = 0

# Makes ReportLab's own "symbol" and "zapfdingbats" codecs available to str.encode
RL_Codecs.register()

# ReportLab single byte encodings and the Python codecs that match them
_ENCODING_CODECS = {
    "WinAnsiEncoding": "cp1252",
    "MacRomanEncoding": "mac_roman",
    "SymbolEncoding": "symbol",
    "ZapfDingbatsEncoding": "zapfdingbats",
}

_METRICS_CACHE: Dict[str, "FontMetrics"] = {}


def register_font_safely(font_name: str) -> bool:
    """
    Register a system font with ReportLab, looking it up by family name.

    Returns:
        bool: True if registered (now or before), False if not found or failed.
    """
    if font_name in pdfmetrics.getRegisteredFontNames():
        logger.debug(f"[Font] '{font_name}' already registered.")
        return True
    try:
        font_prop = FontProperties(family=font_name)
        font_path = findfont(font_prop, fallback_to_default=True)
        if font_path:
            pdfmetrics.registerFont(TTFont(font_name, font_path))
            logger.info(f"[Font] Registered '{font_name}' from: {font_path}")
            return True
        else:
            logger.warning(f"[Font] Could not find path for font: {font_name}")
            return False
    except Exception as e:
        logger.warning(f"[Font] Failed to register font '{font_name}': {e}")
        return False


def resolve_font(font: Union[str, pdfmetrics.Font, TTFont]):
    """
    Return a ReportLab font object for a font name or font object.

    The standard 14 PDF fonts resolve directly. Other names are looked up on
    the system and registered on demand; if that fails the fallback font is
    used and a warning is tracked.
    """
    if not isinstance(font, str):
        return font
    try:
        return pdfmetrics.getFont(font)
    except Exception:
        logger.debug(f"[Font] '{font}' is not a built-in font, searching the system.")
    if register_font_safely(font):
        return pdfmetrics.getFont(font)
    track_warning("FontFallback", f"Font '{font}' unavailable, falling back to {FALLBACK_FONT_NAME}.")
    return pdfmetrics.getFont(FALLBACK_FONT_NAME)


class FontMetrics:
    """
    Character to glyph mapping and advance widths of a ReportLab font.

    ReportLab normalises all widths to a 1000 unit em, for TrueType fonts as
    well as for the built-in Type 1 fonts.
    """
    units_per_em = 1000

    def __init__(self, font):
        self.font = font
        self.font_name = font.fontName
        self.is_truetype = isinstance(font, TTFont)
        if self.is_truetype:
            face = font.face
            self._char_to_glyph = dict(face.charToGlyph)
            self._glyph_widths = {
                glyph: face.charWidths.get(code, face.defaultWidth)
                for code, glyph in self._char_to_glyph.items()
            }
            self._glyph_widths[NOTDEF_GLYPH] = face.defaultWidth
        else:
            self._codec = _ENCODING_CODECS.get(font.encoding.name, "latin-1")
            self._glyph_widths = font.widths

    def glyphs_for_chars(self, codepoints: Iterable[int]) -> List[int]:
        glyphs = []
        for code in codepoints:
            glyph = self._glyph_for_char(code)
            if glyph is None:
                self._warn_missing(code)
                glyph = NOTDEF_GLYPH
            glyphs.append(glyph)
        return glyphs

    def widths_for_glyphs(self, glyphs: Iterable[int]) -> List[float]:
        if self.is_truetype:
            notdef = self._glyph_widths[NOTDEF_GLYPH]
            return [self._glyph_widths.get(g, notdef) for g in glyphs]
        return [self._glyph_widths[g] for g in glyphs]

    def _glyph_for_char(self, code: int):
        if self.is_truetype:
            return self._char_to_glyph.get(code)
        try:
            encoded = chr(code).encode(self._codec)
        except UnicodeEncodeError:
            return None
        return encoded[0] if len(encoded) == 1 else None

    def _warn_missing(self, code: int):
        track_warning_once(
            "MissingGlyph",
            (self.font_name, code),
            f"No glyph for U+{code:04X} in '{self.font_name}', using notdef.",
        )


def get_font_metrics(font) -> FontMetrics:
    """Cached FontMetrics for a font object or font name."""
    font = resolve_font(font)
    metrics = _METRICS_CACHE.get(font.fontName)
    if metrics is None or metrics.font is not font:
        metrics = FontMetrics(font)
        _METRICS_CACHE[font.fontName] = metrics
    return metrics


class TextMeasurer:
    """Measures the rendered width of a single line of text in user units."""

    def __init__(self, metrics: FontMetrics, font_size: float, converter: UnitConverter):
        self.metrics = metrics
        self.font_size = font_size
        self.converter = converter

    def measure_points(self, text: Union[str, bytes], encoding: str = DEFAULT_TEXT_ENCODING) -> float:
        if isinstance(text, bytes):
            text = text.decode(encoding)
        glyphs = self.metrics.glyphs_for_chars(ord(c) for c in text)
        widths = self.metrics.widths_for_glyphs(glyphs)
        return self.font_size * sum(widths) / self.metrics.units_per_em

    def measure_width(self, text: Union[str, bytes], encoding: str = DEFAULT_TEXT_ENCODING) -> float:
        return self.converter.from_points(self.measure_points(text, encoding))

    __call__ = measure_width
