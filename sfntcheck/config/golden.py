"""
Golden reference data for proprietary fonts.

These fonts are generally available but are not redistributed with this
project because of licensing differences or file size concerns. The numerical
values below were extracted from specific versions of each font and can be
verified by dumping the relevant tables with ttx.

Updates are expected to be infrequent. For example, the fonts installed by the
Debian ttf-mscorefonts-installer package have last modified times no later
than 2001. If a publisher updates a font and the checks subsequently fail,
the expected versions should be updated too.
"""

from sfntcheck.core.types import GoldenEntry, Hinting, KernCase, Provider, QualifiedFontID

ADOBE = Provider.ADOBE
MICROSOFT = Provider.MICROSOFT
NONE = Hinting.NONE
FULL = Hinting.FULL


def _id(provider: Provider, filename: str) -> QualifiedFontID:
    return QualifiedFontID(provider, filename)


# Maps each font to its golden entry.
#
# min_glyph_count: the exact number of glyphs can differ across versions of a
# font, but as a sanity check there should be at least this many.
#
# first_unsupported_glyph: the engine is a work in progress and cannot yet
# load every glyph. When set, this is the index of the first unsupported
# glyph; it should increase over time (or become None) as support improves.
GOLDEN_ENTRIES: dict[QualifiedFontID, GoldenEntry] = {
    _id(ADOBE, "SourceCodePro-Regular.otf"): GoldenEntry(
        expected_version="Version 2.030;PS 1.0;hotconv 16.6.51;makeotf.lib2.5.65220",
        min_glyph_count=1500,
        first_unsupported_glyph=2,
        glyph_index_samples={
            0x0030: 877,  # DIGIT ZERO
            0x0041: 2,  # LATIN CAPITAL LETTER A
            0x0061: 28,  # LATIN SMALL LETTER A
            0x0104: 64,  # LATIN CAPITAL LETTER A WITH OGONEK
            0x0125: 323,  # LATIN SMALL LETTER H WITH CIRCUMFLEX
            0x01F4: 111,  # LATIN CAPITAL LETTER G WITH ACUTE
            0x03A3: 623,  # GREEK CAPITAL LETTER SIGMA
            0x2569: 1500,  # BOX DRAWINGS DOUBLE UP AND HORIZONTAL
            0x1F100: 0,  # DIGIT ZERO FULL STOP
        },
    ),
    _id(ADOBE, "SourceCodePro-Regular.ttf"): GoldenEntry(
        expected_version="Version 2.030;PS 1.000;hotconv 16.6.51;makeotf.lib2.5.65220",
        min_glyph_count=1500,
        first_unsupported_glyph=36,
        glyph_index_samples={
            0x0030: 877,  # DIGIT ZERO
            0x0041: 2,  # LATIN CAPITAL LETTER A
            0x01F4: 111,  # LATIN CAPITAL LETTER G WITH ACUTE
        },
    ),
    _id(ADOBE, "SourceHanSansSC-Regular.otf"): GoldenEntry(
        expected_version="Version 1.004;PS 1.004;hotconv 1.0.82;makeotf.lib2.5.63406",
        min_glyph_count=65535,
        first_unsupported_glyph=2,
        glyph_index_samples={
            0x0030: 17,  # DIGIT ZERO
            0x0041: 34,  # LATIN CAPITAL LETTER A
            0x00D7: 150,  # MULTIPLICATION SIGN
            0x1100: 365,  # HANGUL CHOSEONG KIYEOK
            0x25CA: 1254,  # LOZENGE
            0x2E9C: 1359,  # CJK RADICAL SUN
            0x304B: 1463,  # HIRAGANA LETTER KA
            0x4E2D: 9893,  # CJK Ideograph
            0xA960: 47537,  # HANGUL CHOSEONG TIKEUT-MIEUM
            0xFB00: 58919,  # LATIN SMALL LIGATURE FF
            0xFFEE: 59213,  # HALFWIDTH WHITE CIRCLE
            0x1F100: 59214,  # DIGIT ZERO FULL STOP
            0x1F248: 59449,  # TORTOISE SHELL BRACKETED CJK UNIFIED IDEOGRAPH-6557
            0x2F9F4: 61768,  # CJK COMPATIBILITY IDEOGRAPH-2F9F4
        },
    ),
    _id(ADOBE, "SourceSansPro-Regular.otf"): GoldenEntry(
        expected_version="Version 2.020;PS 2.0;hotconv 1.0.86;makeotf.lib2.5.63406",
        min_glyph_count=1800,
        first_unsupported_glyph=2,
        glyph_index_samples={
            0x0041: 2,  # LATIN CAPITAL LETTER A
            0x03A3: 592,  # GREEK CAPITAL LETTER SIGMA
            0x0435: 999,  # CYRILLIC SMALL LETTER IE
            0x2030: 1728,  # PER MILLE SIGN
        },
    ),
    _id(ADOBE, "SourceSansPro-Regular.ttf"): GoldenEntry(
        expected_version="Version 2.020;PS 2.000;hotconv 1.0.86;makeotf.lib2.5.63406",
        min_glyph_count=1800,
        first_unsupported_glyph=54,
        glyph_index_samples={
            0x0041: 2,  # LATIN CAPITAL LETTER A
            0x03A3: 592,  # GREEK CAPITAL LETTER SIGMA
            0x0435: 999,  # CYRILLIC SMALL LETTER IE
            0x2030: 1728,  # PER MILLE SIGN
        },
    ),
    _id(MICROSOFT, "Arial.ttf"): GoldenEntry(
        expected_version="Version 2.82",
        min_glyph_count=1200,
        first_unsupported_glyph=98,
        glyph_index_samples={
            0x0041: 36,  # LATIN CAPITAL LETTER A
            0x00F1: 120,  # LATIN SMALL LETTER N WITH TILDE
            0x0401: 556,  # CYRILLIC CAPITAL LETTER IO
            0x200D: 745,  # ZERO WIDTH JOINER
            0x20AB: 1150,  # DONG SIGN
            0x2229: 320,  # INTERSECTION
            0x04E9: 1319,  # CYRILLIC SMALL LETTER BARRED O
            0x1F100: 0,  # DIGIT ZERO FULL STOP
        },
        kerning_samples=(
            KernCase(2048, NONE, (ord("A"), ord("V")), -152),
            # GREEK SMALL LETTER THETA, GREEK SMALL LETTER LAMDA
            KernCase(2048, NONE, (0x03B8, 0x03BB), -39),
            KernCase(2048, NONE, (0x03BB, 0x03B8), 0),
        ),
    ),
    _id(MICROSOFT, "Comic_Sans_MS.ttf"): GoldenEntry(
        expected_version="Version 2.10",
        min_glyph_count=550,
        first_unsupported_glyph=98,
        glyph_index_samples={
            0x0041: 36,  # LATIN CAPITAL LETTER A
            0x03AF: 573,  # GREEK SMALL LETTER IOTA WITH TONOS
        },
        kerning_samples=(KernCase(2048, NONE, (ord("A"), ord("V")), 0),),
    ),
    _id(MICROSOFT, "Times_New_Roman.ttf"): GoldenEntry(
        expected_version="Version 2.82",
        min_glyph_count=1200,
        first_unsupported_glyph=98,
        glyph_index_samples={
            0x0041: 36,  # LATIN CAPITAL LETTER A
            0x0042: 37,  # LATIN CAPITAL LETTER B
            0x266A: 392,  # EIGHTH NOTE
            0xF041: 0,  # PRIVATE USE AREA
            0xF042: 0,  # PRIVATE USE AREA
        },
        kerning_samples=(
            KernCase(768, NONE, (ord("A"), ord("V")), -99),
            KernCase(768, FULL, (ord("A"), ord("V")), -128),
            KernCase(2048, NONE, (ord("A"), ord("A")), 0),
            KernCase(2048, NONE, (ord("A"), ord("T")), -227),
            KernCase(2048, NONE, (ord("A"), ord("V")), -264),
            KernCase(2048, NONE, (ord("T"), ord("A")), -164),
            KernCase(2048, NONE, (ord("T"), ord("T")), 0),
            KernCase(2048, NONE, (ord("T"), ord("V")), 0),
            KernCase(2048, NONE, (ord("V"), ord("A")), -264),
            KernCase(2048, NONE, (ord("V"), ord("T")), 0),
            KernCase(2048, NONE, (ord("V"), ord("V")), 0),
            # GREEK SMALL LETTER IOTA WITH DIALYTIKA AND TONOS, GREEK CAPITAL LETTER GAMMA
            KernCase(2048, NONE, (0x0390, 0x0393), 0),
            KernCase(2048, NONE, (0x0393, 0x0390), 76),
        ),
    ),
    _id(MICROSOFT, "Webdings.ttf"): GoldenEntry(
        expected_version="Version 1.03",
        min_glyph_count=200,
        glyph_index_samples={
            0x0041: 0,  # LATIN CAPITAL LETTER A
            0x0042: 0,  # LATIN CAPITAL LETTER B
            0x266A: 0,  # EIGHTH NOTE
            0xF041: 36,  # PRIVATE USE AREA
            0xF042: 37,  # PRIVATE USE AREA
        },
        kerning_samples=(KernCase(2048, NONE, (0xF041, 0xF042), 0),),
    ),
}
