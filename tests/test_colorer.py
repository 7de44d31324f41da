import re

import pytest

from colordna.colorer import RESET, Colorer, quality_color
from colordna.config import ColorScheme, default_config

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip(text):
    return _ANSI.sub("", text)


@pytest.fixture
def marked():
    return Colorer(
        ColorScheme(a="<a>", t="<t>", g="<g>", c="<c>", u="<u>", n="<n>", quality="gradient")
    )


@pytest.fixture
def bright():
    return Colorer(default_config().color_schemes["bright"])


@pytest.fixture
def mono():
    return Colorer(default_config().color_schemes["monochrome"])


def test_empty_sequence_unchanged(marked):
    assert marked.colorize_sequence("") == ""


def test_sequence_each_base_wrapped(marked):
    assert marked.colorize_sequence("ATGCUN") == (
        "<a>A" + RESET + "<t>T" + RESET + "<g>G" + RESET
        + "<c>C" + RESET + "<u>U" + RESET + "<n>N" + RESET
    )


def test_sequence_is_uppercased(marked):
    assert strip(marked.colorize_sequence("acgt")) == "<a>A<c>C<g>G<t>T".replace("<a>", "").replace(
        "<c>", ""
    ).replace("<g>", "").replace("<t>", "")
    assert marked.colorize_sequence("a") == marked.colorize_sequence("A")


def test_other_characters_use_n_color(marked):
    assert marked.colorize_sequence("R") == "<n>R" + RESET


def test_other_characters_plain_without_n_color():
    colorer = Colorer(ColorScheme(a="<a>"))
    assert colorer.colorize_sequence("RA") == "R<a>A" + RESET


def test_bright_scheme_codes(bright):
    assert bright.colorize_sequence("A") == "\033[91mA" + RESET


@pytest.mark.parametrize(
    "phred, code",
    [
        (41, "\033[92m"),
        (40, "\033[92m"),
        (39, "\033[32m"),
        (30, "\033[32m"),
        (20, "\033[93m"),
        (10, "\033[91m"),
        (9, "\033[31m"),
        (-1, "\033[31m"),
    ],
)
def test_quality_color_thresholds(phred, code):
    assert quality_color(phred) == code


def test_gradient_quality(bright):
    assert bright.colorize_quality("I") == "\033[92mI" + RESET
    assert bright.colorize_quality("!") == "\033[31m!" + RESET


def test_gradient_quality_preserves_text(bright):
    quality = "!\"#)*+./:9?EFIJK"
    assert strip(bright.colorize_quality(quality)) == quality


def test_mono_quality(mono):
    assert mono.colorize_quality("?") == "\033[1m?" + RESET
    assert mono.colorize_quality("5") == "\033[0m5" + RESET
    assert mono.colorize_quality("!") == "\033[2m!" + RESET


def test_quality_without_style_unchanged():
    colorer = Colorer(ColorScheme(a="<a>"))
    assert colorer.colorize_quality("IIII") == "IIII"


def test_empty_quality_unchanged(bright):
    assert bright.colorize_quality("") == ""


def _sam(seq, qual):
    return "\t".join(["r1", "0", "chr1", "100", "60", "4M", "*", "0", "0", seq, qual])


def test_sam_colors_sequence_and_quality(bright):
    result = bright.colorize_sam(_sam("ACGT", "IIII"))
    fields = result.split("\t")
    assert fields[:9] == _sam("ACGT", "IIII").split("\t")[:9]
    assert fields[9] == bright.colorize_sequence("ACGT")
    assert fields[10] == bright.colorize_quality("IIII")


def test_sam_star_fields_untouched(bright):
    line = _sam("*", "*")
    assert bright.colorize_sam(line) == line


def test_sam_short_line_unchanged(bright):
    line = "a\tb\tc"
    assert bright.colorize_sam(line) == line


def test_sam_non_sequence_left_alone(bright):
    line = _sam("AC-T", "IIII")
    fields = bright.colorize_sam(line).split("\t")
    assert fields[9] == "AC-T"
    assert fields[10] == bright.colorize_quality("IIII")


def test_vcf_colors_ref_and_alts(bright):
    line = "chr1\t100\trs1\tA\tG,TT\t50\tPASS\t."
    fields = bright.colorize_vcf(line).split("\t")
    assert fields[3] == bright.colorize_sequence("A")
    assert fields[4] == bright.colorize_sequence("G") + "," + bright.colorize_sequence("TT")
    assert fields[5:] == ["50", "PASS", "."]
    assert strip(bright.colorize_vcf(line)) == line


def test_vcf_symbolic_alt_untouched(bright):
    line = "chr1\t100\t.\tA\t<DEL>\t50"
    fields = bright.colorize_vcf(line).split("\t")
    assert fields[4] == "<DEL>"


def test_vcf_dot_fields_and_short_line(bright):
    line = "chr1\t100\t.\t.\t."
    assert bright.colorize_vcf(line) == line
    assert bright.colorize_vcf("chr1\t100") == "chr1\t100"


def test_colorize_text_preserves_punctuation(bright):
    result = bright.colorize_text("the motif (ACGT), ok")
    assert strip(result) == "the motif (ACGT), ok"
    assert "(" + bright.colorize_sequence("ACGT") + ")," in result


def test_colorize_text_short_words_untouched(bright):
    assert bright.colorize_text("at  ga") == "at ga"


def test_has_color():
    assert Colorer(default_config().color_schemes["pastel"]).has_color()
    assert not Colorer(ColorScheme(quality="gradient")).has_color()
    assert Colorer(ColorScheme(u="<u>")).has_color()


def test_preview_gradient(bright):
    lines = bright.preview().splitlines()
    assert len(lines) == 2
    assert lines[0] == "DNA/RNA: " + bright.colorize_sequence("ATGCUN")
    assert lines[1].startswith("Quality: ")


def test_preview_mono_has_no_quality(mono):
    assert mono.preview() == "DNA/RNA: " + mono.colorize_sequence("ATGCUN") + "\n"