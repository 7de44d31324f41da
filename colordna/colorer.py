"""ANSI colouring of sequences, quality strings and SAM/VCF records."""

from __future__ import annotations

from colordna.config import ColorScheme
from colordna.parser import is_quality_line, is_sequence_line

__all__ = ["RESET", "Colorer", "quality_color"]

RESET = "\033[0m"

_BOLD = "\033[1m"
_NORMAL = "\033[0m"
_DIM = "\033[2m"

_TRIM_CHARS = ".,;:!?()[]{}\"'"

_PREVIEW_SEQUENCE = "ATGCUN"
_PREVIEW_QUALITY = "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJ"


def _upper(text: str) -> str:
    """Upper-case per character, keeping characters without a one-character upper form."""
    return "".join(ch.upper() if len(ch.upper()) == 1 else ch for ch in text)


def quality_color(phred: int) -> str:
    """Return the ANSI colour for a Phred score, from dark red (low) to bright green (high)."""
    if phred >= 40:
        return "\033[92m"
    if phred >= 30:
        return "\033[32m"
    if phred >= 20:
        return "\033[93m"
    if phred >= 10:
        return "\033[91m"
    return "\033[31m"


def _mono_style(phred: int) -> str:
    if phred >= 30:
        return _BOLD
    if phred >= 20:
        return _NORMAL
    return _DIM


def _wrap(code: str, char: str) -> str:
    return f"{code}{char}{RESET}" if code else char


class Colorer:
    """Applies a colour scheme to sequence data."""

    def __init__(self, scheme: ColorScheme) -> None:
        self.scheme = scheme
        self._nucleotides = {
            "A": scheme.a,
            "T": scheme.t,
            "G": scheme.g,
            "C": scheme.c,
            "U": scheme.u,
            "N": scheme.n,
        }

    def _nucleotide_color(self, char: str) -> str:
        # Other characters (ambiguity codes, amino acids) fall back to the N colour.
        return self._nucleotides.get(char, self.scheme.n)

    def colorize_sequence(self, sequence: str) -> str:
        """Upper-case the sequence and colour each residue."""
        return "".join(_wrap(self._nucleotide_color(ch), ch) for ch in _upper(sequence))

    def colorize_quality(self, quality: str) -> str:
        """Colour a Phred+33 quality string according to the scheme's quality style."""
        if not quality:
            return quality
        if self.scheme.quality == "gradient":
            return "".join(_wrap(quality_color(ord(ch) - 33), ch) for ch in quality)
        if self.scheme.quality == "mono":
            return "".join(f"{_mono_style(ord(ch) - 33)}{ch}{RESET}" for ch in quality)
        return quality

    def colorize_sam(self, line: str) -> str:
        """Colour the sequence and quality columns of a SAM alignment line."""
        fields = line.split("\t")
        if len(fields) < 11:
            return line
        sequence = fields[9]
        if sequence != "*" and is_sequence_line(sequence):
            fields[9] = self.colorize_sequence(sequence)
        quality = fields[10]
        if quality != "*" and is_quality_line(quality):
            fields[10] = self.colorize_quality(quality)
        return "\t".join(fields)

    def colorize_vcf(self, line: str) -> str:
        """Colour the REF and ALT columns of a VCF data line."""
        fields = line.split("\t")
        if len(fields) < 5:
            return line
        ref = fields[3]
        if ref != "." and is_sequence_line(ref):
            fields[3] = self.colorize_sequence(ref)
        alt = fields[4]
        if alt != ".":
            fields[4] = ",".join(
                self.colorize_sequence(allele) if is_sequence_line(allele) else allele
                for allele in alt.split(",")
            )
        return "\t".join(fields)

    def colorize_text(self, text: str) -> str:
        """Colour sequence-like words in free text, keeping surrounding punctuation.

        Words are re-joined with single spaces.
        """
        words = []
        for word in text.split():
            clean = word.strip(_TRIM_CHARS)
            if len(clean.encode("utf-8")) >= 3 and is_sequence_line(clean):
                start = word.index(clean)
                end = start + len(clean)
                word = word[:start] + self.colorize_sequence(clean) + word[end:]
            words.append(word)
        return " ".join(words)

    def has_color(self) -> bool:
        """Return True if any nucleotide has a colour configured."""
        return any(self._nucleotides.values())

    def preview(self) -> str:
        """Return sample lines showing the scheme."""
        result = f"DNA/RNA: {self.colorize_sequence(_PREVIEW_SEQUENCE)}\n"
        if self.scheme.quality == "gradient":
            result += f"Quality: {self.colorize_quality(_PREVIEW_QUALITY)}\n"
        return result