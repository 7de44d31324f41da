"""Detection of sequence file formats and classification of sequence lines."""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Sequence

__all__ = [
    "Format",
    "detect_format_from_filename",
    "detect_format_from_content",
    "is_sequence_line",
    "is_quality_line",
    "is_dna_sequence",
    "is_rna_sequence",
    "is_protein_sequence",
]


class Format(Enum):
    """A recognised input file format."""

    UNKNOWN = "Unknown"
    FASTA = "FASTA"
    FASTQ = "FASTQ"
    SAM = "SAM"
    VCF = "VCF"

    def __str__(self) -> str:
        return self.value


_DNA = re.compile(r"[ATGCN]*")
_RNA = re.compile(r"[AUGCN]*")
_PROTEIN = re.compile(r"[ACDEFGHIKLMNPQRSTVWY]*")
_QUALITY = re.compile(r"[!-~]*")

_EXTENSIONS = {
    ".fasta": Format.FASTA,
    ".fa": Format.FASTA,
    ".fna": Format.FASTA,
    ".ffn": Format.FASTA,
    ".faa": Format.FASTA,
    ".frn": Format.FASTA,
    ".fastq": Format.FASTQ,
    ".fq": Format.FASTQ,
    ".sam": Format.SAM,
    ".vcf": Format.VCF,
}

_SAM_HEADERS = ("@HD", "@SQ", "@RG")


def _upper(text: str) -> str:
    """Upper-case character by character, keeping characters whose upper form is not one character."""
    return "".join(ch.upper() if len(ch.upper()) == 1 else ch for ch in text)


def _extension(filename: str) -> str:
    separators = {"/", os.sep}
    for index in range(len(filename) - 1, -1, -1):
        char = filename[index]
        if char in separators:
            break
        if char == ".":
            return filename[index:]
    return ""


def detect_format_from_filename(filename: str) -> Format:
    """Return the format implied by the file's extension."""
    return _EXTENSIONS.get(_extension(filename).lower(), Format.UNKNOWN)


def detect_format_from_content(lines: Sequence[str]) -> Format:
    """Guess the format from the first lines of a file."""
    if not lines:
        return Format.UNKNOWN

    if any(line.startswith("##fileformat=VCF") for line in lines):
        return Format.VCF

    for line in lines:
        if line.startswith(_SAM_HEADERS):
            return Format.SAM
        if not line.startswith("@") and line.count("\t") >= 10:
            return Format.SAM

    fasta_headers = 0
    fastq_headers = 0
    for index, line in enumerate(lines):
        if line.startswith(">"):
            fasta_headers += 1
        elif line.startswith("@") and index + 3 < len(lines):
            seq_line, plus_line, qual_line = lines[index + 1 : index + 4]
            if (
                plus_line.startswith("+")
                and is_sequence_line(seq_line)
                and is_quality_line(qual_line)
                and len(seq_line) == len(qual_line)
            ):
                fastq_headers += 1

    if fastq_headers:
        return Format.FASTQ
    if fasta_headers:
        return Format.FASTA
    return Format.UNKNOWN


def is_sequence_line(line: str) -> bool:
    """Return True if the line looks like a DNA, RNA or protein sequence."""
    if not line:
        return False
    upper = _upper(line)
    if _DNA.fullmatch(upper) or _RNA.fullmatch(upper):
        return True
    return len(upper) > 10 and _PROTEIN.fullmatch(upper) is not None


def is_quality_line(line: str) -> bool:
    """Return True if the line consists only of printable, non-space ASCII."""
    return bool(line) and _QUALITY.fullmatch(line) is not None


def is_dna_sequence(sequence: str) -> bool:
    """Return True if the sequence consists only of A, T, G, C and N."""
    return bool(sequence) and _DNA.fullmatch(_upper(sequence)) is not None


def is_rna_sequence(sequence: str) -> bool:
    """Return True if the sequence consists only of A, U, G, C and N."""
    return bool(sequence) and _RNA.fullmatch(_upper(sequence)) is not None


def is_protein_sequence(sequence: str) -> bool:
    """Return True if the sequence consists only of amino-acid letters."""
    return bool(sequence) and _PROTEIN.fullmatch(_upper(sequence)) is not None