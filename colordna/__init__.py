"""Colour DNA/RNA sequences and quality scores from FASTA, FASTQ, SAM and VCF data for terminal display."""

__version__ = "0.1.0"
__all__ = ["cli", "colorer", "config", "parser"]