# colordna

Colour DNA/RNA sequences and quality scores in your terminal.

`colordna` reads FASTA, FASTQ, SAM and VCF data and prints it back with every
nucleotide coloured with ANSI escape sequences. Quality strings are shown as a
gradient from red (poor) to green (good), or as dim/normal/bold in the
monochrome scheme. It works out the format from the file extension and, if
that fails, from the first ten lines of the content.

What gets coloured:

- FASTA: sequence lines; `>` header lines are printed unchanged.
- FASTQ: sequence and quality lines; `@` and `+` lines are printed unchanged.
- SAM: the SEQ and QUAL columns of alignment lines; `@` header lines are
  printed unchanged.
- VCF: the REF and ALT columns of data lines; `#` header lines are printed
  unchanged.

## Installation

```
pip install .
```

## Usage

```
colordna sequences.fasta
colordna --scheme classic reads.fastq
cat alignments.sam | colordna
colordna file1.fasta file2.fastq
colordna -v variants.vcf
```

With no file arguments, standard input is read; if its format cannot be
detected, `colordna` reports an error and exits with status 1. When a named
file cannot be opened or its format cannot be detected, it is skipped, and
`-v` reports why.

Options:

- `-s`, `--scheme NAME`: colour scheme to use (default `bright`)
- `--config PATH`: configuration file (default `~/.colordna.yaml`)
- `-v`, `--verbose`: report progress, detected formats and line/record counts
  on standard error

### Schemes

List the available schemes, marking the selected one and whether each uses
background colours:

```
colordna schemes
```

Show how one scheme, or all of them, looks:

```
colordna preview
colordna preview pastel
```

The built-in schemes are `bright` (font colours), `classic` and `pastel`
(background colours) and `monochrome` (bold, underline, italic and similar
styles).

## Configuration

If the configuration file is missing, it is created with the built-in schemes
and an explanatory header. If it cannot be created or read, the built-in
schemes are used. A file that is not valid YAML, or whose schemes have the
wrong shape, is an error.

Add schemes under `color_schemes` with one ANSI sequence per base:

```yaml
color_schemes:
  mine:
    a: "\e[91m"
    t: "\e[92m"
    g: "\e[93m"
    c: "\e[94m"
    u: "\e[95m"
    n: "\e[90m"
    quality: gradient   # gradient, mono, or anything else for no colour
    background: false
```

Characters other than A, T, G, C, U and N take the `n` colour. If a built-in
scheme is missing from the file, its default is used.

## Library use

```python
import io

from colordna.cli import process_stream
from colordna.colorer import Colorer
from colordna.config import default_config
from colordna.parser import Format, detect_format_from_content

colorizer = Colorer(default_config().color_schemes["bright"])
print(colorizer.colorize_sequence("ATGCGATCGA"))
print(colorizer.colorize_quality("IIIII#####"))
print(detect_format_from_content([">seq1", "ACGT"]) is Format.FASTA)

lines, records = process_stream(io.StringIO(">seq1\nACGT\n"), colorizer)
```

The modules are:

- `colordna.parser`: `Format`, format detection from file names and content,
  and the `is_*_sequence` / `is_sequence_line` / `is_quality_line` checks.
- `colordna.config`: `ColorScheme`, `Config`, `ConfigError`,
  `default_config`, `parse_config`, `create_default_config` and `load`.
- `colordna.colorer`: `Colorer` (sequence, quality, SAM, VCF and free-text
  colouring) and `quality_color`.
- `colordna.cli`: the `colordna` command (`main`), with `process_stream`,
  `format_line` and `show_scheme_preview`.