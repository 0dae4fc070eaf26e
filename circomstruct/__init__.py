"""Program structure for the circom circuit language: syntax tree, diagnostics, program archive and runtime helpers."""

__version__ = "2.1.5"