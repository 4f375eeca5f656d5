"""fnm-desk — structured state over the fnm Node version manager."""

__version__ = "0.1.0"
