"""Cell references, ranges, colours, formulas and chart XML for spreadsheet parts."""

__version__ = "0.1.0"