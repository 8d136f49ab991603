"""larder: receipt item name normalization for the household food inventory."""

__version__ = "0.3.0"
