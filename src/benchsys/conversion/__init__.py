"""Unit conversions used when rendering system information."""
