"""HTTP surface and presentation helpers."""
