"""Tabular and array-based analysis built on the glide performance core."""
