"""Tierlist templates: titled sets of rankable items."""
