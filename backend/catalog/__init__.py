"""Catalog service: brands, categories and items."""
