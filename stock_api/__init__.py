"""Stock API: products, categories and users behind JWT auth."""

__version__ = "0.1.0"
