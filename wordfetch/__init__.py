"""
wordfetch - dictionary scraping pipeline for the vocabulary app.

Packages:
- wordfetch.core: configuration, logging, data models, errors and word validation
- wordfetch.scrapers: HTTP fetching, dictionary sources, translation,
  fallback resolution, enrichment and batch processing
"""

__version__ = "1.0.0"
