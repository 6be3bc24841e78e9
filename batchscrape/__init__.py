"""batchscrape — concurrent multi-URL scraping with per-URL failure isolation."""
