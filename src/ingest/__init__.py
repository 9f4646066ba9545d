"""Article ingestion pipeline.

This module reads article sources and loads them into the search store
through sequential bulk requests.
"""
