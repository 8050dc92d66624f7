"""Register ingestion.

This module downloads the published register and parses it into
typed licence collections.
"""
