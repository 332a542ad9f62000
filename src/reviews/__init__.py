"""Reviews bounded context: text reviews with a 1-5 star rating.

Handles review validation and creation, persistence through a pluggable
repository (in-memory or Azure Cosmos DB), and the HTTP API for submitting
and listing reviews.
"""
