"""Search store layer.

This module talks to Elasticsearch: client construction, index
provisioning, and bulk request submission for the SDK.
"""
