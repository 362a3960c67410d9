"""
Agent implementations for CSAT Pulse.

Contains the modules that take raw review rows through the pipeline:
- Ingestion Agent
- Column Resolver
- Review Aggregator
- Metrics Deriver
- Ranker and Badge Assigner
- View Filter
"""
