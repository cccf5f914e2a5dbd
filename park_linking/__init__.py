"""
Park Linking - entity resolution between federal and crowd-sourced park records.

Links parks from the federal registry (NPS) to the crowd-sourced knowledge
base (Wikidata) by name and location similarity, and persists the links to
the park graph.
"""

__version__ = "0.1.0"
