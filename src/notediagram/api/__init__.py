"""HTTP surface over the analysis and diagram core."""
