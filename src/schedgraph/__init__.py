"""Directed-graph scheduling analysis: SCCs, topological order, DAG paths."""
