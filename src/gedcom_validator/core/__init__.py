"""
Orchestration layer: shared context, pipeline and exception types.
"""
