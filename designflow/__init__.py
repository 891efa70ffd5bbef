# type: ignore
"""DesignFlow: design request intake and scheduling service."""
