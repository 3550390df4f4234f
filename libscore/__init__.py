"""Quality and trending scores for package directory entries."""
