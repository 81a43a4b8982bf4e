"""File-backed translation loading and resolution."""
