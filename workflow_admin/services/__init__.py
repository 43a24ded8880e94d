"""Service layer for Workflow Admin."""
