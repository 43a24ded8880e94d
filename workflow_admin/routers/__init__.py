"""HTTP routers for Workflow Admin."""
