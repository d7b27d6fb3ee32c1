"""HTTP routers for the HashHunt API."""
